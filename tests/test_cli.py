"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from hierarchy_reader.cli import create_parser, main


def test_parser_defaults() -> None:
    args = create_parser().parse_args(["input.txt"])
    assert args.input_file == "input.txt"
    assert args.readers == 4
    assert args.show == 0
    assert args.log_level == "INFO"


def test_main_prints_entries_and_stats(tmp_path: Path, capsys) -> None:
    path = tmp_path / "hierarchy.txt"
    path.write_text(
        '100 {"kind":"place","name":"A"}\n'
        '50 {"kind":"place","name":"B"}\n'
        'xx {"kind":"place","name":"C"}\n'
        '100 {"kind":"count"}\n',
        encoding="utf-8",
    )

    assert main([str(path), "--readers", "2", "--show", "5", "--log-level", "ERROR"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "50\tplace\tB",
        "100\tplace\tA",
        "loaded=2 bad_keys=1 bad_payloads=0 filtered_sentinels=1 empty_lines=0",
    ]


def test_main_missing_file_returns_error(tmp_path: Path, capsys) -> None:
    assert main([str(tmp_path / "missing.txt"), "--log-level", "ERROR"]) == 1
    assert capsys.readouterr().out == ""


def test_negative_show_is_rejected(tmp_path: Path) -> None:
    with pytest.raises(SystemExit):
        main([str(tmp_path / "x.txt"), "--show", "-1"])
