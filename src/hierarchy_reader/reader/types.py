"""Shared constants and statistics structures for hierarchy reading."""

from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import TypeAlias

from hierarchy_reader.hierarchy.entry import Entry

# 1MB buffer for efficient I/O.
BUFFER_SIZE = 1024 * 1024

# Upper bound on concurrent readers. Each reader holds a full partition in
# memory until the merge, and all of them contend for the same cursor lock.
MAX_READERS = 8

# Progress is logged every LOG_BATCH loaded entries.
LOG_BATCH = 100_000

Partition: TypeAlias = list[Entry]


@dataclass
class ParsingStats:
    """Counters describing the outcome of every line handed to a reader."""

    num_loaded: int = 0
    bad_keys: int = 0
    bad_payloads: int = 0
    filtered_sentinels: int = 0
    empty_lines: int = 0
    empty_names: int = 0

    def add(self, other: "ParsingStats") -> None:
        """Sum another stats instance into this one."""
        for field in fields(self):
            setattr(self, field.name, getattr(self, field.name) + getattr(other, field.name))

    def __iadd__(self, other: "ParsingStats") -> "ParsingStats":
        self.add(other)
        return self

    @property
    def lines_accounted(self) -> int:
        """Non-empty lines, each counted under exactly one outcome."""
        return self.num_loaded + self.bad_keys + self.bad_payloads + self.filtered_sentinels


Decoder: TypeAlias = Callable[[int, str, ParsingStats], Entry | None]
