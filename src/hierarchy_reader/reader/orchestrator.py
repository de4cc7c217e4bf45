import enum
import logging
import os
import time
from pathlib import Path

from hierarchy_reader.execution import (
    HR_EXECUTOR_ENV,
    describe_executor,
    get_executor_class,
    is_gil_enabled,
)
from hierarchy_reader.hierarchy.decode import decode_entry
from hierarchy_reader.hierarchy.entry import Entry
from hierarchy_reader.reader.cursor import SharedCursor
from hierarchy_reader.reader.merge import merge_partitions
from hierarchy_reader.reader.types import (
    LOG_BATCH,
    MAX_READERS,
    Decoder,
    ParsingStats,
    Partition,
)
from hierarchy_reader.reader.worker import read_partition

logger = logging.getLogger(__name__)


class ReaderState(enum.Enum):
    IDLE = "idle"
    READING = "reading"
    MERGING = "merging"
    DONE = "done"


def clamp_readers_count(requested: int) -> int:
    """Clamp a requested reader count to [1, MAX_READERS]."""
    count = max(1, min(requested, MAX_READERS))
    if count != requested:
        logger.warning("Readers count %d clamped to %d", requested, count)
    return count


class HierarchyReader:
    """
    Builds the key-ordered list of entries from a hierarchy file.

    The file is opened on construction; HierarchyOpenError is raised right
    away if that fails. A reader instance runs exactly once.
    """

    def __init__(self, path: str, decoder: Decoder = decode_entry):
        self._path = str(Path(path))
        self._decoder = decoder
        self._cursor = SharedCursor(self._path)
        self._state = ReaderState.IDLE

    @property
    def state(self) -> ReaderState:
        return self._state

    def close(self) -> None:
        """Release the input file without reading it."""
        self._cursor.close()

    def __enter__(self) -> "HierarchyReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run_reader(self, stats: ParsingStats, reader_index: int) -> Partition:
        try:
            return read_partition(self._cursor, self._decoder, stats, reader_index)
        except Exception:
            # Closing the cursor makes the other readers stop at their next line.
            logger.exception("Reader %d failed, stopping all readers", reader_index)
            self._cursor.close()
            raise

    def read_entries(self, readers_count: int, stats: ParsingStats) -> list[Entry]:
        """
        Read the whole file with readers_count concurrent readers.

        Per-reader stats are summed into `stats` once every reader has
        finished, then the partitions are merged.
        """
        if self._state is not ReaderState.IDLE:
            raise RuntimeError(f"HierarchyReader already used (state={self._state.value})")

        total_start = time.perf_counter()
        readers_count = clamp_readers_count(readers_count)

        executor_class = get_executor_class()
        executor_name = describe_executor(executor_class)
        gil_status = "enabled" if is_gil_enabled() else "disabled"
        executor_override = os.environ.get(HR_EXECUTOR_ENV, "")
        override_info = f", {HR_EXECUTOR_ENV}={executor_override}" if executor_override else ""

        logger.info(
            f"Reading entries: file={Path(self._path).name}, readers={readers_count}, "
            f"executor={executor_name}, GIL={gil_status}{override_info}"
        )

        self._state = ReaderState.READING
        t1_start = time.perf_counter()
        reader_stats = [ParsingStats() for _ in range(readers_count)]
        partitions: list[Partition]

        try:
            if executor_class is None:
                partitions = [self._run_reader(reader_stats[i], i) for i in range(readers_count)]
            else:
                with executor_class(max_workers=readers_count) as executor:
                    futures = [
                        executor.submit(self._run_reader, reader_stats[i], i)
                        for i in range(readers_count)
                    ]
                    partitions = [future.result() for future in futures]
        finally:
            self._cursor.close()

        for local in reader_stats:
            stats.add(local)
        t1 = time.perf_counter() - t1_start

        run_loaded = sum(local.num_loaded for local in reader_stats)
        if run_loaded % LOG_BATCH != 0:
            logger.info("Read %d entries", run_loaded)

        run_bad_keys = sum(local.bad_keys for local in reader_stats)
        run_bad_payloads = sum(local.bad_payloads for local in reader_stats)
        if run_bad_keys or run_bad_payloads:
            logger.warning(
                "Skipped %d lines with bad keys and %d with bad payloads (lines=%d)",
                run_bad_keys,
                run_bad_payloads,
                self._cursor.lines_read,
            )
        logger.info("Reading done in %.2fs", t1)

        self._state = ReaderState.MERGING
        logger.info("Sorting entries...")
        t2_start = time.perf_counter()
        entries = merge_partitions(partitions)
        t2 = time.perf_counter() - t2_start
        logger.info("Sorting done: %d entries in %.2fs", len(entries), t2)

        self._state = ReaderState.DONE
        logger.debug("Total %.2fs", time.perf_counter() - total_start)
        return entries


def read_hierarchy(
    path: str,
    readers_count: int = 4,
    stats: ParsingStats | None = None,
    decoder: Decoder = decode_entry,
) -> list[Entry]:
    """Open `path` and read it into a key-ordered list of entries."""
    if stats is None:
        stats = ParsingStats()
    return HierarchyReader(path, decoder).read_entries(readers_count, stats)
