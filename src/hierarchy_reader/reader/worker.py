"""Reader loop: pulls lines from the shared cursor into a local partition."""

import logging
import re

from hierarchy_reader.reader.cursor import SharedCursor
from hierarchy_reader.reader.types import LOG_BATCH, Decoder, ParsingStats, Partition

logger = logging.getLogger(__name__)

_KEY_PATTERN = re.compile(r"[+-]?[0-9]+")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
UINT64_MASK = 2**64 - 1


def parse_key(token: str) -> int | None:
    """
    Parse a signed 64-bit key token and reinterpret it as unsigned.

    Returns None if the token is not a base-10 integer in int64 range.
    """
    if not _KEY_PATTERN.fullmatch(token):
        return None
    value = int(token)
    if value < INT64_MIN or value > INT64_MAX:
        return None
    return value & UINT64_MASK


def read_partition(
    cursor: SharedCursor,
    decoder: Decoder,
    stats: ParsingStats,
    reader_index: int = 0,
) -> Partition:
    """
    Drain lines from the cursor until it is exhausted.

    Every failure is per line: it is counted in stats and the loop moves on.
    The returned partition is sorted by key, equal keys in the order this
    reader loaded them.
    """
    entries: Partition = []

    while (line := cursor.take_next_line()) is not None:
        if not line:
            stats.empty_lines += 1
            continue

        key_token, sep, payload = line.partition(" ")
        key = parse_key(key_token) if sep else None
        if key is None:
            logger.warning("Cannot read key. Line: %r", line)
            stats.bad_keys += 1
            continue

        entry = decoder(key, payload, stats)
        if entry is None:
            continue

        if entry.is_sentinel:
            stats.filtered_sentinels += 1
            continue

        if not entry.name:
            stats.empty_names += 1

        entries.append(entry)
        stats.num_loaded += 1
        if stats.num_loaded % LOG_BATCH == 0:
            logger.info("Reader %d: read %d entries", reader_index, stats.num_loaded)

    # list.sort is stable, so duplicates keep their insertion order.
    entries.sort(key=lambda entry: entry.key)
    logger.debug("Reader %d: finished with %d entries", reader_index, len(entries))
    return entries
