"""Default JSON payload decoder for hierarchy entries."""

import json
import logging

from hierarchy_reader.hierarchy.entry import Entry
from hierarchy_reader.reader.types import ParsingStats

logger = logging.getLogger(__name__)


def decode_entry(key: int, payload: str, stats: ParsingStats) -> Entry | None:
    """
    Decode a JSON payload into an Entry.

    The payload must be a JSON object with a string "kind" and, optionally,
    a string "name". Any other shape counts as a bad payload. Never raises:
    failures are reported by returning None after bumping stats.bad_payloads.
    """
    try:
        obj = json.loads(payload)
    except (ValueError, RecursionError):
        logger.warning("Cannot parse JSON payload for key %d: %r", key, payload)
        stats.bad_payloads += 1
        return None

    if not isinstance(obj, dict):
        logger.warning("Payload for key %d is not a JSON object: %r", key, payload)
        stats.bad_payloads += 1
        return None

    kind = obj.get("kind")
    name = obj.get("name", "")
    if not isinstance(kind, str) or not kind or not isinstance(name, str):
        logger.warning("Payload for key %d has no usable kind/name: %r", key, payload)
        stats.bad_payloads += 1
        return None

    return Entry(key=key, kind=kind, name=name, payload=obj)
