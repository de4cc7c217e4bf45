"""Hierarchy entry type."""

from dataclasses import dataclass, field
from typing import Any

# Placeholder entries carrying counts rather than places. Never loaded.
SENTINEL_KIND = "count"


@dataclass(slots=True)
class Entry:
    """One decoded hierarchy record."""

    key: int
    kind: str
    name: str = ""
    payload: dict[str, Any] = field(default_factory=dict)

    @property
    def is_sentinel(self) -> bool:
        return self.kind == SENTINEL_KIND
