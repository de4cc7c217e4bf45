"""Hierarchy Reader - Build a key-ordered hierarchy from a line-delimited file."""

from hierarchy_reader.hierarchy.entry import Entry
from hierarchy_reader.reader.cursor import HierarchyOpenError
from hierarchy_reader.reader.orchestrator import HierarchyReader, read_hierarchy
from hierarchy_reader.reader.types import ParsingStats

__all__ = ["Entry", "HierarchyOpenError", "HierarchyReader", "ParsingStats", "read_hierarchy"]
