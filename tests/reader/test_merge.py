"""Tests for the k-way partition merge."""

from hierarchy_reader.hierarchy.entry import Entry
from hierarchy_reader.reader.merge import merge_partitions


def make(key: int, name: str = "") -> Entry:
    return Entry(key=key, kind="place", name=name)


class TestMergePartitions:
    """Test cases for merge_partitions."""

    def test_merges_into_ascending_order(self) -> None:
        partitions = [
            [make(1), make(4), make(9)],
            [make(2), make(3)],
            [make(0), make(10)],
        ]
        merged = merge_partitions(partitions)
        assert [e.key for e in merged] == [0, 1, 2, 3, 4, 9, 10]

    def test_equal_keys_prefer_lowest_partition_index(self) -> None:
        """Test the deterministic tie-break on duplicate keys."""
        partitions = [
            [make(5, "p0-a"), make(7, "p0-b")],
            [make(5, "p1-a"), make(5, "p1-b")],
            [make(5, "p2-a")],
        ]
        merged = merge_partitions(partitions)
        assert [e.name for e in merged] == ["p0-a", "p1-a", "p1-b", "p2-a", "p0-b"]

    def test_keeps_duplicates_within_partition_in_order(self) -> None:
        partitions = [[make(3, "first"), make(3, "second"), make(3, "third")]]
        merged = merge_partitions(partitions)
        assert [e.name for e in merged] == ["first", "second", "third"]

    def test_handles_empty_partitions(self) -> None:
        partitions = [[], [make(2)], [], [make(1)]]
        merged = merge_partitions(partitions)
        assert [e.key for e in merged] == [1, 2]

    def test_no_partitions(self) -> None:
        assert merge_partitions([]) == []
        assert merge_partitions([[], []]) == []

    def test_partitions_are_emptied(self) -> None:
        """Test that merged partitions are consumed."""
        partitions = [[make(1)], [make(2)]]
        merge_partitions(partitions)
        assert partitions == [[], []]

    def test_large_keys_order_as_unsigned(self) -> None:
        partitions = [[make(2**63)], [make(1), make(2**64 - 1)]]
        merged = merge_partitions(partitions)
        assert [e.key for e in merged] == [1, 2**63, 2**64 - 1]
