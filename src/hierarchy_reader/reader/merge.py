"""K-way merge of reader partitions."""

from hierarchy_reader.hierarchy.entry import Entry
from hierarchy_reader.reader.types import Partition


def merge_partitions(partitions: list[Partition]) -> list[Entry]:
    """
    Merge key-sorted partitions into one key-sorted list.

    At each step the live partition heads are scanned in index order and the
    smallest key is taken; on equal keys the lowest partition index wins.
    A linear scan is enough for the handful of partitions MAX_READERS allows.
    Partitions are emptied once merged.
    """
    merged: list[Entry] = []

    heads = [0] * len(partitions)
    live = [i for i, part in enumerate(partitions) if part]

    while live:
        best = live[0]
        best_key = partitions[best][heads[best]].key
        for i in live[1:]:
            key = partitions[i][heads[i]].key
            if key < best_key:
                best, best_key = i, key

        merged.append(partitions[best][heads[best]])
        heads[best] += 1
        if heads[best] == len(partitions[best]):
            live.remove(best)

    for part in partitions:
        part.clear()

    return merged
