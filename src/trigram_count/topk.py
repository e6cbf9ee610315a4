# trigram_count/topk.py
"""
Top-K selection over trigram counts.

Entries are ordered with an array-based binary heap (parent ``i``, children
``2i+1`` and ``2i+2``) keyed on count alone. There is no secondary key, so
entries with equal counts come out in whatever order the count mapping
iterated them; that order is not stable between runs.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping

from trigram_count.config import MAX_SEQUENCES

NO_SEQUENCES = -1


@dataclass(frozen=True)
class SequenceCount:
    """A trigram and the number of times it occurred."""

    sequence: str
    count: int


def _sift_down(items: List[SequenceCount], root: int, end: int) -> None:
    """Restore the max-heap property for items[root:end]."""
    while True:
        largest = root
        left = 2 * root + 1
        right = left + 1
        if left < end and items[left].count > items[largest].count:
            largest = left
        if right < end and items[right].count > items[largest].count:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def _heapify(items: List[SequenceCount]) -> None:
    n = len(items)
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(items, i, n)


def _extract_to_tail(items: List[SequenceCount], k: int) -> None:
    """
    Move the k largest entries to the tail of a max-heap, in ascending order.

    Each step swaps the root into the last heap slot and re-sifts.
    """
    n = len(items)
    for end in range(n - 1, n - 1 - k, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)


def heap_sort_top_sequences(sequences: List[SequenceCount]) -> None:
    """Sort ``sequences`` in place by count, highest first."""
    _heapify(sequences)
    _extract_to_tail(sequences, len(sequences))
    sequences.reverse()


def get_max_sequences(sequences_count: int, limit: int = MAX_SEQUENCES) -> int:
    """
    Return how many entries to emit for ``sequences_count`` entries.

    ``limit`` when there are at least that many, NO_SEQUENCES (-1) when there
    are none, otherwise all of them.
    """
    if sequences_count >= limit:
        return limit
    if sequences_count == 0:
        return NO_SEQUENCES
    return sequences_count


def select_top_sequences(
    counts: Mapping[str, int],
    limit: int = MAX_SEQUENCES,
) -> List[SequenceCount]:
    """Return the ``limit`` highest-count entries of ``counts``, highest first."""
    items = [SequenceCount(seq, n) for seq, n in counts.items()]
    return top_of(items, limit)


def top_of(items: List[SequenceCount], limit: int = MAX_SEQUENCES) -> List[SequenceCount]:
    """Select from a list of entries; reorders ``items`` in place."""
    k = get_max_sequences(len(items), limit)
    if k == NO_SEQUENCES:
        return []

    _heapify(items)
    _extract_to_tail(items, k)
    return items[len(items) - k:][::-1]
