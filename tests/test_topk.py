# tests/test_topk.py
import pytest

from trigram_count.topk import (
    NO_SEQUENCES,
    SequenceCount,
    get_max_sequences,
    heap_sort_top_sequences,
    select_top_sequences,
    top_of,
)


def test_heap_sort_orders_by_count_descending():
    sequences = [
        SequenceCount("sequence1", 5),
        SequenceCount("sequence2", 2),
        SequenceCount("sequence3", 8),
        SequenceCount("sequence4", 3),
    ]
    heap_sort_top_sequences(sequences)
    assert sequences == [
        SequenceCount("sequence3", 8),
        SequenceCount("sequence1", 5),
        SequenceCount("sequence4", 3),
        SequenceCount("sequence2", 2),
    ]


def test_heap_sort_handles_empty_and_single():
    empty = []
    heap_sort_top_sequences(empty)
    assert empty == []

    one = [SequenceCount("a b c", 1)]
    heap_sort_top_sequences(one)
    assert one == [SequenceCount("a b c", 1)]


def test_heap_sort_keeps_all_entries_with_ties():
    sequences = [SequenceCount(f"s{i}", c) for i, c in enumerate([3, 1, 3, 2, 1, 3])]
    original = set(sequences)
    heap_sort_top_sequences(sequences)
    assert set(sequences) == original
    assert [s.count for s in sequences] == [3, 3, 3, 2, 1, 1]


def test_heap_sort_matches_sorted_on_larger_input():
    counts = [(i * 7919) % 103 for i in range(500)]
    sequences = [SequenceCount(f"s{i}", c) for i, c in enumerate(counts)]
    heap_sort_top_sequences(sequences)
    assert [s.count for s in sequences] == sorted(counts, reverse=True)


@pytest.mark.parametrize(
    "total, expected",
    [(105, 100), (100, 100), (99, 99), (50, 50), (1, 1), (0, NO_SEQUENCES)],
)
def test_get_max_sequences(total, expected):
    assert get_max_sequences(total) == expected


def test_get_max_sequences_custom_limit():
    assert get_max_sequences(10, limit=3) == 3
    assert get_max_sequences(2, limit=3) == 2
    assert get_max_sequences(0, limit=3) == -1


def test_select_top_sequences_caps_at_100():
    counts = {f"w{i} x y": i for i in range(250)}
    top = select_top_sequences(counts)
    assert len(top) == 100
    assert [s.count for s in top] == list(range(249, 149, -1))


def test_select_top_sequences_emits_all_when_fewer():
    counts = {"a b c": 5, "b c d": 2, "c d e": 8, "d e f": 3}
    top = select_top_sequences(counts)
    assert [s.count for s in top] == [8, 5, 3, 2]
    assert top[0] == SequenceCount("c d e", 8)


def test_select_top_sequences_empty_mapping():
    assert select_top_sequences({}) == []


def test_top_of_with_limit():
    items = [SequenceCount(f"s{i}", i) for i in range(10)]
    top = top_of(items, 3)
    assert [s.count for s in top] == [9, 8, 7]
