"""Count word trigrams in a text stream and report the most frequent ones."""
from __future__ import annotations

from trigram_count.counter import count_file, count_trigrams, process_sequence_counts
from trigram_count.errors import (
    FileOpenError,
    PatternCompileError,
    ScanError,
    TrigramCountError,
)
from trigram_count.topk import (
    SequenceCount,
    get_max_sequences,
    heap_sort_top_sequences,
    select_top_sequences,
)

__all__ = [
    "SequenceCount",
    "count_file",
    "count_trigrams",
    "process_sequence_counts",
    "heap_sort_top_sequences",
    "get_max_sequences",
    "select_top_sequences",
    "TrigramCountError",
    "FileOpenError",
    "ScanError",
    "PatternCompileError",
]
