# trigram_count/report.py
from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence, TextIO

from trigram_count.config import MAX_SEQUENCES, RunConfig
from trigram_count.topk import SequenceCount, get_max_sequences

logger = logging.getLogger(__name__)


def format_sequence(entry: SequenceCount) -> str:
    """Render one result line: '<word1> <word2> <word3> <count>'."""
    return f"{entry.sequence} {entry.count}"


def iter_highest_sequences(
    sequences: Sequence[SequenceCount],
    limit: int = MAX_SEQUENCES,
) -> Iterator[str]:
    """Yield result lines for the leading entries of an already sorted list."""
    for i in range(get_max_sequences(len(sequences), limit)):
        yield format_sequence(sequences[i])


def print_highest_sequences(
    sequences: Sequence[SequenceCount],
    limit: int = MAX_SEQUENCES,
    *,
    file: Optional[TextIO] = None,
) -> int:
    """Print result lines to stdout (or ``file``); return how many were printed."""
    printed = 0
    for line in iter_highest_sequences(sequences, limit):
        print(line, file=file)
        printed += 1
    return printed


def format_run_summary(
    config: RunConfig,
    *,
    unique_sequences: int,
    shown: int,
    failed: bool = False,
) -> str:
    """Build a short human-readable summary of the run."""
    if config.input_path is None:
        source = "(none given)"
    elif config.reads_stdin:
        source = "stdin"
    else:
        source = str(config.input_path)
    lines = [
        f"Input source:        {source}",
        f"Unique trigrams:     {unique_sequences:,}",
        f"Selection limit:     {config.max_sequences}",
        f"Entries shown:       {shown}",
        f"Strict mode:         {config.strict}",
    ]
    if failed:
        lines.append("Status:              failed")
    return "\n".join(lines) + "\n"


def log_run_summary(config: RunConfig, **kwargs) -> None:
    """Log the run summary at INFO level, one record per line."""
    summary = format_run_summary(config, **kwargs)
    for line in summary.rstrip("\n").splitlines():
        logger.info(line)
