# trigram_count/counter.py
from __future__ import annotations

import io
import logging
import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from tqdm import tqdm

from trigram_count.config import RunConfig
from trigram_count.errors import FileOpenError, ScanError, TrigramCountError
from trigram_count.tokens import SlidingWindow, compile_pattern, split_words
from trigram_count.topk import SequenceCount

logger = logging.getLogger(__name__)


def count_trigrams(
    lines: Iterable[str],
    counts: Dict[str, int],
    *,
    progress: bool = False,
    desc: str = "Counting trigrams",
) -> int:
    """
    Count every three-word sequence in ``lines`` into ``counts``.

    The window carries over line boundaries, so a trigram may span two
    lines. Returns the number of trigrams seen (repeats included).

    Raises:
        PatternCompileError: the tokenizing pattern cannot be built.
        ScanError: reading or decoding fails partway through.
    """
    window = SlidingWindow()
    seen = 0

    try:
        for line in tqdm(lines, desc=desc, unit="lines", disable=not progress,
                         file=sys.stderr, leave=False):
            pattern = compile_pattern()
            for word in split_words(line, pattern):
                trigram = window.push(word)
                if trigram is not None:
                    counts[trigram] = counts.get(trigram, 0) + 1
                    seen += 1
    except (OSError, UnicodeDecodeError) as exc:
        raise ScanError(exc) from exc

    return seen


def count_file(
    path: Union[str, Path],
    counts: Dict[str, int],
    *,
    encoding: str = "utf-8",
    progress: bool = False,
) -> int:
    """Open ``path``, count its trigrams into ``counts``, and close it."""
    try:
        fh = open(path, "r", encoding=encoding)
    except (OSError, LookupError) as exc:
        raise FileOpenError(exc) from exc

    with fh:
        logger.debug("Reading %s", path)
        return count_trigrams(fh, counts, progress=progress, desc=Path(path).name)


def count_stdin(
    counts: Dict[str, int],
    *,
    encoding: str = "utf-8",
    progress: bool = False,
) -> int:
    """Count standard input, decoded with ``encoding``; stdin stays open."""
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        # already a text stream without bytes underneath (embedding host)
        return count_trigrams(sys.stdin, counts, progress=progress, desc="stdin")

    try:
        stream = io.TextIOWrapper(buffer, encoding=encoding)
    except LookupError as exc:
        raise FileOpenError(exc) from exc

    try:
        return count_trigrams(stream, counts, progress=progress, desc="stdin")
    finally:
        stream.detach()


def process_sequence_counts(
    config: RunConfig,
) -> Tuple[List[SequenceCount], Optional[TrigramCountError]]:
    """
    Count the configured source and return its entries.

    On failure the partially filled mapping is discarded: the result is an
    empty list together with the error, and the caller decides whether to
    carry on.
    """
    counts: Dict[str, int] = {}

    try:
        if config.input_path is None:
            raise FileOpenError("no input path given")
        if config.reads_stdin:
            total = count_stdin(counts, encoding=config.encoding,
                                progress=config.progress)
        else:
            total = count_file(config.input_path, counts,
                               encoding=config.encoding, progress=config.progress)
    except TrigramCountError as err:
        return [], err

    logger.info("Counted %d trigrams (%d unique)", total, len(counts))
    return [SequenceCount(seq, n) for seq, n in counts.items()], None
