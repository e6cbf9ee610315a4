# trigram_count/tokens.py
from __future__ import annotations

import re
from collections import deque
from typing import Deque, List, Optional

from trigram_count.errors import PatternCompileError

# A literal backslash escape (\n, \r, \t as two characters) or anything that
# is neither an ASCII letter nor whitespace.
TOKEN_PATTERN = r"\\[nrt]|[^a-zA-Z\s]"

WINDOW_SIZE = 3

# U+0130 is the only character whose full lowercase mapping is longer than
# one character; fold it the simple way so a word is never split in two.
_SIMPLE_LOWER = str.maketrans({"\u0130": "i"})


def compile_pattern(pattern: str = TOKEN_PATTERN) -> re.Pattern[str]:
    """Build the tokenizing pattern, raising PatternCompileError on failure."""
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternCompileError(exc) from exc


def split_words(line: str, pattern: re.Pattern[str]) -> List[str]:
    """
    Lowercase a line, blank out escapes and non-letters, and split it.

    Examples:
        >>> split_words("This is a test.", compile_pattern())
        ['this', 'is', 'a', 'test']
    """
    cleaned = pattern.sub(" ", line.translate(_SIMPLE_LOWER).lower())
    return cleaned.split()


class SlidingWindow:
    """The last three words seen; emits a trigram whenever it is full."""

    def __init__(self, size: int = WINDOW_SIZE) -> None:
        self.size = size
        self._words: Deque[str] = deque(maxlen=size)

    def __len__(self) -> int:
        return len(self._words)

    def push(self, word: str) -> Optional[str]:
        """Add a word, dropping the oldest; return the joined trigram once full."""
        self._words.append(word)
        if len(self._words) == self.size:
            return " ".join(self._words)
        return None
