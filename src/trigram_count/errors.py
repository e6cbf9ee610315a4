# trigram_count/errors.py
from __future__ import annotations

ERR_FILE_OPENING = "Error occurred while opening the file"
ERR_FILE_SCANNING = "Error occurred while scanning the file"
ERR_PARSING_REGEXP = "Error occurred while parsing the regular expression"


class TrigramCountError(Exception):
    """Base class for failures that abort the counting pass."""

    prefix = "Error occurred while counting trigrams"

    def __init__(self, detail: object) -> None:
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class FileOpenError(TrigramCountError):
    """The input source could not be opened."""

    prefix = ERR_FILE_OPENING


class ScanError(TrigramCountError):
    """Reading or decoding failed partway through the input."""

    prefix = ERR_FILE_SCANNING


class PatternCompileError(TrigramCountError):
    """The tokenizing pattern could not be built."""

    prefix = ERR_PARSING_REGEXP
