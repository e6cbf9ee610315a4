# trigram_count/config.py
"""Run configuration for a single trigram count."""
from __future__ import annotations

import argparse
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_INPUT_PATH = Path("input.txt")
MAX_SEQUENCES = 100
STDIN_PATH = "-"


@dataclass(frozen=True)
class RunConfig:
    """Where to read from, how much to report, and how to log."""

    # Input
    input_path: Optional[Path] = DEFAULT_INPUT_PATH  # None: a path was expected but not given
    encoding: str = "utf-8"

    # Selection
    max_sequences: int = MAX_SEQUENCES

    # Behaviour
    progress: bool = False
    strict: bool = False  # exit non-zero on error instead of printing an empty result

    # Logging
    log_file: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def reads_stdin(self) -> bool:
        return self.input_path is not None and str(self.input_path) == STDIN_PATH


def config_from_args(args: argparse.Namespace) -> RunConfig:
    """
    Build a RunConfig from parsed CLI arguments.

    No positionals selects the default input file. With positionals, the
    second one is the input path and the first is ignored; a lone first
    positional leaves input_path unset so the open step reports it.
    """
    if args.mode is None:
        input_path: Optional[Path] = DEFAULT_INPUT_PATH
    elif args.path is None:
        input_path = None
    else:
        input_path = Path(args.path)

    return RunConfig(
        input_path=input_path,
        encoding=args.encoding,
        max_sequences=args.top,
        progress=args.progress,
        strict=args.strict,
        log_file=args.log_file,
        log_level=args.log_level,
    )
