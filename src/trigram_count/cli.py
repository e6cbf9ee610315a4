# trigram_count/cli.py
"""
Command-line entry point.

    trigram-count                      # reads ./input.txt
    trigram-count MODE PATH            # reads PATH; MODE is ignored
    trigram-count MODE -               # reads standard input

Errors are logged and, unless --strict is given, the run still prints its
(empty) result and exits 0.
"""
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional

from trigram_count.config import MAX_SEQUENCES, RunConfig, config_from_args
from trigram_count.counter import process_sequence_counts
from trigram_count.logger import setup_logger
from trigram_count.report import log_run_summary, print_highest_sequences
from trigram_count.topk import top_of

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="trigram-count",
        description="Count three-word sequences in a text file and print the most frequent.",
    )
    p.add_argument("mode", nargs="?", default=None,
                   help="Ignored; present for compatibility. Give PATH after it.")
    p.add_argument("path", nargs="?", default=None,
                   help="Input file ('-' for standard input). Default: input.txt")
    p.add_argument("--top", type=_positive_int, default=MAX_SEQUENCES,
                   help=f"Number of sequences to print (default: {MAX_SEQUENCES})")
    p.add_argument("--encoding", default="utf-8", help="Input encoding (default: utf-8)")
    p.add_argument("--progress", action="store_true", help="Show a progress bar on stderr")
    p.add_argument("--strict", action="store_true",
                   help="Exit with status 1 on error instead of printing an empty result")
    p.add_argument("--log-file", type=Path, default=None,
                   help="Also log to this file (or a timestamped file in this directory)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Logging level (default: INFO)")
    return p.parse_args(argv)


def _configure_logging(config: RunConfig) -> None:
    root = logging.getLogger()
    # Leave an already configured host (embedding app, test runner) alone.
    if root.handlers and config.log_file is None:
        return
    setup_logger(config.log_file, level=config.log_level, console=not root.handlers)


def run(config: RunConfig) -> int:
    """Count, select and print; return the process exit status."""
    sequences, err = process_sequence_counts(config)
    if err is not None:
        logger.error("%s", err)
        if config.strict:
            return 1

    unique = len(sequences)
    top = top_of(sequences, config.max_sequences)
    shown = print_highest_sequences(top, config.max_sequences)

    log_run_summary(config, unique_sequences=unique, shown=shown,
                    failed=err is not None)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    config = config_from_args(args)
    _configure_logging(config)
    return run(config)
