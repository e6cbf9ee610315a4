"""Logging configuration for trigram counting runs."""
from __future__ import annotations

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

__all__ = ["setup_logger"]


def setup_logger(
        log_path: Optional[Union[str, Path]] = None,
        *,
        level: Union[int, str] = logging.INFO,
        filename_prefix: str = "trigram_count",
        console: bool = True,
        rotate: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 3,
        force: bool = False,
) -> Optional[Path]:
    """
    Configure root logging for a run.

    Standard output carries the results, so the console handler writes to
    stderr. When log_path is given, records also go to a file: a directory
    (or a suffix-less path) gets a timestamped log file inside it, any other
    path is used as the log file itself.

    Args:
        log_path: Log file or directory; None for console only
        level: Logging level (default: INFO)
        filename_prefix: Prefix for a generated log filename
        console: If True, also log to stderr
        rotate: If True, use RotatingFileHandler instead of FileHandler
        max_bytes: Maximum log file size before rotation (if rotate=True)
        backup_count: Number of backup files to keep (if rotate=True)
        force: If True, remove existing handlers before adding new ones

    Returns:
        Path to the log file, or None when logging only to the console

    Examples:
        >>> setup_logger("/tmp/runs")
        PosixPath('/tmp/runs/trigram_count_20250929_175430.log')
    """
    root = logging.getLogger()

    if force:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()

    root.setLevel(level)

    formatter = logging.Formatter(
        "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    file_path: Optional[Path] = None
    if log_path is not None:
        p = Path(log_path).expanduser()
        if p.is_dir() or not p.suffix:
            p.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            file_path = p / f"{filename_prefix}_{timestamp}.log"
        else:
            p.parent.mkdir(parents=True, exist_ok=True)
            file_path = p

        if rotate:
            file_handler: logging.Handler = RotatingFileHandler(
                file_path,
                maxBytes=max_bytes,
                backupCount=backup_count,
                encoding="utf-8",
            )
        else:
            file_handler = logging.FileHandler(file_path, mode="w", encoding="utf-8")

        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    if file_path is not None:
        root.info("Logging to: %s", file_path)
    return file_path
