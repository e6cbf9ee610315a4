# tests/test_logger.py
from pathlib import Path
import logging
from logging import StreamHandler, FileHandler
from logging.handlers import RotatingFileHandler

import pytest

from trigram_count.logger import setup_logger

pytestmark = pytest.mark.usefixtures("clean_root_handlers")


@pytest.fixture()
def clean_root_handlers():
    """Start each test with a clean root logger; restore afterwards."""
    root = logging.getLogger()
    prev = list(root.handlers)
    prev_level = root.level
    for h in list(root.handlers):
        root.removeHandler(h)
    try:
        yield
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in prev:
            root.addHandler(h)
        root.setLevel(prev_level)


def _handler_types():
    return {type(h) for h in logging.getLogger().handlers}


def test_console_only_returns_none():
    assert setup_logger(force=True) is None
    assert _handler_types() == {StreamHandler}


def test_directory_gets_timestamped_file(tmp_path: Path):
    log_dir = tmp_path / "logs"

    log_path = setup_logger(log_dir, console=False, force=True)
    assert log_path.parent == log_dir
    assert log_path.name.startswith("trigram_count_")
    assert log_path.suffix == ".log"

    logging.getLogger().info("hello world")
    text = log_path.read_text(encoding="utf-8")
    assert "Logging to:" in text
    assert "hello world" in text


def test_file_path_is_used_as_is(tmp_path: Path):
    target = tmp_path / "run" / "count.log"
    log_path = setup_logger(target, console=False, force=True)
    assert log_path == target
    logging.getLogger("trigram_count.cli").error("boom")
    assert "ERROR    trigram_count.cli: boom" in target.read_text(encoding="utf-8")


def test_force_replaces_handlers_and_rotation(tmp_path: Path):
    setup_logger(tmp_path, console=True, force=True)
    types1 = _handler_types()
    assert FileHandler in types1
    assert StreamHandler in types1

    log_path = setup_logger(tmp_path, rotate=True, console=False, force=True)
    types2 = _handler_types()
    assert types2 == {RotatingFileHandler}

    logging.getLogger().warning("rotate test")
    assert "rotate test" in log_path.read_text(encoding="utf-8")


def test_level_accepts_names(tmp_path: Path):
    setup_logger(level="WARNING", force=True)
    assert logging.getLogger().level == logging.WARNING
