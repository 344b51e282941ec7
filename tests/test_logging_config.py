"""Tests for logging setup."""

import logging

import pytest

from steam_appinfo.logging_config import parse_level, setup_logging


@pytest.fixture(autouse=True)
def _restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for h in root.handlers:
        if h not in handlers:
            h.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_parse_level_names():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level("ERROR") == logging.ERROR

def test_parse_level_unknown_or_empty():
    assert parse_level("chatty") == logging.WARNING
    assert parse_level("") == logging.WARNING
    assert parse_level(None) == logging.WARNING

def test_setup_logging_console_only():
    setup_logging("INFO")
    root = logging.getLogger()
    assert root.level == logging.INFO
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.StreamHandler)

def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "appinfo.log"
    setup_logging("DEBUG", log_file=str(log_file))
    logging.getLogger("steam_appinfo.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "hello file" in log_file.read_text(encoding="utf-8")

def test_console_format_depends_on_level():
    record = logging.LogRecord("steam_appinfo.x", logging.WARNING, __file__, 1, "careful", None, None)
    setup_logging("WARNING")
    assert logging.getLogger().handlers[0].format(record) == "steam-appinfo: careful"
    setup_logging("DEBUG")
    assert "steam_appinfo.x:1 careful" in logging.getLogger().handlers[0].format(record)
