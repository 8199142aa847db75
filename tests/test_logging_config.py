"""
Unit Tests — Logging Config
===========================
Handler setup: file always, coloured stderr only on request.
"""
import logging

import pytest

from daily.utils.logging_config import LOG_FORMAT, ColoredFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


def test_file_handler_only_by_default(tmp_path):
    log_dir = tmp_path / "logs"
    setup_logging(level=logging.DEBUG, log_dir=str(log_dir), console=False)

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0], logging.FileHandler)
    assert log_dir.is_dir()

    logging.getLogger("daily.test").info("hello from the wizard")
    root.handlers[0].flush()
    [log_file] = list(log_dir.glob("daily_*.log"))
    assert "hello from the wizard" in log_file.read_text(encoding="utf-8")


def test_console_handler_when_requested(tmp_path):
    setup_logging(level=logging.INFO, log_dir=str(tmp_path), console=True)

    handlers = logging.getLogger().handlers
    assert len(handlers) == 2
    assert any(isinstance(h.formatter, ColoredFormatter) for h in handlers)


def test_repeat_setup_does_not_duplicate(tmp_path):
    setup_logging(log_dir=str(tmp_path), console=False)
    setup_logging(log_dir=str(tmp_path), console=False)
    assert len(logging.getLogger().handlers) == 1


def test_third_party_loggers_quietened(tmp_path):
    setup_logging(level=logging.DEBUG, log_dir=str(tmp_path), console=False)
    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("daily").level == logging.DEBUG


def test_colored_formatter_has_a_format_per_level():
    for level in (logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL):
        fmt = ColoredFormatter.FORMATS[level]
        assert LOG_FORMAT in fmt
        assert fmt.endswith(ColoredFormatter.reset)


def test_colored_formatter_unknown_level_is_plain():
    record = logging.LogRecord("daily", 25, __file__, 1, "between levels", None, None)
    out = ColoredFormatter().format(record)
    assert "\x1b[" not in out
    assert "between levels" in out


def test_colored_formatter_wraps_level_colour():
    record = logging.LogRecord("daily", logging.ERROR, __file__, 1, "boom", None, None)
    out = ColoredFormatter().format(record)
    assert out.startswith(ColoredFormatter.red)
    assert out.endswith(ColoredFormatter.reset)
    assert "boom" in out
