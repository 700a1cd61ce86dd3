"""Tests for Sampler logging setup."""
import logging

import pytest

from sampler.core import logger as logger_module
from sampler.core.logger import get_logger, setup_file_logging


def _drop_file_handler(root):
    handler = logger_module._file_handler
    if handler is not None:
        root.removeHandler(handler)
        handler.close()
    logger_module._file_handler = None


@pytest.fixture
def reset_logging():
    root = logging.getLogger("sampler")
    level = root.level
    _drop_file_handler(root)
    yield
    _drop_file_handler(root)
    root.setLevel(level)


def test_module_loggers_inherit_package_level():
    log = get_logger("sampler.samples.example")
    assert log.level == logging.NOTSET
    assert log.propagate is True


def test_verbose_file_logging_captures_debug(tmp_path, reset_logging):
    log_file = tmp_path / "logs" / "sampler.log"

    assert setup_file_logging(log_file=str(log_file), verbose=True) == log_file
    get_logger("sampler.samples.cache").debug("cache detail")
    logger_module._file_handler.flush()

    assert "cache detail" in log_file.read_text()


def test_default_file_logging_skips_debug(tmp_path, reset_logging):
    log_file = tmp_path / "sampler.log"

    setup_file_logging(log_file=str(log_file))
    get_logger("sampler.samples.cache").debug("hidden detail")
    get_logger("sampler.samples.cache").info("visible line")
    logger_module._file_handler.flush()

    content = log_file.read_text()
    assert "visible line" in content
    assert "hidden detail" not in content
