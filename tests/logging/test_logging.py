"""Tests for kcomb logging: root configuration and enumerator debug output."""

import logging
from io import StringIO

import pytest

from kcomb.choose import choose, choose_array
from kcomb.logging import (
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture
def capture():
    """Install a fresh root handler writing to a buffer."""
    reset_logging()
    buffer = StringIO()
    setup_root_logger(
        level=logging.INFO,
        format_string="%(levelname)s|%(name)s|%(message)s",
        handler=logging.StreamHandler(buffer),
    )
    yield buffer
    reset_logging()


def test_shape_log_hidden_at_default_level(capture) -> None:
    choose([6, 7, 8, 9], 3)
    assert capture.getvalue() == ""


def test_shape_log_emitted_after_enable_debug(capture) -> None:
    enable_debug_logging()
    choose([6, 7, 8, 9], 3)
    out = capture.getvalue()
    assert "DEBUG|kcomb.choose|" in out
    assert "Choosing k=3 from n=4: 4 rows x 3" in out


def test_array_shape_log_names_dtype(capture) -> None:
    enable_debug_logging()
    choose_array([1, 2, 3], 2)
    assert "into uint8 array of shape (3, 2)" in capture.getvalue()


def test_shape_logged_once_per_call(capture) -> None:
    """Only the outermost call logs, not each recursion level."""
    enable_debug_logging()
    choose(range(6), 4)
    assert capture.getvalue().count("Choosing") == 1


def test_global_level_applies_to_module_loggers(capture) -> None:
    module_logger = get_logger("kcomb.choose")
    assert module_logger.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert module_logger.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_is_idempotent(capture) -> None:
    root_logger = logging.getLogger("kcomb")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO
