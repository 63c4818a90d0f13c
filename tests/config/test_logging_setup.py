# topmark:header:start
#
#   project      : AnnoMark
#   file         : test_logging_setup.py
#   file_relpath : tests/config/test_logging_setup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TRACE-aware logging helpers in `annomark.config.logging`."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from annomark.config.logging import (
    TRACE_LEVEL,
    AnnomarkLogger,
    ChalkFormatter,
    StderrHandler,
    get_logger,
    level_from_name,
    resolve_env_log_level,
    setup_logging,
)
from annomark.constants import LOG_LEVEL_ENV_VAR


@pytest.fixture
def restore_trace_logging() -> Iterator[None]:
    """Put the suite-wide TRACE configuration back after the test."""
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.mark.parametrize(
    "name, level",
    [
        ("trace", TRACE_LEVEL),
        ("DEBUG", logging.DEBUG),
        (" warn ", logging.WARNING),
        ("15", 15),
        ("loud", None),
    ],
)
def test_level_from_name(name: str, level: int | None) -> None:
    """Names are case-insensitive; digits are taken as levels."""
    assert level_from_name(name) == level


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """ANNOMARK_LOG_LEVEL is read when set."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_env_log_level() == logging.INFO


def test_get_logger_has_trace() -> None:
    """Loggers are AnnomarkLogger instances."""
    logger = get_logger("annomark.tests.logging")
    assert isinstance(logger, AnnomarkLogger)


def test_trace_records_are_emitted(caplog: pytest.LogCaptureFixture) -> None:
    """trace() logs at the TRACE level."""
    logger = get_logger("annomark.tests.trace")
    with caplog.at_level(TRACE_LEVEL, logger="annomark.tests.trace"):
        logger.trace("matched %s", "x")
    assert [(r.levelno, r.getMessage()) for r in caplog.records] == [(TRACE_LEVEL, "matched x")]


@pytest.mark.usefixtures("restore_trace_logging")
def test_setup_logging_installs_one_stderr_handler(monkeypatch: pytest.MonkeyPatch) -> None:
    """setup_logging replaces root handlers with a colored stderr handler."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "ERROR")
    setup_logging()
    setup_logging()
    root = logging.getLogger()
    assert root.level == logging.ERROR
    ours = [h for h in root.handlers if isinstance(h, StderrHandler)]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_trace_logging")
def test_stderr_handler_follows_sys_stderr(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    """Records go to the current sys.stderr, not the one at setup time."""
    setup_logging(level=logging.WARNING)
    get_logger("annomark.tests.stderr").warning("late stream")
    assert "late stream" in capsys.readouterr().err
