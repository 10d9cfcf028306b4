"""Tests for the console log formatter."""

import logging
import sys

from sftp_canary.utils.console import COLORS, ColorfulFormatter


def _record(name: str, msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, msg, None, None)


def test_plain_format_has_level_component_and_message() -> None:
    """Without colors the line is pipe-separated plain text."""
    formatter = ColorfulFormatter(use_colors=False)

    line = formatter.format(_record("sftp_canary.services.tcp", "Connected to h:22"))

    parts = [part.strip() for part in line.split("|")]
    assert parts[1] == "INFO"
    assert parts[2] == "services.tcp"
    assert parts[3] == "Connected to h:22"
    assert "\033[" not in line


def test_colored_format_highlights_host_port() -> None:
    """host:port pairs are highlighted when colors are enabled."""
    formatter = ColorfulFormatter(use_colors=True)

    line = formatter.format(_record("sftp_canary.services.tcp", "Connect to example.com:22 failed"))

    assert f"{COLORS['bright_magenta']}example.com:22{COLORS['reset']}" in line


def test_exception_info_appended() -> None:
    """Tracebacks are included below the log line."""
    formatter = ColorfulFormatter(use_colors=False)
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        record = logging.LogRecord(
            "sftp_canary.cli", logging.ERROR, __file__, 1, "failed", None, sys.exc_info()
        )

    line = formatter.format(record)

    assert "RuntimeError: boom" in line
