"""Utilities for SFTP Canary."""

from sftp_canary.utils.console import ColorfulFormatter
from sftp_canary.utils.hostname import extract_host
from sftp_canary.utils.validation import parse_port, validate_host_format

__all__ = [
    "ColorfulFormatter",
    "extract_host",
    "parse_port",
    "validate_host_format",
]
