"""Probe stages for SFTP Canary."""

from sftp_canary.services.dns import resolve_host
from sftp_canary.services.pipeline import run_canary
from sftp_canary.services.sftp import probe_sftp
from sftp_canary.services.tcp import check_tcp

__all__ = [
    "check_tcp",
    "probe_sftp",
    "resolve_host",
    "run_canary",
]
