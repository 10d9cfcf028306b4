"""Data models for SFTP Canary."""

from sftp_canary.models.exit_codes import ExitCode
from sftp_canary.models.probe import (
    DnsResult,
    RemoteEntry,
    SftpResult,
    TcpResult,
    TcpStatus,
)

__all__ = [
    "DnsResult",
    "ExitCode",
    "RemoteEntry",
    "SftpResult",
    "TcpResult",
    "TcpStatus",
]
