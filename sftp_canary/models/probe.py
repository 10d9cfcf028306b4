"""Probe result data models."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


@dataclass
class DnsResult:
    """Result of resolving a host's addresses."""

    host: str
    ipv4: list[str] = field(default_factory=list)
    ipv6: list[str] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Whether resolution completed without error."""
        return self.error is None

    @property
    def is_empty(self) -> bool:
        """Whether no addresses of either family were found."""
        return not self.ipv4 and not self.ipv6


class TcpStatus(Enum):
    """Outcome of a TCP connect attempt."""

    CONNECTED = "connected"
    TIMEOUT = "timeout"
    FAILED = "failed"


@dataclass
class TcpResult:
    """Result of a TCP connect attempt."""

    host: str
    port: int
    status: TcpStatus
    timeout: float
    error: str | None = None
    elapsed: float = 0.0
    unexpected: bool = False

    @property
    def ok(self) -> bool:
        return self.status is TcpStatus.CONNECTED


@dataclass
class RemoteEntry:
    """A single entry in a remote directory listing."""

    name: str
    size: int | None = None
    modified: datetime | None = None


@dataclass
class SftpResult:
    """Result of an SFTP login, listing and logout."""

    host: str
    port: int
    user: str
    connected: bool = False
    entries: list[RemoteEntry] = field(default_factory=list)
    logged_out: bool = False
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.connected
