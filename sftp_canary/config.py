"""Configuration management for SFTP Canary."""

import logging
import os
from collections.abc import Mapping
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path

from sftp_canary.utils.hostname import extract_host

logger = logging.getLogger(__name__)

DEFAULT_PORT = 22
DEFAULT_TCP_TIMEOUT = 10.0
DEFAULT_SFTP_TIMEOUT = 30.0


class ConfigError(Exception):
    """Configuration is unusable; nothing should be probed."""


@dataclass(frozen=True)
class CanaryConfig:
    """A single canary run's configuration.

    Built once from the command line and environment, then passed to
    every probe stage.
    """

    uri: str
    port: int = DEFAULT_PORT
    user: str | None = None
    password: str | None = None
    resolve_dns: bool = False
    tcp_timeout: float = DEFAULT_TCP_TIMEOUT
    sftp_timeout: float = DEFAULT_SFTP_TIMEOUT
    known_hosts: str | None = None

    @property
    def host(self) -> str:
        """Host to probe, extracted from the target URI."""
        return extract_host(self.uri)

    @property
    def has_credentials(self) -> bool:
        """Whether both username and password were supplied."""
        return bool(self.user and self.user.strip()) and bool(
            self.password and self.password.strip()
        )

    def __repr__(self) -> str:
        # Keep the password out of logs and tracebacks
        return (
            f"CanaryConfig(uri={self.uri!r}, port={self.port}, user={self.user!r}, "
            f"password={'***' if self.password else None}, "
            f"resolve_dns={self.resolve_dns}, tcp_timeout={self.tcp_timeout}, "
            f"sftp_timeout={self.sftp_timeout}, known_hosts={self.known_hosts!r})"
        )


def _get_env_timeout(env: Mapping[str, str], key: str, default: float) -> float:
    """Read a positive timeout from the environment, falling back to default."""
    if val := env.get(key):
        with suppress(ValueError):
            timeout = float(val)
            if timeout > 0:
                return timeout
        logger.warning(
            "%s must be a positive number of seconds, got %r. Using default: %s",
            key,
            val,
            default,
        )
    return default


def resolve_known_hosts(env: Mapping[str, str]) -> str | None:
    """Path to known_hosts file, or None to disable verification.

    Environment: SFTP_CANARY_KNOWN_HOSTS
    Default: unset, host keys are not verified
    Special value: "none" explicitly disables verification

    Returns:
        Path to known_hosts file or None if verification is disabled

    Raises:
        ConfigError: If the configured known_hosts file doesn't exist
    """
    value = env.get("SFTP_CANARY_KNOWN_HOSTS", "").strip()

    if not value or value.lower() == "none":
        logger.debug("SSH host key verification disabled")
        return None

    path = Path(os.path.expanduser(value))
    if not path.exists():
        raise ConfigError(
            f"SSH host key verification requested but known_hosts file not found: {path}\n"
            f"Add host keys with: ssh-keyscan <hostname> >> {path}\n"
            f"Or unset SFTP_CANARY_KNOWN_HOSTS to skip verification."
        )
    return str(path)


def load_config(
    uri: str,
    port: int = DEFAULT_PORT,
    user: str | None = None,
    password: str | None = None,
    resolve_dns: bool = False,
    env: Mapping[str, str] | None = None,
) -> CanaryConfig:
    """Build the run configuration from parsed flags and environment overrides.

    Args:
        uri: Target host or URI
        port: Target TCP port
        user: SFTP username
        password: SFTP password
        resolve_dns: Whether to run the DNS stage
        env: Environment mapping (defaults to os.environ)

    Returns:
        Immutable CanaryConfig

    Raises:
        ConfigError: If the target is blank or known_hosts is missing
    """
    if env is None:
        env = os.environ

    if not uri or not uri.strip():
        raise ConfigError("A target URI is required (--uri=<host>)")

    config = CanaryConfig(
        uri=uri.strip(),
        port=port,
        user=user,
        password=password,
        resolve_dns=resolve_dns,
        tcp_timeout=_get_env_timeout(env, "SFTP_CANARY_TCP_TIMEOUT", DEFAULT_TCP_TIMEOUT),
        sftp_timeout=_get_env_timeout(
            env, "SFTP_CANARY_SFTP_TIMEOUT", DEFAULT_SFTP_TIMEOUT
        ),
        known_hosts=resolve_known_hosts(env),
    )

    logger.debug(
        "Config initialized: host=%s, port=%d, resolve_dns=%s, "
        "tcp_timeout=%s, sftp_timeout=%s, known_hosts=%s",
        config.host,
        config.port,
        config.resolve_dns,
        config.tcp_timeout,
        config.sftp_timeout,
        config.known_hosts,
    )
    return config
