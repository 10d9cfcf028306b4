"""Input validation utilities."""

import re
from typing import Final

MIN_PORT: Final[int] = 1
MAX_PORT: Final[int] = 65535

# Hostnames, IPv4 and bracket-less IPv6 literals
HOST_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-zA-Z0-9._:%\-]+$")


def parse_port(value: str) -> int:
    """Parse a TCP port number.

    Args:
        value: Raw port string from the command line

    Returns:
        Port as an integer in 1..65535

    Raises:
        ValueError: If value is not an integer or out of range
    """
    try:
        port = int(value.strip())
    except (ValueError, AttributeError) as e:
        raise ValueError(f"Port must be an integer: {value!r}") from e

    if not MIN_PORT <= port <= MAX_PORT:
        raise ValueError(f"Port must be between {MIN_PORT} and {MAX_PORT}: {port}")

    return port


def validate_host_format(host: str) -> bool:
    """Check that a host contains only hostname or address characters.

    Args:
        host: Host extracted from the target

    Returns:
        True if host is non-empty and well formed
    """
    if not host or len(host) > 253:
        return False
    return bool(HOST_PATTERN.match(host))
