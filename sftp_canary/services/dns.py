"""DNS resolution stage."""

import asyncio
import logging
import socket

from sftp_canary.models import DnsResult

logger = logging.getLogger(__name__)


async def resolve_host(host: str) -> DnsResult:
    """Resolve all A and AAAA addresses for a host.

    Resolution failures are captured in the result and never raised,
    so a broken resolver does not stop the canary.

    Args:
        host: Hostname or address literal to resolve.

    Returns:
        DnsResult with unique IPv4 and IPv6 addresses in resolver order.
    """
    loop = asyncio.get_running_loop()
    result = DnsResult(host=host)

    try:
        infos = await loop.getaddrinfo(host, None, type=socket.SOCK_STREAM)
    except (OSError, UnicodeError) as e:
        logger.warning("DNS resolution failed for %s: %s", host, e)
        result.error = str(e)
        return result

    for family, _, _, _, sockaddr in infos:
        address = str(sockaddr[0])
        if family == socket.AF_INET and address not in result.ipv4:
            result.ipv4.append(address)
        elif family == socket.AF_INET6 and address not in result.ipv6:
            result.ipv6.append(address)

    logger.debug(
        "Resolved %s: %d A, %d AAAA record(s)",
        host,
        len(result.ipv4),
        len(result.ipv6),
    )
    return result
