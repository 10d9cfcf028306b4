"""TCP reachability stage."""

import asyncio
import logging
import time

from sftp_canary.models import TcpResult, TcpStatus

logger = logging.getLogger(__name__)


async def check_tcp(host: str, port: int, timeout: float = 10.0) -> TcpResult:
    """Check if a host accepts TCP connections on a port.

    The connect attempt runs under a deadline; if the deadline passes
    the attempt is cancelled and its socket released before returning.

    Args:
        host: Host to connect to.
        port: TCP port (usually the SSH port).
        timeout: Deadline for the connect in seconds.

    Returns:
        TcpResult with CONNECTED, TIMEOUT or FAILED status.
    """
    start = time.perf_counter()
    logger.debug("Connecting to %s:%d (timeout=%ss)", host, port, timeout)

    try:
        _, writer = await asyncio.wait_for(
            asyncio.open_connection(host, port),
            timeout=timeout,
        )
    # TimeoutError subclasses OSError, so it must be handled first
    except TimeoutError:
        elapsed = time.perf_counter() - start
        logger.warning("Connect to %s:%d timed out after %.2fs", host, port, elapsed)
        return TcpResult(host, port, TcpStatus.TIMEOUT, timeout, elapsed=elapsed)
    except OSError as e:
        elapsed = time.perf_counter() - start
        logger.warning("Connect to %s:%d failed: %s", host, port, e)
        return TcpResult(
            host, port, TcpStatus.FAILED, timeout, error=str(e) or repr(e), elapsed=elapsed
        )
    except Exception as e:
        elapsed = time.perf_counter() - start
        logger.error("Unexpected error connecting to %s:%d: %r", host, port, e)
        return TcpResult(
            host,
            port,
            TcpStatus.FAILED,
            timeout,
            error=str(e) or repr(e),
            elapsed=elapsed,
            unexpected=True,
        )

    elapsed = time.perf_counter() - start
    writer.close()
    try:
        await writer.wait_closed()
    except OSError as e:
        # Peer reset during close; the connect itself succeeded
        logger.debug("Error closing probe socket to %s:%d: %s", host, port, e)

    logger.info("Connected to %s:%d in %.1fms", host, port, elapsed * 1000)
    return TcpResult(host, port, TcpStatus.CONNECTED, timeout, elapsed=elapsed)
