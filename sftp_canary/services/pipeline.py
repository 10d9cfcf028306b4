"""Canary probe pipeline: DNS, TCP, then SFTP."""

import logging
from collections.abc import Callable, Iterable

from sftp_canary import report
from sftp_canary.config import CanaryConfig
from sftp_canary.models import ExitCode
from sftp_canary.services.dns import resolve_host
from sftp_canary.services.sftp import probe_sftp
from sftp_canary.services.tcp import check_tcp
from sftp_canary.utils.validation import validate_host_format

logger = logging.getLogger(__name__)

Echo = Callable[[str], None]


def _emit(echo: Echo, lines: Iterable[str]) -> None:
    for line in lines:
        echo(line)


async def run_canary(config: CanaryConfig, echo: Echo = print) -> ExitCode:
    """Run every enabled probe stage in order.

    DNS failures are reported and ignored. A TCP failure stops the run
    before SFTP is attempted. An SFTP failure is reported and reflected
    in the exit code.

    Args:
        config: Run configuration shared by all stages.
        echo: Sink for report lines (stdout by default).

    Returns:
        ExitCode for the process.
    """
    host = config.host
    if not validate_host_format(host):
        logger.warning("Target host %r does not look like a hostname or address", host)

    _emit(echo, report.format_target(host, config.port))

    if config.resolve_dns:
        echo("")
        echo(report.DNS_HEADER)
        dns_result = await resolve_host(host)
        _emit(echo, report.format_dns(dns_result))
        echo("")

    echo(report.TCP_HEADER)
    tcp_result = await check_tcp(host, config.port, config.tcp_timeout)
    _emit(echo, report.format_tcp(tcp_result))
    if not tcp_result.ok:
        # Port unreachable: an SFTP login cannot succeed
        return ExitCode.TCP_FAILURE

    echo("")
    if not config.has_credentials:
        _emit(echo, report.format_skipped_login())
        return ExitCode.SUCCESS

    echo(report.SFTP_HEADER)
    _emit(echo, report.format_sftp_attempt(config.user or ""))
    sftp_result = await probe_sftp(config)
    _emit(echo, report.format_sftp(sftp_result))

    if not sftp_result.ok:
        logger.info("SFTP stage failed for %s:%d", host, config.port)
        return ExitCode.SFTP_FAILURE

    logger.info("All probes completed for %s:%d", host, config.port)
    return ExitCode.SUCCESS
