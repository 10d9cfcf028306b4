"""Command-line interface for SFTP Canary.

Flags follow the ``--name=value`` convention (``--name value`` also works),
flag names are case-insensitive, and unknown arguments are ignored.
"""

import argparse
import asyncio
import logging
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NoReturn

from sftp_canary.config import DEFAULT_PORT, ConfigError, load_config
from sftp_canary.models import ExitCode
from sftp_canary.report import USAGE
from sftp_canary.services.pipeline import run_canary
from sftp_canary.utils.console import ColorfulFormatter
from sftp_canary.utils.validation import parse_port

logger = logging.getLogger(__name__)

HELP_FLAGS = frozenset({"--help", "-h", "/?"})


class UsageError(Exception):
    """Command line could not be parsed."""


class _CanaryArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


@dataclass
class CliOptions:
    """Flags parsed from the command line."""

    uri: str | None = None
    port: int = DEFAULT_PORT
    user: str | None = None
    password: str | None = None
    resolve_dns: bool = False
    show_help: bool = False
    warnings: list[str] = field(default_factory=list)


def _build_parser() -> _CanaryArgumentParser:
    parser = _CanaryArgumentParser(prog="sftp-canary", add_help=False, allow_abbrev=False)
    parser.add_argument("--uri")
    parser.add_argument("--port")
    parser.add_argument("--user")
    parser.add_argument("--pass", dest="password")
    parser.add_argument("--resolve-dns", action="store_true")
    parser.add_argument("--help", "-h", action="store_true", dest="show_help")
    return parser


def _normalize_flag(arg: str) -> str:
    """Lowercase the flag name of ``--Name=value`` without touching the value."""
    if not arg.startswith("-"):
        return arg
    name, sep, value = arg.partition("=")
    return f"{name.lower()}{sep}{value}"


def parse_args(argv: Sequence[str]) -> CliOptions:
    """Parse command-line flags.

    An out-of-range or non-numeric port is not fatal: a warning is
    recorded and the default port is kept.

    Raises:
        UsageError: If a flag is malformed (e.g. ``--uri`` without a value).
    """
    args = [_normalize_flag(arg) for arg in argv]
    namespace, unknown = _build_parser().parse_known_args(args)

    options = CliOptions(
        uri=namespace.uri,
        user=namespace.user,
        password=namespace.password,
        resolve_dns=namespace.resolve_dns,
        show_help=namespace.show_help or any(arg in HELP_FLAGS for arg in unknown),
    )

    if namespace.port is not None:
        try:
            options.port = parse_port(namespace.port)
        except ValueError as e:
            logger.debug("Rejected port %r: %s", namespace.port, e)
            options.warnings.append(f"Invalid port: --port={namespace.port}")

    ignored = [arg for arg in unknown if arg not in HELP_FLAGS]
    if ignored:
        logger.debug("Ignoring unknown arguments: %s", ignored)

    return options


def configure_logging() -> None:
    """Configure colorful stderr logging for the sftp_canary package.

    Report output goes to stdout; diagnostics go to stderr so the two
    never interleave in captured output.
    """
    log_level = os.getenv("SFTP_CANARY_LOG_LEVEL", "WARNING").upper()
    use_colors = os.getenv("SFTP_CANARY_LOG_COLORS", "true").lower() != "false"

    # Disable colors if not a TTY
    if not sys.stderr.isatty():
        use_colors = False

    canary_logger = logging.getLogger("sftp_canary")
    canary_logger.setLevel(getattr(logging, log_level, logging.WARNING))

    # Only add handler if not already configured
    if not canary_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(ColorfulFormatter(use_colors=use_colors))
        canary_logger.addHandler(handler)
        canary_logger.propagate = False

    logging.getLogger("asyncssh").setLevel(logging.WARNING)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the canary and return the process exit code."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except UsageError as e:
        print(f"Error: {e}")
        print(USAGE)
        return ExitCode.USAGE_ERROR

    for warning in options.warnings:
        print(warning)

    if options.show_help:
        print(USAGE)
        return ExitCode.SUCCESS

    if not options.uri or not options.uri.strip():
        print(USAGE)
        return ExitCode.USAGE_ERROR

    try:
        config = load_config(
            uri=options.uri,
            port=options.port,
            user=options.user,
            password=options.password,
            resolve_dns=options.resolve_dns,
        )
    except ConfigError as e:
        print(f"Configuration error: {e}")
        return ExitCode.USAGE_ERROR

    try:
        return asyncio.run(run_canary(config))
    except KeyboardInterrupt:
        logger.warning("Interrupted")
        return ExitCode.INTERRUPTED
    except Exception:
        logger.exception("Unhandled error probing %s:%d", config.host, config.port)
        return ExitCode.INTERNAL_ERROR


def run() -> NoReturn:
    """Console-script entry point."""
    configure_logging()
    sys.exit(main())
