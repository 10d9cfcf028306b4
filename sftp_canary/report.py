"""Human-readable report lines for each canary stage.

Every function returns plain lines; the caller decides where they go
(stdout for the CLI, a list for tests).
"""

from sftp_canary.models import DnsResult, RemoteEntry, SftpResult, TcpResult, TcpStatus

PROG = "sftp-canary"

USAGE = f"""\
Usage:
  {PROG} --uri=<host> [--port=<port>] [--user=<user>] [--pass=<pass>] [--resolve-dns]

Examples:
  # Just test TCP connectivity
  {PROG} --uri=test.rebex.net

  # Test connectivity + SFTP login and list root directory
  {PROG} --uri=test.rebex.net --user=demo --pass=password

  # Resolve DNS (A + AAAA) and test connectivity
  {PROG} --uri=test.rebex.net --resolve-dns"""

DNS_HEADER = "=== DNS Resolution ==="
TCP_HEADER = "=== Connectivity Test (TCP) ==="
SFTP_HEADER = "=== SFTP Login / Logout Test ==="


def format_target(host: str, port: int) -> list[str]:
    return [f"Host: {host}", f"Port: {port}"]


def format_dns(result: DnsResult) -> list[str]:
    """Render A/AAAA sections, omitting a family that has no records."""
    if not result.ok:
        return [f"DNS resolution failed for {result.host}: {result.error}"]

    if result.is_empty:
        return [f"No DNS records found for {result.host}"]

    lines = []
    if result.ipv4:
        lines.append("A (IPv4) records:")
        lines.extend(f"  {ip}" for ip in result.ipv4)
    if result.ipv6:
        lines.append("AAAA (IPv6) records:")
        lines.extend(f"  {ip}" for ip in result.ipv6)
    return lines


def format_tcp(result: TcpResult) -> list[str]:
    target = f"{result.host}:{result.port}"

    if result.status is TcpStatus.CONNECTED:
        return [f"TCP connection to {target} succeeded."]
    if result.status is TcpStatus.TIMEOUT:
        return [f"TCP connection to {target} timed out after {result.timeout:g} seconds."]
    if result.unexpected:
        return [f"Unexpected error testing TCP connectivity: {result.error}"]
    return [f"TCP connection to {target} failed: {result.error}"]


def format_entry(entry: RemoteEntry) -> str:
    """Render one listing line: modified time, right-aligned size, name."""
    modified = (
        entry.modified.strftime("%Y-%m-%d %H:%M:%S")
        if entry.modified is not None
        else " " * 19
    )
    size = "" if entry.size is None else str(entry.size)
    return f"{modified}  {size:>10}  {entry.name}"


def format_sftp_attempt(user: str) -> list[str]:
    return [f"Attempting SFTP login as '{user}'..."]


def format_sftp(result: SftpResult) -> list[str]:
    """Render the login, listing and logout outcome of an SFTP session."""
    lines = []

    if result.connected:
        lines.append("SFTP connection SUCCESS.")
        lines.append("Listing directory '/' as sanity check:")
        lines.extend(format_entry(entry) for entry in result.entries)
        if result.logged_out:
            lines.append("SFTP logout completed.")

    if result.error is not None:
        lines.append("SFTP connection FAILED:")
        lines.append(result.error)

    return lines


def format_skipped_login() -> list[str]:
    return [
        "No user and/or password supplied. Skipping SFTP login test.",
        "Provide both --user= and --pass= to test login/logout.",
    ]
