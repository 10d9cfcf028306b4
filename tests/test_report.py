"""Tests for report rendering."""

from datetime import datetime

from sftp_canary import report
from sftp_canary.models import DnsResult, RemoteEntry, SftpResult, TcpResult, TcpStatus


class TestFormatDns:
    """Tests for format_dns."""

    def test_ipv4_only_omits_aaaa_section(self) -> None:
        """Only the A section is printed for IPv4-only hosts."""
        lines = report.format_dns(DnsResult("h", ipv4=["192.0.2.1", "192.0.2.2"]))

        assert lines == ["A (IPv4) records:", "  192.0.2.1", "  192.0.2.2"]

    def test_both_families(self) -> None:
        """A comes before AAAA."""
        lines = report.format_dns(DnsResult("h", ipv4=["192.0.2.1"], ipv6=["2001:db8::1"]))

        assert lines == [
            "A (IPv4) records:",
            "  192.0.2.1",
            "AAAA (IPv6) records:",
            "  2001:db8::1",
        ]

    def test_no_records(self) -> None:
        """An empty resolution prints the no-records message."""
        assert report.format_dns(DnsResult("h")) == ["No DNS records found for h"]

    def test_failure(self) -> None:
        """Resolver errors are printed with the host."""
        lines = report.format_dns(DnsResult("h", error="timeout"))

        assert lines == ["DNS resolution failed for h: timeout"]


class TestFormatTcp:
    """Tests for format_tcp."""

    def test_connected(self) -> None:
        """Success names the target."""
        result = TcpResult("h", 22, TcpStatus.CONNECTED, 10.0)

        assert report.format_tcp(result) == ["TCP connection to h:22 succeeded."]

    def test_timeout(self) -> None:
        """Timeouts name the deadline in whole seconds."""
        result = TcpResult("h", 22, TcpStatus.TIMEOUT, 10.0)

        assert report.format_tcp(result) == ["TCP connection to h:22 timed out after 10 seconds."]

    def test_failed(self) -> None:
        """Socket errors include the message."""
        result = TcpResult("h", 22, TcpStatus.FAILED, 10.0, error="Connection refused")

        assert report.format_tcp(result) == ["TCP connection to h:22 failed: Connection refused"]

    def test_unexpected(self) -> None:
        """Non-socket errors get their own wording."""
        result = TcpResult("h", 22, TcpStatus.FAILED, 10.0, error="boom", unexpected=True)

        assert report.format_tcp(result) == ["Unexpected error testing TCP connectivity: boom"]


class TestFormatSftp:
    """Tests for SFTP rendering."""

    def test_entry_line_layout(self) -> None:
        """Modified time, size right-aligned to 10, then name."""
        entry = RemoteEntry("readme.txt", 379, datetime(2024, 3, 1, 9, 5, 7))

        assert report.format_entry(entry) == "2024-03-01 09:05:07         379  readme.txt"

    def test_entry_without_attrs(self) -> None:
        """Missing attributes render as blanks."""
        line = report.format_entry(RemoteEntry("odd"))

        assert line.endswith("  odd")
        assert line.strip() == "odd"

    def test_success(self) -> None:
        """Success, listing and logout lines are printed in order."""
        result = SftpResult(
            "h",
            22,
            "demo",
            connected=True,
            entries=[RemoteEntry("pub", 4096, datetime(2024, 1, 2, 3, 4, 5))],
            logged_out=True,
        )

        assert report.format_sftp(result) == [
            "SFTP connection SUCCESS.",
            "Listing directory '/' as sanity check:",
            "2024-01-02 03:04:05        4096  pub",
            "SFTP logout completed.",
        ]

    def test_failure(self) -> None:
        """Failures print a header and the message."""
        result = SftpResult("h", 22, "demo", error="Permission denied")

        assert report.format_sftp(result) == ["SFTP connection FAILED:", "Permission denied"]


def test_usage_includes_examples() -> None:
    """Usage lists the flags and the three example invocations."""
    assert "--uri=<host>" in report.USAGE
    assert "--resolve-dns" in report.USAGE
    assert report.USAGE.count("sftp-canary --uri=test.rebex.net") == 3
