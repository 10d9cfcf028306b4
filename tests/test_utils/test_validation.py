"""Tests for input validation utilities."""

import pytest

from sftp_canary.utils.validation import parse_port, validate_host_format


class TestParsePort:
    """Tests for parse_port."""

    @pytest.mark.parametrize("value,expected", [("1", 1), ("22", 22), ("65535", 65535), (" 2222 ", 2222)])
    def test_valid_ports(self, value: str, expected: int) -> None:
        """Ports in 1..65535 are accepted."""
        assert parse_port(value) == expected

    @pytest.mark.parametrize("value", ["0", "-1", "65536", "99999"])
    def test_out_of_range_rejected(self, value: str) -> None:
        """Ports outside 1..65535 raise ValueError."""
        with pytest.raises(ValueError, match="between 1 and 65535"):
            parse_port(value)

    @pytest.mark.parametrize("value", ["", "ssh", "22.5", "0x16"])
    def test_non_integer_rejected(self, value: str) -> None:
        """Non-integer ports raise ValueError."""
        with pytest.raises(ValueError, match="integer"):
            parse_port(value)


class TestValidateHostFormat:
    """Tests for validate_host_format."""

    @pytest.mark.parametrize("host", ["example.com", "10.0.0.1", "2001:db8::1", "fe80::1%eth0"])
    def test_accepts_hosts_and_addresses(self, host: str) -> None:
        """Hostnames and IP literals are well formed."""
        assert validate_host_format(host) is True

    @pytest.mark.parametrize("host", ["", "bad host", "host/path", "a" * 254])
    def test_rejects_malformed(self, host: str) -> None:
        """Empty, spaced, path-like or overlong hosts are rejected."""
        assert validate_host_format(host) is False
