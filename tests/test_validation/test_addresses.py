"""Tests for address predicates."""

import pytest

from hostos.validation.addresses import is_valid_hostname, is_valid_ip, is_valid_ntp_server


class TestIsValidIP:
    """Test IP literal detection."""

    @pytest.mark.parametrize("address", ["192.168.0.10", "0.0.0.0", "2610:20:6f15:15::26", "::1"])
    def test_valid(self, address):
        assert is_valid_ip(address)

    @pytest.mark.parametrize("address", ["", "not a valid IP", "256.1.1.1", "1.2.3", "10.0.0.1/24", " 1.2.3.4", "fe80::1%eth0", "fe80::1%1"])
    def test_invalid(self, address):
        assert not is_valid_ip(address)


class TestIsValidHostname:
    """Test DNS hostname detection."""

    @pytest.mark.parametrize("hostname", [
        "time-a.eks-a.aws",
        "pool.ntp.org",
        "NTP.Example.COM",
        "localhost",
        "time.example.com.",
    ])
    def test_valid(self, hostname):
        assert is_valid_hostname(hostname)

    @pytest.mark.parametrize("hostname", [
        "",
        ".",
        "udp://",
        "udp://time.example.com",
        "time.example.com/path",
        "not a valid ntp server",
        "time..example.com",
        "-leading.example.com",
        "trailing-.example.com",
        "under_score.example.com",
        "time.example.com\n",
    ])
    def test_invalid(self, hostname):
        assert not is_valid_hostname(hostname)

    def test_label_length(self):
        """Test labels are limited to 63 characters."""
        assert is_valid_hostname("a" * 63 + ".com")
        assert not is_valid_hostname("a" * 64 + ".com")

    def test_total_length(self):
        """Test hostnames are limited to 253 characters."""
        label = "a" * 63
        assert not is_valid_hostname(".".join([label] * 4))


def test_ntp_server_accepts_ip_or_hostname():
    """Test NTP server predicate combines both checks."""
    assert is_valid_ntp_server("2610:20:6f15:15::26")
    assert is_valid_ntp_server("time-b.eks-a.aws")
    assert not is_valid_ntp_server("also invalid")


def test_ntp_server_rejects_zoned_ipv6():
    """Test an IPv6 address with a zone suffix is not an NTP server."""
    assert not is_valid_ntp_server("fe80::1%eth0")
