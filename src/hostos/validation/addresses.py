"""Address predicates used by the NTP and cluster DNS checks."""

import ipaddress
import re


# RFC 1123 label: alphanumeric, inner hyphens allowed, at most 63 characters
_LABEL_PATTERN = re.compile(r"[a-z0-9]([-a-z0-9]{0,61}[a-z0-9])?", re.IGNORECASE)
_MAX_HOSTNAME_LENGTH = 253


def is_valid_ip(address: str) -> bool:
    """Return True for an IPv4 or IPv6 literal.

    IPv6 zone suffixes (`fe80::1%eth0`) are not plain literals and are rejected.
    """
    try:
        parsed = ipaddress.ip_address(address)
    except ValueError:
        return False
    return getattr(parsed, "scope_id", None) is None


def is_valid_hostname(hostname: str) -> bool:
    """Return True for an ASCII DNS hostname.

    A single trailing dot (fully qualified form) is accepted. Internationalized
    names must be passed in punycode.
    """
    if not hostname:
        return False
    if hostname.endswith("."):
        hostname = hostname[:-1]
    if not hostname or len(hostname) > _MAX_HOSTNAME_LENGTH:
        return False
    return all(_LABEL_PATTERN.fullmatch(label) for label in hostname.split("."))


def is_valid_ntp_server(server: str) -> bool:
    """Return True if server is an IP literal or a hostname."""
    return is_valid_ip(server) or is_valid_hostname(server)
