"""
hostos - host OS configuration validation for cluster machine configs.

Checks the ``hostOSConfiguration`` block of a machine config (NTP servers and
Bottlerocket settings) before it reaches provisioning.
"""

__version__ = "0.1.0"

# Re-export key components for easier access
from hostos.models.hostos import HostOSConfiguration, OSFamily
from hostos.validation.errors import HostOSConfigError
from hostos.validation.validator import check_host_os_config, validate_host_os_config

__all__ = [
    "HostOSConfiguration",
    "OSFamily",
    "HostOSConfigError",
    "check_host_os_config",
    "validate_host_os_config",
]
