"""Host OS configuration validation."""

from hostos.validation.errors import HostOSConfigError, HostOSError, ManifestError, Violations
from hostos.validation.validator import check_host_os_config, validate_host_os_config

__all__ = [
    "HostOSConfigError",
    "HostOSError",
    "ManifestError",
    "Violations",
    "check_host_os_config",
    "validate_host_os_config",
]
