"""Validation of host OS configuration.

The checks run in a fixed order: NTP servers, the Bottlerocket OS family
guard, then the Bottlerocket Kubernetes, kernel and boot settings. Each check
reports every violation it finds. The OS family guard is the exception: when
Bottlerocket settings are given for another OS family nothing after it runs.
"""

import logging
from typing import List, Optional

from hostos.models.hostos import (
    BottlerocketBootSettings,
    BottlerocketConfiguration,
    BottlerocketKernelSettings,
    BottlerocketKubernetesSettings,
    HostOSConfiguration,
    NTPConfiguration,
    OSFamily,
)
from hostos.validation.addresses import is_valid_ip, is_valid_ntp_server
from hostos.validation.errors import Violations, format_list


logger = logging.getLogger(__name__)


def validate_host_os_config(
    config: Optional[HostOSConfiguration], os_family: Optional[OSFamily]
):
    """Validate host OS configuration for the given OS family.

    Raises:
        HostOSConfigError: one or more checks failed. The message joins the
            messages of every failed check in evaluation order.
    """
    check_host_os_config(config, os_family).raise_if_any()


def check_host_os_config(
    config: Optional[HostOSConfiguration], os_family: Optional[OSFamily]
) -> Violations:
    """Run all checks and return the collected violations without raising."""
    violations = Violations()
    if config is None:
        return violations

    if config.ntp_configuration is not None:
        violations.add(validate_ntp_servers(config.ntp_configuration))

    if config.bottlerocket_configuration is not None:
        guard_error = validate_bottlerocket_os_family(os_family)
        if guard_error:
            violations.add_fatal(guard_error)
            return violations
        violations.extend(validate_bottlerocket_config(config.bottlerocket_configuration))

    if violations:
        logger.debug(f"Host OS configuration has {len(violations)} violation(s)")
    return violations


def validate_ntp_servers(ntp: NTPConfiguration) -> Optional[str]:
    """Check that NTP servers are present and are IPs or hostnames."""
    if not ntp.servers:
        return "NTPConfiguration.Servers can not be empty"

    invalid_servers = [server for server in ntp.servers if not is_valid_ntp_server(server)]
    if invalid_servers:
        return f"ntp servers {format_list(invalid_servers)} is not valid"
    return None


def validate_bottlerocket_os_family(os_family: Optional[OSFamily]) -> Optional[str]:
    """Bottlerocket settings are only allowed for the bottlerocket OS family."""
    if os_family != OSFamily.BOTTLEROCKET:
        return (
            "BottlerocketConfiguration can only be used with "
            f'osFamily: "{OSFamily.BOTTLEROCKET.value}"'
        )
    return None


def validate_bottlerocket_config(config: BottlerocketConfiguration) -> List[str]:
    errors = validate_bottlerocket_kubernetes_settings(config.kubernetes)
    errors.extend(_present(validate_bottlerocket_kernel_settings(config.kernel)))
    errors.extend(_present(validate_bottlerocket_boot_settings(config.boot)))
    return errors


def validate_bottlerocket_kubernetes_settings(
    settings: Optional[BottlerocketKubernetesSettings],
) -> List[str]:
    """Check allowed unsafe sysctls, cluster DNS IPs and max pods."""
    errors: List[str] = []
    if settings is None:
        return errors

    if any(sysctl == "" for sysctl in settings.allowed_unsafe_sysctls):
        errors.append(
            "BottlerocketConfiguration.Kubernetes.AllowedUnsafeSysctls "
            'can not have an empty string ("")'
        )

    invalid_ips = [ip for ip in settings.cluster_dns_ips if not is_valid_ip(ip)]
    if invalid_ips:
        errors.append(
            f"IP address {format_list(invalid_ips)} in "
            "BottlerocketConfiguration.Kubernetes.ClusterDNSIPs is not a valid IP"
        )

    if settings.max_pods < 0:
        errors.append("BottlerocketConfiguration.Kubernetes.MaxPods can not be negative")

    return errors


def validate_bottlerocket_kernel_settings(
    settings: Optional[BottlerocketKernelSettings],
) -> Optional[str]:
    if settings is None:
        return None
    if any(key == "" for key in settings.sysctl_settings):
        return "sysctlSettings key cannot be empty"
    return None


def validate_bottlerocket_boot_settings(
    settings: Optional[BottlerocketBootSettings],
) -> Optional[str]:
    if settings is None:
        return None
    if any(key == "" for key in settings.boot_kernel_parameters):
        return "bootKernelParameters key cannot be empty"
    return None


def _present(message: Optional[str]) -> List[str]:
    return [message] if message else []
