"""Pydantic models for host OS configuration and tool settings."""

from hostos.models.config import HostOSCtlConfig
from hostos.models.hostos import (
    BottlerocketBootSettings,
    BottlerocketConfiguration,
    BottlerocketKernelSettings,
    BottlerocketKubernetesSettings,
    HostOSConfiguration,
    NTPConfiguration,
    OSFamily,
)

__all__ = [
    "HostOSCtlConfig",
    "BottlerocketBootSettings",
    "BottlerocketConfiguration",
    "BottlerocketKernelSettings",
    "BottlerocketKubernetesSettings",
    "HostOSConfiguration",
    "NTPConfiguration",
    "OSFamily",
]
