"""Host OS configuration models.

Field names follow Python conventions; the manifest (camelCase) spelling is
accepted through aliases. The models only coerce types: semantic rules live
in :mod:`hostos.validation.validator`.
"""

from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class OSFamily(str, Enum):
    """Operating system families a machine config can target."""
    BOTTLEROCKET = "bottlerocket"
    UBUNTU = "ubuntu"
    REDHAT = "redhat"

    def __str__(self) -> str:
        return self.value


class _ManifestModel(BaseModel):
    """Base for models read from machine config manifests."""

    class Config:
        """Pydantic config."""
        extra = "ignore"
        populate_by_name = True
        coerce_numbers_to_str = True


class NTPConfiguration(_ManifestModel):
    """NTP servers for the host."""
    servers: List[str] = Field(default_factory=list)


class BottlerocketKubernetesSettings(_ManifestModel):
    """Kubernetes runtime settings for Bottlerocket hosts."""
    allowed_unsafe_sysctls: List[str] = Field(
        default_factory=list, alias="allowedUnsafeSysctls"
    )
    cluster_dns_ips: List[str] = Field(default_factory=list, alias="clusterDNSIPs")
    max_pods: int = Field(default=0, alias="maxPods")


class BottlerocketKernelSettings(_ManifestModel):
    """Kernel sysctl settings for Bottlerocket hosts."""
    sysctl_settings: Dict[str, str] = Field(
        default_factory=dict, alias="sysctlSettings"
    )


class BottlerocketBootSettings(_ManifestModel):
    """Boot kernel parameters for Bottlerocket hosts."""
    boot_kernel_parameters: Dict[str, List[str]] = Field(
        default_factory=dict, alias="bootKernelParameters"
    )


class BottlerocketConfiguration(_ManifestModel):
    """Bottlerocket specific settings."""
    kubernetes: Optional[BottlerocketKubernetesSettings] = None
    kernel: Optional[BottlerocketKernelSettings] = None
    boot: Optional[BottlerocketBootSettings] = None


class HostOSConfiguration(_ManifestModel):
    """Host OS configuration of a machine config."""
    ntp_configuration: Optional[NTPConfiguration] = Field(None, alias="ntpConfiguration")
    bottlerocket_configuration: Optional[BottlerocketConfiguration] = Field(
        None, alias="bottlerocketConfiguration"
    )
