"""Loading of machine config manifests and the hostosctl configuration."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import ValidationError
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from hostos.models.config import HostOSCtlConfig
from hostos.models.hostos import HostOSConfiguration, OSFamily
from hostos.validation.errors import ManifestError


logger = logging.getLogger(__name__)

MACHINE_CONFIG_KIND_SUFFIX = "MachineConfig"


@dataclass
class MachineConfigEntry:
    """Host OS configuration of one machine config, ready for validation."""
    name: str
    kind: str
    os_family: Optional[OSFamily]
    host_os_configuration: Optional[HostOSConfiguration]
    source: str = ""


class ManifestLoader:
    """Reads machine configs out of a (multi-document) YAML manifest."""

    def __init__(self, path: Path, default_os_family: Optional[OSFamily] = None):
        """Initialize manifest loader."""
        self.path = Path(path)
        self.default_os_family = default_os_family
        self.yaml = YAML(typ="safe")

    def load(self) -> List[MachineConfigEntry]:
        """Load every machine config in the manifest."""
        logger.info(f"Loading manifest {self.path}")
        entries = []
        for index, document in enumerate(self._read_documents()):
            if document is None:
                continue
            entry = self._parse_document(index, document)
            if entry is not None:
                entries.append(entry)
        logger.debug(f"Loaded {len(entries)} machine config(s) from {self.path}")
        return entries

    def _read_documents(self) -> List[Any]:
        """Read and parse all YAML documents."""
        try:
            content = self.path.read_text()
        except OSError as e:
            raise ManifestError(f"Cannot read {self.path}: {e}") from e
        try:
            return list(self.yaml.load_all(content))
        except YAMLError as e:
            raise ManifestError(f"Invalid YAML in {self.path}: {e}") from e

    def _parse_document(self, index: int, document: Any) -> Optional[MachineConfigEntry]:
        if not isinstance(document, dict):
            raise ManifestError(f"{self._where(index)}: expected a mapping")

        kind = document.get("kind")
        if kind is None:
            return self._parse_bare_document(index, document)
        if not str(kind).endswith(MACHINE_CONFIG_KIND_SUFFIX):
            logger.debug(f"Skipping {kind} in {self._where(index)}")
            return None

        metadata = document.get("metadata") or {}
        spec = document.get("spec") or {}
        if not isinstance(metadata, dict) or not isinstance(spec, dict):
            raise ManifestError(f"{self._where(index)}: metadata and spec must be mappings")

        name = str(metadata.get("name") or f"document-{index}")
        os_family = self._parse_os_family(index, spec.get("osFamily"))
        host_os_config = self._parse_host_os_config(index, spec.get("hostOSConfiguration"))
        return MachineConfigEntry(
            name=name,
            kind=kind,
            os_family=os_family,
            host_os_configuration=host_os_config,
            source=self._where(index),
        )

    def _parse_bare_document(self, index: int, document: Dict[str, Any]) -> MachineConfigEntry:
        """A document without kind is a HostOSConfiguration on its own."""
        if self.default_os_family is None:
            raise ManifestError(
                f"{self._where(index)}: no kind and no OS family given, use --os-family"
            )
        return MachineConfigEntry(
            name=f"{self.path.name}#{index}",
            kind="HostOSConfiguration",
            os_family=self.default_os_family,
            host_os_configuration=self._parse_host_os_config(index, document),
            source=self._where(index),
        )

    def _parse_os_family(self, index: int, value: Any) -> Optional[OSFamily]:
        if value is None:
            return self.default_os_family
        try:
            return OSFamily(value)
        except ValueError as e:
            valid = ", ".join(family.value for family in OSFamily)
            raise ManifestError(
                f"{self._where(index)}: unknown osFamily {value!r} (expected one of: {valid})"
            ) from e

    def _parse_host_os_config(self, index: int, data: Any) -> Optional[HostOSConfiguration]:
        if data is None:
            return None
        try:
            return HostOSConfiguration.model_validate(data)
        except ValidationError as e:
            raise ManifestError(f"{self._where(index)}: invalid hostOSConfiguration: {e}") from e

    def _where(self, index: int) -> str:
        return f"{self.path} (document {index})"


def load_tool_config(path: Optional[Path] = None) -> HostOSCtlConfig:
    """Load hostosctl configuration, defaults when no path is given."""
    if path is None:
        return HostOSCtlConfig()

    config_file = Path(path)
    if not config_file.exists():
        raise ManifestError(f"Config not found: {config_file}")

    try:
        data = YAML(typ="safe").load(config_file.read_text()) or {}
        config = HostOSCtlConfig(**data)
    except YAMLError as e:
        raise ManifestError(f"Invalid YAML in {config_file}: {e}") from e
    except (TypeError, ValidationError) as e:
        raise ManifestError(f"Invalid config {config_file}: {e}") from e

    logger.debug(f"Loaded config: {config_file}")
    return config
