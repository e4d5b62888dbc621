"""Machine config manifest loading."""

from hostos.manifest.loader import MachineConfigEntry, ManifestLoader, load_tool_config

__all__ = ["MachineConfigEntry", "ManifestLoader", "load_tool_config"]
