"""CLI command implementations."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hostos.manifest.loader import MachineConfigEntry, ManifestLoader
from hostos.models.hostos import OSFamily
from hostos.validation.validator import check_host_os_config


logger = logging.getLogger(__name__)

console = Console()


def validate_manifests(paths: List[Path], os_family: Optional[OSFamily] = None) -> bool:
    """Validate the host OS configuration of every machine config in paths.

    Returns True when every machine config is valid.
    """
    results: List[Tuple[MachineConfigEntry, List[str]]] = []
    for path in paths:
        for entry in ManifestLoader(path, default_os_family=os_family).load():
            violations = check_host_os_config(entry.host_os_configuration, entry.os_family)
            results.append((entry, violations.messages))

    if not results:
        console.print("[yellow]No machine configs found[/yellow]")
        return True

    table = Table(title="Host OS Configuration")
    table.add_column("Name", style="cyan")
    table.add_column("Kind")
    table.add_column("OS Family")
    table.add_column("Result")

    for entry, messages in results:
        table.add_row(
            escape(entry.name),
            escape(entry.kind),
            entry.os_family.value if entry.os_family else "-",
            "[red]✗ invalid[/red]" if messages else "[green]✓ valid[/green]",
        )
    console.print(table)

    invalid = [(entry, messages) for entry, messages in results if messages]
    for entry, messages in invalid:
        console.print(f"[red]✗[/red] {escape(entry.name)} ({escape(entry.source)}):")
        for message in messages:
            console.print(f"  - {message}", markup=False, soft_wrap=True)

    logger.info(f"Validated {len(results)} machine config(s), {len(invalid)} invalid")
    return not invalid
