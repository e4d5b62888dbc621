"""Main CLI implementation using Typer."""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from hostos.cli.commands import validate_manifests
from hostos.manifest.loader import load_tool_config
from hostos.models.config import HostOSCtlConfig
from hostos.models.hostos import OSFamily
from hostos.utils.logging import setup_logging
from hostos.validation.errors import HostOSError


# Create Typer app
app = typer.Typer(
    name="hostosctl",
    help="Validate host OS configuration of cluster machine configs",
    add_completion=False,
)

# Console for rich output
console = Console()


@app.callback()
def callback():
    """hostosctl - host OS configuration checks."""


@app.command("validate")
def validate_command(
    paths: List[Path] = typer.Argument(..., help="Manifest files to validate"),
    os_family: Optional[OSFamily] = typer.Option(
        None, "--os-family", help="OS family for documents that do not declare one"
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="hostosctl configuration file"
    ),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (DEBUG, INFO, WARNING, ERROR)"
    ),
):
    """Validate hostOSConfiguration in machine config manifests."""
    try:
        settings = load_tool_config(config)
        if log_level:
            settings = HostOSCtlConfig.model_validate({**settings.model_dump(), "log_level": log_level})
    except (HostOSError, ValueError) as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    setup_logging(settings.log_level)

    try:
        valid = validate_manifests(paths, os_family=os_family or settings.default_os_family)
    except HostOSError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1) from e

    if not valid:
        raise typer.Exit(1)
    console.print("[green]✓[/green] Host OS configuration is valid")


def main():
    """Main entry point for CLI."""
    app()
