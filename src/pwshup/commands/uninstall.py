"""Uninstall command implementation."""

from pathlib import Path

import click
from rich.console import Console

from pwshup.core import cache
from pwshup.core.config import SetupConfig
from pwshup.core.errors import SetupError
from pwshup.core.platform import detect_platform

console = Console()


@click.command()
@click.argument("version")
@click.option("--install-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding one folder per installed version")
def uninstall(version: str, install_dir: Path | None):
    """Remove an installed PowerShell version.

    VERSION is the installed version without the 'v' prefix (e.g. 7.4.6).
    """
    config = SetupConfig.from_env(install_root=install_dir)

    try:
        os_family = detect_platform().os_family
        location = cache.locate(config, os_family, version.removeprefix("v"))
        cache.remove(location, os_family)
    except SetupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    console.print(f"[green]✓[/green] Removed PowerShell [bold]{location.version}[/bold]")
