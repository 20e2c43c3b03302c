"""List command implementation."""

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from pwshup.core import cache
from pwshup.core.config import SetupConfig
from pwshup.core.errors import SetupError
from pwshup.core.manifest import read_receipt
from pwshup.core.platform import detect_platform

console = Console()


@click.command("list")
@click.option("--install-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding one folder per installed version")
def list_versions(install_dir: Path | None):
    """List installed PowerShell versions."""
    config = SetupConfig.from_env(install_root=install_dir)

    try:
        os_family = detect_platform().os_family
    except SetupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    locations = cache.installed_versions(config, os_family)
    if not locations:
        console.print("No versions installed")
        console.print("\nInstall one with: pwshup install --version stable")
        raise SystemExit(0)

    table = Table(show_header=True, header_style="bold")
    table.add_column("Version")
    table.add_column("Asset")
    table.add_column("Installed")
    table.add_column("Path")

    for location in locations:
        receipt = read_receipt(location.path)
        if receipt:
            asset = receipt.asset
            installed = receipt.installed_at.strftime("%Y-%m-%d %H:%M")
        else:
            asset, installed = "", "(no receipt)"
        table.add_row(location.version, asset, installed, str(location.path))

    console.print(table)
