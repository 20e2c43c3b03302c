"""Releases command implementation."""

import click
from rich.console import Console

from pwshup.core import cache
from pwshup.core.config import SetupConfig
from pwshup.core.errors import InvalidVersionError, SetupError
from pwshup.core.pipeline import fetch_catalog
from pwshup.core.platform import detect_platform

console = Console()


@click.command()
@click.option("--limit", "-n", type=click.IntRange(min=1), default=10, show_default=True,
              help="Number of releases to show")
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token for the release API")
@click.option("--lts-prefix", help="Tag prefix of the current LTS line (e.g. v7.4.)")
def releases(limit: int, token: str | None, lts_prefix: str | None):
    """Show recent PowerShell releases."""
    config = SetupConfig.from_env(token=token, lts_prefix=lts_prefix)

    try:
        os_family = detect_platform().os_family
        catalog = fetch_catalog(config)
    except SetupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if not catalog:
        console.print("No releases found")
        raise SystemExit(0)

    console.print("[bold]Recent releases:[/bold]")
    for release in catalog[:limit]:
        markers = ""
        if release.prerelease:
            markers += " [yellow](preview)[/yellow]"
        elif release.tag_name.startswith(config.lts_prefix):
            markers += " [blue](lts)[/blue]"
        try:
            location = cache.locate(config, os_family, release.version)
        except InvalidVersionError:
            location = None
        if location is not None and cache.is_installed(location, os_family):
            markers += " [green](installed)[/green]"
        if release.published_at:
            markers += f" [dim]{release.published_at[:10]}[/dim]"
        console.print(f"  • {release.tag_name}{markers}")
