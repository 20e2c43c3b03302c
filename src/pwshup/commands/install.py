"""Install command implementation."""

from pathlib import Path

import click
from rich.console import Console

from pwshup.core.config import SetupConfig
from pwshup.core.errors import SetupError
from pwshup.core.pipeline import fetch_catalog, setup_powershell
from pwshup.core.reporting import report_result
from pwshup.core.resolver import resolve_release
from pwshup.models.request import VersionRequest

console = Console()


def show_assets(request: VersionRequest, config: SetupConfig) -> None:
    """Print the assets of the release a request resolves to."""
    release = resolve_release(request, fetch_catalog(config), lts_prefix=config.lts_prefix)
    console.print(f"  Found release: [green]{release.tag_name}[/green]")

    if not release.assets:
        console.print("\n[yellow]No assets in this release[/yellow]")
        return

    console.print(f"\n[bold]Available assets ({len(release.assets)}):[/bold]")
    for a in release.assets:
        size_mb = a.size / (1024 * 1024)
        console.print(f"  [cyan]{a.name}[/cyan] ({size_mb:.1f} MB)")


@click.command()
@click.option("--version", "-v", "version_spec", default="stable", show_default=True,
              help="latest, stable, lts, preview or a version such as 7.4.6")
@click.option("--architecture", "-a", default="auto", show_default=True,
              help="x64, x86, arm64, arm32 or auto")
@click.option("--token", envvar="GITHUB_TOKEN", help="GitHub token for the release API")
@click.option("--install-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory holding one folder per installed version")
@click.option("--lts-prefix", help="Tag prefix of the current LTS line (e.g. v7.4.)")
@click.option("--max-retries", type=click.IntRange(min=1), default=10, show_default=True,
              help="Download attempts before giving up")
@click.option("--retry-delay", type=click.FloatRange(min=0), default=10.0, show_default=True,
              help="Seconds to wait after the first failed attempt; doubles each retry")
@click.option("--strict", is_flag=True, help="Require a matching install receipt for cache hits")
@click.option("--force", "-f", is_flag=True, help="Reinstall even if already installed")
@click.option("--list-assets", "-l", is_flag=True, help="List assets of the resolved release and exit")
def install(
    version_spec: str,
    architecture: str,
    token: str | None,
    install_dir: Path | None,
    lts_prefix: str | None,
    max_retries: int,
    retry_delay: float,
    strict: bool,
    force: bool,
    list_assets: bool,
):
    """Install PowerShell from GitHub releases.

    The install directory is added to PATH and, inside GitHub Actions, the
    `version` and `path` step outputs are set.
    """
    request = VersionRequest.parse(version_spec)
    config = SetupConfig.from_env(
        token=token,
        install_root=install_dir,
        lts_prefix=lts_prefix,
        architecture=architecture,
        max_retries=max_retries,
        initial_delay=retry_delay,
        strict=strict,
        force=force,
    )

    console.print(f"[blue]Resolving[/blue] PowerShell '{request}'...")

    try:
        if list_assets:
            show_assets(request, config)
            raise SystemExit(0)

        result = setup_powershell(request, config)
        report_result(result, config)
    except SetupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1)

    if result.cached:
        console.print(
            f"[green]✓[/green] PowerShell [bold]{result.version}[/bold] already installed"
        )
    else:
        console.print(
            f"\n[green]✓[/green] Successfully installed PowerShell [bold]{result.version}[/bold]"
        )
    console.print(f"  Path: {result.path}")
