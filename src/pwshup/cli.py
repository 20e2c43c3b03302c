"""CLI entry point for pwshup."""

import click

from pwshup import __version__
from pwshup.commands import install, list_cmd, releases, uninstall
from pwshup.core.logging_setup import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="pwshup")
@click.option("--verbose", "-V", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """pwshup - Install PowerShell from GitHub releases.

    Resolves a version or release track, downloads the build for this
    platform and unpacks it into a per-version tool cache.

    Examples:

        pwshup install

        pwshup install --version 7.4.6

        pwshup install --version preview --architecture arm64

        pwshup releases
    """
    configure_logging(verbose)


# Register commands
main.add_command(install.install)
main.add_command(releases.releases)
main.add_command(list_cmd.list_versions)
main.add_command(uninstall.uninstall)


if __name__ == "__main__":
    main()
