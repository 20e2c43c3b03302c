"""pwshup - install PowerShell releases from GitHub."""

__version__ = "0.3.0"
