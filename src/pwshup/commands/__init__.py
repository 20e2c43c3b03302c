"""CLI commands for pwshup."""
