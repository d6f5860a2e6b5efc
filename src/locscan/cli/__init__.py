"""CLI module."""

from locscan.cli.main import cli

__all__ = ["cli"]
