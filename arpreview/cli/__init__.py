"""Command line interface for AR Product Preview."""

from arpreview.cli.main import cli

__all__ = ["cli"]
