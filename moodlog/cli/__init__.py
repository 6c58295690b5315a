"""CLI commands for moodlog.

This package provides the command-line interface: mood and preset
listings plus statistics and log views over an exported entry file.
"""

from moodlog.cli.main import cli, main

__all__ = ["cli", "main"]
