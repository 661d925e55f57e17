"""CLI commands for Grind Tracker.

The command-line interface is the presentation layer: it records,
edits and deletes tournaments and renders statistics and charts.
"""

from grindtracker.cli.main import cli, main

__all__ = ["cli", "main"]
