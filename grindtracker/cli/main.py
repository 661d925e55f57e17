"""Main CLI entry point for Grind Tracker.

This module provides the main click group and lazy loading
of command modules to keep startup fast.
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when one of their
    commands is actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]

        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)

        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib

        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)

        cmd = None
        for attr_name in dir(module):
            attr = getattr(module, attr_name)
            if isinstance(attr, click.Command) and attr.name == cmd_name:
                cmd = attr
                break

        if cmd is None:
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(cmd)
        return cmd


LAZY_SUBCOMMANDS = {
    "init": "grindtracker.cli.bankroll",
    "add": "grindtracker.cli.tournaments",
    "edit": "grindtracker.cli.tournaments",
    "delete": "grindtracker.cli.tournaments",
    "list": "grindtracker.cli.tournaments",
    "stats": "grindtracker.cli.stats",
    "chart": "grindtracker.cli.stats",
    "bankroll": "grindtracker.cli.bankroll",
    "venues": "grindtracker.cli.bankroll",
    "years": "grindtracker.cli.bankroll",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    """Send log records through rich on stderr."""
    root = logging.getLogger()
    if not any(isinstance(handler, RichHandler) for handler in root.handlers):
        root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="grindtracker")
@click.option(
    "--db", "db_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="SQLite database to use instead of the configured one.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, db_path: str | None, verbose: bool) -> None:
    """Grind Tracker - poker tournament results and bankroll.

    Record tournaments, filter them by month, year and venue, and
    follow invested, won, profit, ROI and cumulative profit.

    \b
    Quick Start:
      grind add --name "Sunday Micro" --venue GGPoker --buy-in 5 --prize 12
      grind list --year 2024
      grind stats --venue GGPoker
      grind chart --html profit.html
    """
    _configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["db_path"] = db_path


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
