"""Main CLI entry point for candlechart.

This module provides the main click group and lazy loading
for the chart commands, which pull in pandas.
"""

import logging

import click


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.

    Command modules are only imported when they are actually invoked.
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

        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")

        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "show": "candlechart.cli.chart",
    "demo": "candlechart.cli.chart",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="candlechart")
@click.option("-v", "--verbose", is_flag=True, help="Log rendering decisions to stderr.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """candlechart - candlestick charts in your terminal.

    Render OHLC candles from a CSV or JSON file, pinned to any point in
    time, one candle per column or fitted to the terminal width.

    \b
    Quick Start:
      candlechart show prices.csv            # Live view of a file
      candlechart show prices.csv --fit      # Fit the whole series
      candlechart demo --interval 5m         # Random walk preview
    """
    ctx.ensure_object(dict)
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        )


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
