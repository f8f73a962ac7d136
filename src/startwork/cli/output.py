"""Rich output formatting helpers for the startwork CLI.

Deep links themselves are printed with ``click.echo`` so they are never
wrapped; tables and notices go through the shared rich console.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text

from startwork.ides import IDERecord, IDERegistry

console = Console()


def configure_logging(verbose: bool) -> None:
    """Route library logging through rich; DEBUG when ``verbose``."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def print_ide_table(registry: IDERegistry, selected: str | None = None) -> None:
    """Print the IDE catalogue, grouped the way the settings popup groups it.

    Args:
        registry: Catalogue to print.
        selected: Moniker to mark as the board's current choice.
    """
    table = Table(title="Supported IDEs", show_header=True, header_style="bold")
    table.add_column("IDE", style="bold", no_wrap=True)
    table.add_column("Moniker", no_wrap=True)
    table.add_column("Protocol", style="dim", overflow="fold")
    table.add_column("", justify="center", no_wrap=True)

    default = registry.default.moniker
    for record in registry.all():
        table.add_row(
            record.ide_name,
            record.moniker,
            record.protocol,
            _marker(record, default, selected),
            end_section=record.sep_after,
        )
    console.print(table)


def _marker(record: IDERecord, default: str, selected: str | None) -> Text:
    if record.moniker == selected:
        return Text("selected", style="bold green")
    if record.moniker == default:
        return Text("default", style="cyan")
    return Text("")
