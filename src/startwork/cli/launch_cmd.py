"""``startwork launch`` -- Start work on a card in the board's IDE.

Reads the card from a JSON file holding the host's field names
(``id``, ``shortLink``, ``name``, ``desc``, ``url``), resolves the board's
IDE preference, and opens the deep link.

Exit Codes:
    0 -- Link opened (or printed with ``--dry-run``).
    1 -- Launch aborted; nothing was opened.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from startwork.card import JsonCardSource
from startwork.cli.common import board_option, open_preferences, run_async, store_option
from startwork.exceptions import LaunchAbortedError
from startwork.host import BrowserNavigator, ConsoleNotifier, Navigator, RecordingNavigator
from startwork.ides import default_registry
from startwork.launch import LaunchTrigger


@click.command("launch")
@board_option
@store_option
@click.option(
    "--card", "card_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file describing the card.",
)
@click.option("--dry-run", is_flag=True, help="Print the link instead of opening it.")
def launch_command(board_id: str, store_path: Path, card_path: Path, dry_run: bool) -> None:
    """Open the board's IDE on the card in CARD."""
    navigator: Navigator = RecordingNavigator() if dry_run else BrowserNavigator()
    trigger = LaunchTrigger(
        open_preferences(store_path),
        default_registry(),
        navigator,
        ConsoleNotifier(),
    )
    try:
        url = run_async(trigger.launch(board_id, JsonCardSource(card_path)))
    except LaunchAbortedError:
        sys.exit(1)
    click.echo(url)
