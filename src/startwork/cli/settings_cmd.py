"""``startwork settings`` -- Show or save a board's IDE preference.

Usage::

    startwork settings show --board B1
    startwork settings save --board B1 jb-pycharm

Exit Codes:
    0 -- Preference shown or saved.
    1 -- The store could not be written.
    2 -- Unknown IDE moniker or bad option.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click

from startwork.cli.common import board_option, open_preferences, run_async, store_option
from startwork.cli.output import console, print_ide_table
from startwork.exceptions import StoreUnavailableError
from startwork.host import ConsoleNotifier, PopupHost, PopupRequest
from startwork.ides import default_registry
from startwork.settings import SETTINGS_POPUP, SettingsController


class _TerminalPopup(PopupHost):
    """The terminal stands in for the settings popup."""

    def popup(self, request: PopupRequest) -> None:
        console.print(f"[bold]{request.title}[/bold]")

    def close_popup(self) -> None:
        console.print("[green]Settings saved.[/green]")


def _controller(board_id: str, store_path: Path) -> SettingsController:
    return SettingsController(
        board_id,
        open_preferences(store_path),
        default_registry(),
        _TerminalPopup(),
        ConsoleNotifier(),
    )


@click.group("settings")
def settings_group() -> None:
    """Board IDE preference."""


@settings_group.command("show")
@board_option
@store_option
@click.option("--all", "show_all", is_flag=True, help="Also list every IDE.")
def show_command(board_id: str, store_path: Path, show_all: bool) -> None:
    """Show the stored and effective IDE for a board."""
    controller = _controller(board_id, store_path)
    selected = run_async(controller.open())
    stored = controller.stored
    ide = default_registry().resolve(selected)

    click.echo(f"Board:     {board_id}")
    click.echo(f"Stored:    {stored if stored is not None else '(none)'}")
    click.echo(f"Effective: {ide.ide_name} ({ide.moniker})")
    if show_all:
        print_ide_table(default_registry(), selected=selected)


@settings_group.command("save")
@board_option
@store_option
@click.argument("moniker", type=click.Choice([r.moniker for r in default_registry().all()]))
def save_command(board_id: str, store_path: Path, moniker: str) -> None:
    """Save MONIKER as the board's IDE."""
    controller = _controller(board_id, store_path)

    async def _save() -> None:
        controller.surface.popup(SETTINGS_POPUP)
        await controller.open()
        controller.select(moniker)
        await controller.save()

    try:
        run_async(_save())
    except StoreUnavailableError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
