"""startwork CLI -- Open a task-board card in your IDE.

Entry point for the ``startwork`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    ides      -- List supported IDEs.
    link      -- Build a start-work link from card fields.
    settings  -- Show or save a board's IDE preference.
    launch    -- Open the board's IDE on a card.

Usage::

    startwork ides
    startwork link --ide jb-pycharm --id abc123 --title "Fix bug"
    startwork settings save --board B1 vsc
    startwork launch --board B1 --card card.json --dry-run
"""

from __future__ import annotations

import click

from startwork import __version__
from startwork.cli.ides_cmd import ides_command
from startwork.cli.launch_cmd import launch_command
from startwork.cli.link_cmd import link_command
from startwork.cli.output import configure_logging
from startwork.cli.settings_cmd import settings_group


@click.group()
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """startwork: Open a task-board card in your IDE via a deep link.

    Pick an IDE per board, then launch a start-work link that hands the
    card's id, title, description and URL to the IDE's CodeStream extension.
    """
    configure_logging(verbose)


# Register all subcommands
cli.add_command(ides_command)
cli.add_command(link_command)
cli.add_command(settings_group)
cli.add_command(launch_command)
