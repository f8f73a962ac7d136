"""``startwork link`` -- Build a start-work deep link from card fields.

Does not touch the preference store; the IDE is chosen with ``--ide``.

Usage::

    startwork link --ide vsc --id abc123 --short-id xYz9 \\
        --title "Fix bug" --url https://trello.com/c/xYz9

Exit Codes:
    0 -- Link printed.
    2 -- Unknown IDE moniker or bad option.
"""

from __future__ import annotations

import click

from startwork.card import CardContext
from startwork.ides import default_registry
from startwork.launch import build_route
from startwork.links import build_link, parse_query

_MONIKERS = [r.moniker for r in default_registry().all()]


@click.command("link")
@click.option(
    "--ide", "moniker",
    type=click.Choice(_MONIKERS),
    default=default_registry().default.moniker,
    show_default=True,
    help="IDE moniker to target.",
)
@click.option("--id", "card_id", default="", help="Card id.")
@click.option("--short-id", default="", help="Card short link.")
@click.option("--title", default="", help="Card title.")
@click.option("--description", default="", help="Card description.")
@click.option("--url", default="", help="Card URL.")
@click.option("--explain", is_flag=True, help="Also print the decoded query pairs.")
def link_command(
    moniker: str,
    card_id: str,
    short_id: str,
    title: str,
    description: str,
    url: str,
    explain: bool,
) -> None:
    """Print the deep link a "Start Work" click would open."""
    ide = default_registry().resolve(moniker)
    context = CardContext(
        id=card_id, short_id=short_id, title=title, description=description, url=url,
    )
    link = build_link(ide.protocol, build_route(context))
    click.echo(link)
    if explain:
        click.echo(f"\n{ide.ide_name} ({ide.moniker})")
        for key, value in parse_query(link):
            click.echo(f"  {key} = {value}")
