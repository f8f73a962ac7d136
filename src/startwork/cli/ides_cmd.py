"""``startwork ides`` -- List every IDE a start-work link can target.

Exit Codes:
    0 -- Always (informational command, cannot fail).
"""

from __future__ import annotations

import json

import click

from startwork.cli.output import print_ide_table
from startwork.ides import default_registry


@click.command("ides")
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
def ides_command(output_format: str) -> None:
    """List supported IDEs, their monikers and protocol prefixes."""
    registry = default_registry()
    if output_format == "json":
        click.echo(json.dumps(
            [
                {
                    "ideName": r.ide_name,
                    "protocol": r.protocol,
                    "moniker": r.moniker,
                    "downloadUrl": r.download_url,
                    "sepAfter": r.sep_after,
                }
                for r in registry.all()
            ],
            indent=2,
        ))
        return
    print_ide_table(registry)
