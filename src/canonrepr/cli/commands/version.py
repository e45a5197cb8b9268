# canonrepr:header:start
#
#   project      : CanonRepr
#   file         : version.py
#   file_relpath : src/canonrepr/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# canonrepr:header:end

"""CanonRepr ``version`` command.

Prints the CanonRepr version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from canonrepr.cli.console import ClickConsole
from canonrepr.constants import CANONREPR_VERSION


@click.command(
    name="version",
    help="Show the current version of CanonRepr.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
    help="Output format.",
)
def version_command(*, output_format: str = "text") -> None:
    """Show the current version of CanonRepr.

    Args:
        output_format (str): ``text`` (the bare version) or ``json``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    if output_format == "json":
        console.print(json.dumps({"version": CANONREPR_VERSION}))
    else:
        console.print(console.styled(CANONREPR_VERSION, bold=True))
