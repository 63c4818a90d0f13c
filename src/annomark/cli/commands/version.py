# topmark:header:start
#
#   project      : AnnoMark
#   file         : version.py
#   file_relpath : src/annomark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark `version` command.

Prints the AnnoMark version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from annomark.cli.cli_types import OutputFormat
from annomark.cli.console import ClickConsole
from annomark.cli.options import output_format_option
from annomark.constants import ANNOMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of AnnoMark.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of AnnoMark.

    Args:
        output_format (OutputFormat | None): Plain text (default) or JSON.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": ANNOMARK_VERSION}))
    else:
        console.print(console.styled(ANNOMARK_VERSION, bold=True))
