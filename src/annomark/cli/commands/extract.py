# topmark:header:start
#
#   project      : AnnoMark
#   file         : extract.py
#   file_relpath : src/annomark/cli/commands/extract.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark `extract` command.

Reads each PATH (``-`` or no PATH reads STDIN), extracts its annotations and
prints them. With one input the JSON output is an object keyed by annotation
name. With several inputs it is a list in argument order, one
``{"path": ..., "annotations": {...}}`` item per input, so repeated paths are
all kept. ``--entries`` prints the raw occurrences instead of the merged
annotations (under ``"entries"`` for several inputs).
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from annomark.cli.cli_types import OutputFormat
from annomark.cli.console import ClickConsole
from annomark.cli.errors import AnnomarkCliConfigError, AnnomarkUsageError
from annomark.cli.io import read_input, stdin_is_interactive
from annomark.cli.options import output_format_option
from annomark.config.logging import get_logger
from annomark.config.model import MutableConfig
from annomark.constants import STDIN_SENTINEL
from annomark.core.errors import AnnomarkConfigError
from annomark.core.parser import AnnotationParser

if TYPE_CHECKING:
    from annomark.config.logging import AnnomarkLogger
    from annomark.config.model import Config
    from annomark.core.types import AnnotationEntry

logger: AnnomarkLogger = get_logger(__name__)


def resolve_config(ctx: click.Context, paths: tuple[str, ...]) -> Config:
    """Build the effective `Config` from discovered and explicit sources.

    Raises:
        AnnomarkCliConfigError: If the merged configuration is invalid.
    """
    anchor: Path | None = None
    first = next((p for p in paths if p != STDIN_SENTINEL), None)
    if first is not None and Path(first).exists():
        anchor = Path(first)

    draft = MutableConfig.load_merged(
        anchor=anchor,
        extra_config_files=[Path(p) for p in ctx.obj.get("config_files", ())],
        no_config=bool(ctx.obj.get("no_config", False)),
    )
    try:
        return draft.freeze()
    except AnnomarkConfigError as exc:
        raise AnnomarkCliConfigError(f"Invalid configuration: {exc}") from exc


def _render_text(console: ClickConsole, data: dict[str, Any], *, entries: bool) -> None:
    if entries:
        for entry in data["entries"]:
            start, end = entry["span"]
            if "properties" in entry:
                shown = json.dumps(entry["properties"], ensure_ascii=False)
            else:
                shown = json.dumps(entry["value"], ensure_ascii=False)
            label: str = console.styled("@" + entry["name"], bold=True)
            console.print(f"{label} {shown}  [{start}:{end}]")
        return
    for name, value in data["annotations"].items():
        console.print(f"{console.styled(name, bold=True)}: {json.dumps(value, ensure_ascii=False)}")


@click.command(
    name="extract",
    help="Extract @annotations from files (or STDIN) and print them.",
)
@click.argument("paths", nargs=-1, type=str)
@output_format_option
@click.option(
    "--name",
    "names",
    multiple=True,
    help="Only show annotations with this name (repeatable).",
)
@click.option(
    "--entries",
    is_flag=True,
    default=False,
    help="Show every occurrence in order instead of the merged annotations.",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Text encoding of the input files.",
)
@click.pass_context
def extract_command(
    ctx: click.Context,
    *,
    paths: tuple[str, ...],
    output_format: OutputFormat | None,
    names: tuple[str, ...],
    entries: bool,
    encoding: str,
) -> None:
    """Extract annotations from PATHS and print them.

    Args:
        ctx (click.Context): Click context carrying the console and config sources.
        paths (tuple[str, ...]): Input files; ``-`` or none reads STDIN.
        output_format (OutputFormat | None): Text (default) or JSON.
        names (tuple[str, ...]): Optional annotation name filter.
        entries (bool): Print raw occurrences instead of merged annotations.
        encoding (str): Input text encoding.
    """
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj.get("console") or ClickConsole()
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if list(paths).count(STDIN_SENTINEL) > 1:
        raise AnnomarkUsageError("STDIN ('-') can only be read once.")
    if not paths and stdin_is_interactive():
        raise AnnomarkUsageError("No input: pass PATHS or pipe text on STDIN.")
    inputs: tuple[str, ...] = paths or (STDIN_SENTINEL,)
    parser = AnnotationParser(resolve_config(ctx, inputs))

    results: list[tuple[str, dict[str, Any]]] = []
    for path in inputs:
        display_name, text = read_input(path, encoding=encoding)
        logger.info("Extracting annotations from %s", display_name)

        result: dict[str, Any]
        if entries:
            found: list[AnnotationEntry] = [
                e for e in parser.iter_entries(text) if not names or e.name in names
            ]
            result = {"entries": [e.to_dict() for e in found]}
        else:
            store = parser.parse(text)
            annotations = {n: store.get(n) for n in store.names() if not names or n in names}
            result = {"annotations": annotations}
        results.append((display_name, result))

    if fmt is OutputFormat.JSON:
        payload: Any
        if len(results) > 1:
            payload = [{"path": display_name, **data} for display_name, data in results]
        else:
            payload = results[0][1]["entries" if entries else "annotations"]
        console.print(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for display_name, data in results:
        if len(results) > 1:
            console.print(console.styled(f"{display_name}:", underline=True))
        _render_text(console, data, entries=entries)
