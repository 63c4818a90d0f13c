# topmark:header:start
#
#   project      : AnnoMark
#   file         : main.py
#   file_relpath : src/annomark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""AnnoMark Click CLI: a command group with ``extract`` and ``version``.

Group-level options (verbosity, color, configuration sources) are resolved
once and placed into ``ctx.obj`` for the subcommands.
"""

from __future__ import annotations

import click

from annomark.cli.commands.extract import extract_command
from annomark.cli.commands.version import version_command
from annomark.cli.console import ClickConsole
from annomark.cli.options import (
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from annomark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
    config_files: tuple[str, ...],
    no_config: bool,
) -> None:
    """Initialize shared state (logging, console, config sources) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
        config_files (tuple[str, ...]): Explicit ``--config`` files.
        no_config (bool): Whether project config discovery is disabled.
    """
    ctx.ensure_object(dict)

    # ANNOMARK_LOG_LEVEL wins over -v/-q
    level: int = resolve_env_log_level() or resolve_verbosity(verbose, quiet)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    ctx.obj["color_enabled"] = not no_color
    ctx.color = not no_color
    ctx.obj["console"] = ClickConsole(enable_color=not no_color)

    ctx.obj["config_files"] = config_files
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="AnnoMark CLI: extract @annotations from comment text.",
)
@common_verbose_options
@common_config_options
@click.option("--no-color", is_flag=True, default=False, help="Disable ANSI colors.")
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    config_files: tuple[str, ...],
    no_config: bool,
    no_color: bool,
) -> None:
    """Entry point for the AnnoMark CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        no_color=no_color,
        config_files=config_files,
        no_config=no_config,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'annomark extract [PATHS...]' to list annotations.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(extract_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
