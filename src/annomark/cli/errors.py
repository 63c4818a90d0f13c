# topmark:header:start
#
#   project      : AnnoMark
#   file         : errors.py
#   file_relpath : src/annomark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the AnnoMark CLI.

Raise these from commands to signal errors with a standardized message and
exit code. The message goes to stderr through the `ClickConsole` of the
command that raised it (Click's own "Error:" display when there is none)
and the process exits with ``exit_code``.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from annomark.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from annomark.cli.console import ClickConsole


class AnnomarkCliError(click.ClickException):
    """Base class for all AnnoMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        # Click calls show() after the context is closed, so look up the console now
        self.console: ClickConsole | None = None
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            self.console = ctx.obj.get("console")

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Print the message with the command's console, or as Click would."""
        if self.console is None:
            super().show(file)
            return
        self.console.error(self.format_message())


class AnnomarkUsageError(AnnomarkCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class AnnomarkCliConfigError(AnnomarkCliError):
    """Error for configuration errors (invalid values in a config file)."""

    exit_code = ExitCode.CONFIG_ERROR


class AnnomarkFileNotFoundError(AnnomarkCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class AnnomarkPermissionDeniedError(AnnomarkCliError):
    """Error for insufficient permissions reading an input."""

    exit_code = ExitCode.PERMISSION_DENIED


class AnnomarkIOError(AnnomarkCliError):
    """Error for other I/O failures reading an input."""

    exit_code = ExitCode.IO_ERROR


class AnnomarkEncodingError(AnnomarkCliError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR
