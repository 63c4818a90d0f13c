# topmark:header:start
#
#   project      : AnnoMark
#   file         : io.py
#   file_relpath : src/annomark/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input reading for CLI commands: files and STDIN.

Read failures are mapped to `AnnomarkCliError` subclasses so each one exits
with its own sysexits code.
"""

from __future__ import annotations

import sys
from pathlib import Path

from annomark.cli.errors import (
    AnnomarkEncodingError,
    AnnomarkFileNotFoundError,
    AnnomarkIOError,
    AnnomarkPermissionDeniedError,
)
from annomark.constants import STDIN_DISPLAY_NAME, STDIN_SENTINEL


def stdin_is_interactive() -> bool:
    """Return True when STDIN is missing or attached to a terminal."""
    return not sys.stdin or sys.stdin.isatty()


def read_stdin_text() -> str:
    """Read all of STDIN as text."""
    return sys.stdin.read()


def read_input(path: str, *, encoding: str) -> tuple[str, str]:
    """Return ``(display_name, text)`` for a PATH argument.

    Args:
        path (str): A file path, or ``-`` for STDIN.
        encoding (str): Text encoding used for files.

    Returns:
        tuple[str, str]: The name to show for the input and its text.

    Raises:
        AnnomarkFileNotFoundError: If the path does not exist.
        AnnomarkPermissionDeniedError: If the path cannot be read.
        AnnomarkEncodingError: If the content is not valid in ``encoding``.
        AnnomarkIOError: For other read failures (e.g. a directory).
    """
    if path == STDIN_SENTINEL:
        return STDIN_DISPLAY_NAME, read_stdin_text()

    try:
        return path, Path(path).read_text(encoding=encoding)
    except FileNotFoundError as exc:
        raise AnnomarkFileNotFoundError(f"No such file: {path}") from exc
    except PermissionError as exc:
        raise AnnomarkPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise AnnomarkEncodingError(f"Cannot decode {path} as {encoding}: {exc.reason}") from exc
    except OSError as exc:
        raise AnnomarkIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc
