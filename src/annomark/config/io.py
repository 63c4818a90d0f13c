# topmark:header:start
#
#   project      : AnnoMark
#   file         : io.py
#   file_relpath : src/annomark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and read typed values from them.

Parsing is done with `tomlkit` and returned as plain `dict` structures. The
getters never raise: a missing key or a value of the wrong shape yields the
default and a debug log entry.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from annomark.config.keys import Toml
from annomark.config.logging import get_logger
from annomark.constants import DEFAULT_MULTIPLE_FIELD, DEFAULT_SINGLE_FIELD
from annomark.core.casing import DEFAULT_CONVENTIONS

if TYPE_CHECKING:
    from pathlib import Path

    from annomark.config.logging import AnnomarkLogger

TomlTable = dict[str, Any]

logger: AnnomarkLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return AnnoMark's runtime defaults as a TOML-shaped dict (no I/O)."""
    return {
        Toml.SECTION_INJECTOR: {
            Toml.KEY_SINGLE_FIELD: DEFAULT_SINGLE_FIELD,
            Toml.KEY_MULTIPLE_FIELD: DEFAULT_MULTIPLE_FIELD,
            Toml.KEY_CONVENTIONS: [c.value for c in DEFAULT_CONVENTIONS],
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``annomark.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed content; an empty dict when the file cannot be read
            or parsed (the error is logged).
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML-shaped dict to TOML text."""
    return tomlkit.dumps(data)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.debug("Expected table for key %s, got %r; ignoring", key, value)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Return the string value of ``key``, or None when absent or not a string."""
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    logger.debug("Cannot use %r as string for key %s, returning None", value, key)
    return None


def get_str_list_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Return the list of strings under ``key``, or None when absent or malformed."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(x, str) for x in value):
        return list(cast("list[str]", value))
    logger.debug("Expected list of strings for key %s, got %r; returning None", key, value)
    return None
