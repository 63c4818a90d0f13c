# topmark:header:start
#
#   project      : AnnoMark
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the TOML helpers in `annomark.config.io`."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit

from annomark.config.io import (
    get_str_list_or_none,
    get_string_value_or_none,
    get_table_value,
    load_defaults_dict,
    load_toml_dict,
    to_toml,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults_dict_shape() -> None:
    """The defaults carry one [injector] table."""
    data = load_defaults_dict()
    assert list(data) == ["injector"]
    assert data["injector"]["single_field"] == "value"


def test_load_toml_dict_returns_plain_dicts(tmp_path: Path) -> None:
    """Parsed documents are unwrapped to builtin types."""
    path = tmp_path / "annomark.toml"
    path.write_text('[injector]\nconventions = ["snake"]\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"injector": {"conventions": ["snake"]}}
    assert type(data["injector"]) is dict


def test_load_toml_dict_missing_file(tmp_path: Path) -> None:
    """Unreadable files yield an empty dict."""
    assert load_toml_dict(tmp_path / "nope.toml") == {}


def test_to_toml_is_parseable() -> None:
    """Rendered TOML parses back to the same data."""
    data = load_defaults_dict()
    parsed: Any = tomlkit.parse(to_toml(data)).unwrap()
    assert parsed == data


def test_getters_ignore_wrong_shapes() -> None:
    """Getters fall back instead of raising."""
    table: dict[str, Any] = {"t": 1, "s": 2, "l": ["a", 1], "ok": ["a", "b"], "name": "x"}
    assert get_table_value(table, "t") == {}
    assert get_table_value(table, "missing") == {}
    assert get_string_value_or_none(table, "s") is None
    assert get_string_value_or_none(table, "name") == "x"
    assert get_str_list_or_none(table, "l") is None
    assert get_str_list_or_none(table, "ok") == ["a", "b"]
    assert get_str_list_or_none(table, "missing") is None
