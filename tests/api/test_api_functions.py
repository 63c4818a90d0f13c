# topmark:header:start
#
#   project      : AnnoMark
#   file         : test_api_functions.py
#   file_relpath : tests/api/test_api_functions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the public API in `annomark.api` and the package root exports."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

import annomark
from annomark import api
from tests.conftest import make_config
from tests.destinations import FrozenRename, SingleValue, ValueFooBar

if TYPE_CHECKING:
    from pathlib import Path

SOURCE = '''\
class Model:
    """A model.

    @rename(serialize = abc, deserialize=bar)
    @default 42
    """
'''


def test_root_exports() -> None:
    """The package root re-exports the public API."""
    for name in annomark.__all__:
        assert hasattr(annomark, name), name
    assert annomark.extract is api.extract


def test_extract_then_inject() -> None:
    """Extraction and injection compose."""
    store = api.extract(SOURCE)
    target = FrozenRename()
    assert api.inject(store, target) is target
    assert target.serialize == "abc"


def test_inject_absent_returns_none() -> None:
    """inject returns None when the store lacks the destination's name."""
    assert api.inject(api.extract(SOURCE), SingleValue("missing")) is None


def test_parse_file(tmp_path: Path) -> None:
    """parse_file reads and extracts a file."""
    path = tmp_path / "model.py"
    path.write_text(SOURCE, encoding="utf-8")
    store = api.parse_file(path)
    assert store.get("default") == 42
    assert store == api.extract(SOURCE)


def test_parse_file_with_encoding(tmp_path: Path) -> None:
    """The encoding argument is honored."""
    path = tmp_path / "latin.txt"
    path.write_bytes("@author Jos\xe9\n".encode("latin-1"))
    assert api.parse_file(path, encoding="latin-1").get("author") == "Jos\xe9"


def test_parse_file_missing(tmp_path: Path) -> None:
    """Missing files raise the underlying OSError."""
    with pytest.raises(FileNotFoundError):
        api.parse_file(tmp_path / "absent.py")


def test_emplace_annotation() -> None:
    """emplace_annotation reports whether the name was found."""
    target = ValueFooBar("default")
    assert api.emplace_annotation(SOURCE, target) is True
    assert target.value == 42
    assert api.emplace_annotation(SOURCE, SingleValue("nothing")) is False


def test_config_is_forwarded() -> None:
    """A config passed to the API reaches both parser and injector."""
    config = make_config(single_field="foo")
    target = ValueFooBar("default")
    assert api.emplace_annotation(SOURCE, target, config=config)
    assert (target.value, target.foo) == (None, 42)


def test_iter_entries_reexport() -> None:
    """Raw occurrences are available from the API module."""
    assert [e.name for e in api.iter_entries(SOURCE)] == ["rename", "default"]
