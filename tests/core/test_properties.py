# topmark:header:start
#
#   project      : AnnoMark
#   file         : test_properties.py
#   file_relpath : tests/core/test_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property-based tests for extraction and name matching.

Text is drawn from a bounded alphabet rich in grammar characters (``@``,
parentheses, ``=``, commas, backslashes, newlines) so the extractor meets
degenerate input far more often than with arbitrary Unicode.
"""

from __future__ import annotations

from typing import Any

from hypothesis import given, settings
from hypothesis import strategies as st

from annomark.core.casing import DEFAULT_CONVENTIONS, candidate_names, convert
from annomark.core.parser import extract, iter_entries
from tests.conftest import mark_hypothesis_slow

GRAMMAR_TEXT = st.text(
    alphabet=st.sampled_from(list("@ab_-()=,\\ \t\n*/\"[]{}1:")),
    max_size=120,
)

# Every word has at least two letters: a one-letter word next to a capital
# ("aA") reads back as a single acronym once converted.
IDENTIFIERS = st.from_regex(
    r"[a-z]{2,5}[0-9]{0,2}(?:[_-]?[a-zA-Z][a-z]{1,4}[0-9]{0,2}){0,3}",
    fullmatch=True,
)

SCALARS: st.SearchStrategy[Any] = st.one_of(
    st.integers(min_value=-1000, max_value=1000),
    st.booleans(),
    st.from_regex(r"[a-z]{1,8}", fullmatch=True).filter(
        lambda s: s not in ("true", "false", "null")
    ),
)


@mark_hypothesis_slow
@settings(max_examples=200, deadline=None)
@given(GRAMMAR_TEXT)
def test_extract_is_total_and_deterministic(text: str) -> None:
    """Any text extracts without error and twice to equal stores."""
    assert extract(text) == extract(text)


@mark_hypothesis_slow
@settings(max_examples=200, deadline=None)
@given(GRAMMAR_TEXT)
def test_entries_are_ordered_and_disjoint(text: str) -> None:
    """Occurrences advance strictly through the text without overlapping."""
    last_end = 0
    for entry in iter_entries(text):
        start, end = entry.span
        assert start >= last_end
        assert end > start
        assert text[start] == "@"
        last_end = end


@mark_hypothesis_slow
@given(GRAMMAR_TEXT)
def test_store_names_match_entries(text: str) -> None:
    """The store holds exactly the names seen as occurrences."""
    seen: list[str] = []
    for entry in iter_entries(text):
        if entry.name not in seen:
            seen.append(entry.name)
    assert extract(text).names() == seen


@given(st.lists(SCALARS, min_size=2, max_size=6))
def test_repeated_scalars_accumulate_in_order(values: list[Any]) -> None:
    """N scalar occurrences give a list of N interpreted values in order."""
    lines = [f"@x {str(v).lower() if isinstance(v, bool) else v}" for v in values]
    assert extract("\n".join(lines)).get("x") == values


@given(IDENTIFIERS)
def test_every_candidate_converts_back_to_itself(name: str) -> None:
    """Converting a candidate into the convention that produced it is stable."""
    for convention in DEFAULT_CONVENTIONS:
        candidate = convert(name, convention)
        assert convert(candidate, convention) == candidate


@given(IDENTIFIERS)
def test_candidates_are_unique_and_start_with_name(name: str) -> None:
    """Candidate lists never repeat and always begin with the exact name."""
    candidates = list(candidate_names(name))
    assert candidates[0] == name
    assert len(candidates) == len(set(candidates))
