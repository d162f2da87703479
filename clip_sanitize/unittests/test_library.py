"""Unit tests for the optional rule library."""

from __future__ import annotations

import unicodedata

import pytest

from clip_sanitize.library import (
    COLLAPSE_BLANK_LINES,
    NORMALIZE_NFC,
    STRIP_ZERO_WIDTH,
    TRIM_TRAILING_WHITESPACE,
    collapse_blank_lines,
    normalize_nfc,
    strip_zero_width,
    trim_trailing_whitespace,
)
from clip_sanitize.pipeline import RuleSet

ZWSP = "\u200b"
BOM = "\ufeff"


class TestStripZeroWidth:
    """Tests for strip_zero_width()."""

    def test_removes_zero_width_characters(self) -> None:
        """Zero-width spaces, joiners and BOMs are dropped."""
        text = f"{BOM}pa{ZWSP}ss\u200cwo\u200drd"
        assert strip_zero_width(text) == "password"

    def test_clean_text_is_returned_as_is(self) -> None:
        """Text without zero-width characters is not copied."""
        text = "plain text"
        assert strip_zero_width(text) is text


class TestTrimTrailingWhitespace:
    """Tests for trim_trailing_whitespace()."""

    def test_trims_each_line(self) -> None:
        """Spaces and tabs before a line ending are removed."""
        assert trim_trailing_whitespace("a  \nb\t\nc ") == "a\nb\nc"

    def test_keeps_crlf_endings(self) -> None:
        """Windows line endings survive trimming."""
        assert trim_trailing_whitespace("a \r\nb") == "a\r\nb"

    def test_clean_text_is_returned_as_is(self) -> None:
        """Text without trailing whitespace is not copied."""
        text = "a\n  b"
        assert trim_trailing_whitespace(text) is text


class TestCollapseBlankLines:
    """Tests for collapse_blank_lines()."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a\n\n\nb", "a\n\nb"),
            ("a\n\n\n\n\nb", "a\n\nb"),
            ("a\n  \n\t\n\nb", "a\n\nb"),
        ],
    )
    def test_collapses_runs(self, text: str, expected: str) -> None:
        """Runs of blank lines shrink to one blank line."""
        assert collapse_blank_lines(text) == expected

    def test_single_blank_line_is_returned_as_is(self) -> None:
        """A lone blank line is already collapsed."""
        text = "a\n\nb"
        assert collapse_blank_lines(text) is text


class TestNormalizeNfc:
    """Tests for normalize_nfc()."""

    def test_composes_decomposed_text(self) -> None:
        """Decomposed characters are composed."""
        decomposed = unicodedata.normalize("NFD", "café")
        assert normalize_nfc(decomposed) == "café"

    def test_normalised_text_is_returned_as_is(self) -> None:
        """NFC text is not copied."""
        text = "café"
        assert normalize_nfc(text) is text


@pytest.mark.parametrize(
    ("rule", "text"),
    [
        (STRIP_ZERO_WIDTH, f"a{ZWSP}b"),
        (TRIM_TRAILING_WHITESPACE, "a \n b \t"),
        (COLLAPSE_BLANK_LINES, "a\n\n\n\nb\n\n\nc"),
        (NORMALIZE_NFC, unicodedata.normalize("NFD", "Ångström")),
    ],
    ids=lambda value: getattr(value, "name", "text"),
)
def test_library_rules_are_idempotent(rule: object, text: str) -> None:
    """Applying a library rule twice matches applying it once."""
    once = RuleSet((rule,)).apply(text)  # type: ignore[arg-type]
    assert RuleSet((rule,)).apply(once) == once
