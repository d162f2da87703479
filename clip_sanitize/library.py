"""Optional rules for common clipboard clean-ups.

None of these are installed by default. Outbound candidates trim trailing
whitespace and collapse blank-line runs; inbound candidates strip zero-width
characters and normalise to NFC. Install them with
:func:`clip_sanitize.register_rule` or as part of a :func:`set_rules` list.
"""

from __future__ import annotations

import re
import typing as t
import unicodedata

from .rules import SanitizeRule, fn_rule

_ZERO_WIDTH: t.Final[str] = "\u200b\u200c\u200d\ufeff"
_ZERO_WIDTH_RE: t.Final[re.Pattern[str]] = re.compile(f"[{_ZERO_WIDTH}]+")
_TRAILING_WS_RE: t.Final[re.Pattern[str]] = re.compile(r"[ \t]+(?=\r?\n|\Z)")
_BLANK_RUN_RE: t.Final[re.Pattern[str]] = re.compile(r"\n(?:[ \t]*\n){2,}")


def strip_zero_width(text: str) -> str:
    """Remove zero-width spaces, joiners and byte-order marks."""
    if not any(ch in _ZERO_WIDTH for ch in text):
        return text
    return _ZERO_WIDTH_RE.sub("", text)


def trim_trailing_whitespace(text: str) -> str:
    """Drop spaces and tabs at the end of every line, keeping line endings."""
    if _TRAILING_WS_RE.search(text) is None:
        return text
    return _TRAILING_WS_RE.sub("", text)


def collapse_blank_lines(text: str) -> str:
    """Collapse runs of blank lines into a single blank line."""
    if _BLANK_RUN_RE.search(text) is None:
        return text
    return _BLANK_RUN_RE.sub("\n\n", text)


def normalize_nfc(text: str) -> str:
    """Return *text* in Unicode normalisation form C."""
    if unicodedata.is_normalized("NFC", text):
        return text
    return unicodedata.normalize("NFC", text)


STRIP_ZERO_WIDTH: t.Final[SanitizeRule] = fn_rule("strip_zero_width", strip_zero_width)
TRIM_TRAILING_WHITESPACE: t.Final[SanitizeRule] = fn_rule(
    "trim_trailing_whitespace", trim_trailing_whitespace
)
COLLAPSE_BLANK_LINES: t.Final[SanitizeRule] = fn_rule(
    "collapse_blank_lines", collapse_blank_lines
)
NORMALIZE_NFC: t.Final[SanitizeRule] = fn_rule("normalize_nfc", normalize_nfc)

__all__ = [
    "COLLAPSE_BLANK_LINES",
    "NORMALIZE_NFC",
    "STRIP_ZERO_WIDTH",
    "TRIM_TRAILING_WHITESPACE",
    "collapse_blank_lines",
    "normalize_nfc",
    "strip_zero_width",
    "trim_trailing_whitespace",
]
