"""Rule abstraction for the clipboard sanitization pipeline.

A rule is a named, pure ``str -> str`` transform. Returning the *same* object
it was given tells the pipeline that nothing changed, so large clipboard
payloads are not copied on every stage. Rules should be deterministic and
idempotent; the pipeline does not enforce either property.

Write a rule either as a class with ``name`` and ``apply`` or by wrapping a
function::

    shout = fn_rule("uppercase", str.upper)
"""

from __future__ import annotations

import dataclasses as dc
import typing as t

from .errors import InvalidRuleError

# Decorative glyph the TUI prepends to user lines in the transcript.
LIVE_PREFIX_GLYPH: t.Final[str] = "▌"
_LIVE_PREFIX_WITH_SPACE: t.Final[str] = f"{LIVE_PREFIX_GLYPH} "

STRIP_PREFIX_GLYPH_RULE_NAME: t.Final[str] = "strip_user_prefix_glyph"


@t.runtime_checkable
class SanitizeRule(t.Protocol):
    """Protocol for a single sanitization rule."""

    @property
    def name(self) -> str:
        """Return the diagnostic name of the rule."""
        ...

    def apply(self, text: str) -> str:
        """Return *text* itself when unchanged, otherwise a new string."""
        ...


@dc.dataclass(frozen=True, slots=True)
class FnRule:
    """Rule backed by a plain function."""

    name: str
    func: t.Callable[[str], str] = dc.field(compare=False)

    def apply(self, text: str) -> str:
        """Delegate to the wrapped function."""
        return self.func(text)

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        """Return a debug representation."""
        return f"FnRule({self.name!r})"


def fn_rule(name: str, func: t.Callable[[str], str]) -> SanitizeRule:
    """Wrap *func* as a rule called *name*."""
    if not isinstance(name, str):
        raise InvalidRuleError(name, "rule name must be a string")
    if not callable(func):
        raise InvalidRuleError(func, "rule body must be callable")
    return FnRule(name, func)


def ensure_rule(obj: object) -> SanitizeRule:
    """Return *obj* if it looks like a rule, else raise :class:`InvalidRuleError`."""
    if not isinstance(obj, SanitizeRule):
        raise InvalidRuleError(obj, "expected a 'name' attribute and 'apply' method")
    if not isinstance(obj.name, str):
        raise InvalidRuleError(obj, "rule name must be a string")
    return obj


def _split_lines(text: str) -> list[str]:
    """Split on ``\\n``, dropping a trailing ``\\r`` and a final empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _strip_line_prefix(line: str) -> str:
    if line.startswith(_LIVE_PREFIX_WITH_SPACE):
        return line[len(_LIVE_PREFIX_WITH_SPACE) :]
    if line.startswith(LIVE_PREFIX_GLYPH):
        return line[len(LIVE_PREFIX_GLYPH) :]
    return line


def strip_prefix_glyph(text: str) -> str:
    """Remove the decorative prefix glyph (and one following space) per line.

    Lines are rejoined with ``\\n`` whenever any line changed, so ``\\r\\n``
    input comes back with bare ``\\n`` separators and without a trailing line
    break. Input in which no line starts with the glyph is returned as-is.
    """
    if LIVE_PREFIX_GLYPH not in text:
        return text

    changed = False
    out: list[str] = []
    for line in _split_lines(text):
        stripped = _strip_line_prefix(line)
        if len(stripped) != len(line):
            changed = True
        out.append(stripped)
    if not changed:
        return text
    return "\n".join(out)


def default_rules() -> tuple[SanitizeRule, ...]:
    """Return the built-in rule sequence."""
    return (fn_rule(STRIP_PREFIX_GLYPH_RULE_NAME, strip_prefix_glyph),)


__all__ = [
    "LIVE_PREFIX_GLYPH",
    "STRIP_PREFIX_GLYPH_RULE_NAME",
    "FnRule",
    "SanitizeRule",
    "default_rules",
    "ensure_rule",
    "fn_rule",
    "strip_prefix_glyph",
]
