"""Step definitions for clipboard sanitization behavioural tests."""
# pyright: reportMissingImports=false, reportUnknownMemberType=false

from __future__ import annotations

import typing as t

from behave import given, then, when  # type: ignore[attr-defined]

from clip_sanitize import (
    Direction,
    SanitizeRule,
    fn_rule,
    register_rule,
    reset_to_defaults,
    sanitize,
    set_rules,
)

NAMED_RULES: dict[str, SanitizeRule] = {
    "uppercase": fn_rule("uppercase", str.upper),
    "trim": fn_rule("trim", str.strip),
    "suffix-X": fn_rule("suffix-X", lambda s: f"{s}-X"),
}


class BehaveContext(t.Protocol):
    """Behave step context with attributes used in tests."""

    raw_mode: bool
    copied: str
    pasted: str


def _unescape(text: str) -> str:
    return text.replace("\\n", "\n")


@given("the default sanitize rules")
def step_default_rules(context: BehaveContext) -> None:
    """Install the built-in rules."""
    reset_to_defaults()


@given('the rule "{name}" is appended')
def step_append_rule(context: BehaveContext, name: str) -> None:
    """Append a named example rule."""
    register_rule(NAMED_RULES[name])


@given('the sanitize rules are replaced with "{names}"')
def step_replace_rules(context: BehaveContext, names: str) -> None:
    """Replace the pipeline with comma-separated named rules."""
    set_rules([NAMED_RULES[name.strip()] for name in names.split(",")])


@given("raw mode is enabled")
def step_raw_mode(context: BehaveContext) -> None:
    """Bypass sanitization for the rest of the scenario."""
    context.raw_mode = True


@when('the text "{text}" is copied')
def step_copy(context: BehaveContext, text: str) -> None:
    """Sanitize *text* for the clipboard."""
    context.copied = sanitize(
        _unescape(text), Direction.OUTBOUND, raw_mode=context.raw_mode
    )


@when('the text "{text}" is pasted')
def step_paste(context: BehaveContext, text: str) -> None:
    """Sanitize *text* arriving from the clipboard."""
    context.pasted = sanitize(
        _unescape(text), Direction.INBOUND, raw_mode=context.raw_mode
    )


@then('the copied text is "{expected}"')
def step_check_copied(context: BehaveContext, expected: str) -> None:
    """Assert the outbound result."""
    assert context.copied == _unescape(expected)


@then('the pasted text is "{expected}"')
def step_check_pasted(context: BehaveContext, expected: str) -> None:
    """Assert the inbound result."""
    assert context.pasted == _unescape(expected)


@then("the pasted text matches the copied text")
def step_check_match(context: BehaveContext) -> None:
    """Assert both directions produced the same text."""
    assert context.pasted == context.copied
