"""Behave hooks for clipboard sanitization features."""
# pyright: reportMissingImports=false

from __future__ import annotations

import typing as t

from clip_sanitize import reset_to_defaults


def before_scenario(context: t.Any, scenario: t.Any) -> None:
    """Start every scenario from the default rules with raw mode off."""
    del scenario
    reset_to_defaults()
    context.raw_mode = False


def after_scenario(context: t.Any, scenario: t.Any) -> None:
    """Leave the default rules installed for the next scenario."""
    del context, scenario
    reset_to_defaults()
