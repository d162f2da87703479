"""Ordered, extensible sanitization rules for text crossing the clipboard.

Outbound text (copy) and inbound text (paste) pass through the same rule
pipeline today via :func:`sanitize_for_copy` and :func:`sanitize_incoming`.
Raw access bypasses the pipeline; see :func:`sanitize`.
"""

from __future__ import annotations

from .config import RAW_MODE_ENV, raw_mode_enabled
from .errors import ClipSanitizeError, InvalidRuleError, RuleOutputError
from .pipeline import (
    Direction,
    RuleRegistry,
    RuleSet,
    active_rules,
    override_rules,
    register_rule,
    reset_to_defaults,
    sanitize,
    sanitize_for_copy,
    sanitize_incoming,
    set_rules,
)
from .rules import (
    LIVE_PREFIX_GLYPH,
    FnRule,
    SanitizeRule,
    default_rules,
    fn_rule,
    strip_prefix_glyph,
)

__all__ = [
    "LIVE_PREFIX_GLYPH",
    "RAW_MODE_ENV",
    "ClipSanitizeError",
    "Direction",
    "FnRule",
    "InvalidRuleError",
    "RuleOutputError",
    "RuleRegistry",
    "RuleSet",
    "SanitizeRule",
    "active_rules",
    "default_rules",
    "fn_rule",
    "override_rules",
    "raw_mode_enabled",
    "register_rule",
    "reset_to_defaults",
    "sanitize",
    "sanitize_for_copy",
    "sanitize_incoming",
    "set_rules",
    "strip_prefix_glyph",
]
