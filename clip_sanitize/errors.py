"""Exception hierarchy for clip-sanitize."""

from __future__ import annotations


class ClipSanitizeError(Exception):
    """Base class for all clip-sanitize errors."""


class InvalidRuleError(ClipSanitizeError, TypeError):
    """Raised when an object does not satisfy the :class:`SanitizeRule` shape."""

    def __init__(self, obj: object, reason: str) -> None:
        msg = f"{obj!r} is not a sanitize rule: {reason}"
        super().__init__(msg)
        self.obj = obj
        self.reason = reason


class RuleOutputError(ClipSanitizeError, TypeError):
    """Raised when a rule returns something other than ``str``."""

    def __init__(self, rule_name: str, result: object) -> None:
        msg = (
            f"Rule {rule_name!r} returned {type(result).__name__}, expected str"
        )
        super().__init__(msg)
        self.rule_name = rule_name
        self.result_type = type(result)


__all__ = ["ClipSanitizeError", "InvalidRuleError", "RuleOutputError"]
