"""Ordered rule pipeline and the process-wide rule registry.

The active pipeline is an immutable :class:`RuleSet` behind a single handle.
Readers hold the lock only long enough to copy the handle and then run rules
against their private snapshot; writers hold it only to swap the handle. A
sanitize call therefore sees exactly one installed pipeline from start to
finish, even when :func:`set_rules` runs concurrently.
"""

from __future__ import annotations

import contextlib
import dataclasses as dc
import enum
import logging
import threading
import typing as t

from .config import raw_mode_enabled
from .errors import RuleOutputError
from .rules import SanitizeRule, default_rules, ensure_rule

logger = logging.getLogger(__name__)


class Direction(enum.Enum):
    """Which way text is crossing the clipboard boundary."""

    OUTBOUND = "outbound"
    INBOUND = "inbound"


@dc.dataclass(frozen=True, slots=True)
class RuleSet:
    """Immutable ordered sequence of rules."""

    rules: tuple[SanitizeRule, ...] = ()

    @property
    def names(self) -> list[str]:
        """Return the rule names in execution order."""
        return [rule.name for rule in self.rules]

    def apply(self, text: str) -> str:
        """Run every rule in order, feeding each output into the next.

        A rule that hands back the very object it received is treated as a
        no-op, so unchanged text is never copied between stages. The result
        is always a plain ``str``.
        """
        current = text
        for rule in self.rules:
            result = rule.apply(current)
            if not isinstance(result, str):
                raise RuleOutputError(rule.name, result)
            if result is not current:
                logger.debug("Rule %r rewrote clipboard text", rule.name)
                current = result
        return str(current)


class RuleRegistry:
    """Thread-safe holder for the active :class:`RuleSet`."""

    def __init__(self, rules: t.Iterable[SanitizeRule] | None = None) -> None:
        initial = default_rules() if rules is None else tuple(rules)
        self._lock = threading.Lock()
        self._active = RuleSet(initial)

    def snapshot(self) -> RuleSet:
        """Return the currently installed rule set."""
        with self._lock:
            return self._active

    def install(self, rule_set: RuleSet) -> RuleSet:
        """Swap in *rule_set* and return the one it replaced."""
        with self._lock:
            previous = self._active
            self._active = rule_set
        logger.debug("Installed sanitize rules: %s", rule_set.names)
        return previous

    def replace(self, rules: t.Iterable[SanitizeRule]) -> RuleSet:
        """Install a new rule set built from *rules*."""
        return self.install(RuleSet(tuple(ensure_rule(rule) for rule in rules)))

    def append(self, rule: SanitizeRule) -> RuleSet:
        """Install the current rules plus *rule* at the end.

        The read and the swap are not one atomic step: two concurrent appends
        may lose one of the additions. Batch related rules into a single
        :meth:`replace` call instead.
        """
        current = self.snapshot()
        return self.install(RuleSet((*current.rules, ensure_rule(rule))))

    def reset(self) -> RuleSet:
        """Reinstall the built-in default rules."""
        return self.install(RuleSet(default_rules()))

    def apply(self, text: str) -> str:
        """Apply the current snapshot to *text* outside the lock."""
        return self.snapshot().apply(text)


_REGISTRY = RuleRegistry()


def set_rules(rules: t.Iterable[SanitizeRule]) -> None:
    """Replace the entire rule pipeline."""
    _REGISTRY.replace(rules)


def register_rule(rule: SanitizeRule) -> None:
    """Append *rule* to the end of the current pipeline."""
    _REGISTRY.append(rule)


def reset_to_defaults() -> None:
    """Reset the pipeline to the built-in default rules."""
    _REGISTRY.reset()


def active_rules() -> tuple[SanitizeRule, ...]:
    """Return the rules currently installed, in execution order."""
    return _REGISTRY.snapshot().rules


def sanitize_for_copy(raw: str) -> str:
    """Apply the active rules to text about to be placed on the clipboard."""
    return _REGISTRY.apply(raw)


def sanitize_incoming(raw: str) -> str:
    """Apply the active rules to text pasted into the application.

    Shares the outbound pipeline today; kept separate so inbound-only rules
    can be introduced without touching call sites.
    """
    return _REGISTRY.apply(raw)


_ENTRY_POINTS: t.Final[dict[Direction, t.Callable[[str], str]]] = {
    Direction.OUTBOUND: sanitize_for_copy,
    Direction.INBOUND: sanitize_incoming,
}


def sanitize(
    raw: str,
    direction: Direction = Direction.OUTBOUND,
    *,
    raw_mode: bool | None = None,
) -> str:
    """Sanitize *raw* for *direction*, unless raw mode is in effect.

    ``raw_mode=None`` defers to :func:`clip_sanitize.config.raw_mode_enabled`.
    """
    bypass = raw_mode_enabled() if raw_mode is None else raw_mode
    if bypass:
        logger.debug("Raw mode enabled; skipping %s sanitization", direction.value)
        return str(raw)
    return _ENTRY_POINTS[direction](raw)


@contextlib.contextmanager
def override_rules(rules: t.Iterable[SanitizeRule]) -> t.Iterator[RuleSet]:
    """Temporarily install *rules*, restoring the previous pipeline on exit."""
    previous = _REGISTRY.replace(rules)
    try:
        yield _REGISTRY.snapshot()
    finally:
        _REGISTRY.install(previous)


__all__ = [
    "Direction",
    "RuleRegistry",
    "RuleSet",
    "active_rules",
    "override_rules",
    "register_rule",
    "reset_to_defaults",
    "sanitize",
    "sanitize_for_copy",
    "sanitize_incoming",
    "set_rules",
]
