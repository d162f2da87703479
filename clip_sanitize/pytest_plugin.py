"""Pytest plugin providing the ``sanitize_rules`` fixture."""

from __future__ import annotations

import logging
import typing as t

import pytest

from . import pipeline
from .rules import SanitizeRule, default_rules

logger = logging.getLogger(__name__)


def pytest_configure(config: pytest.Config) -> None:
    """Register plugin-specific markers."""
    config.addinivalue_line(
        "markers",
        (
            "clip_sanitize(defaults: bool = True): start the sanitize_rules "
            "fixture from the built-in rules, or from an empty pipeline."
        ),
    )


class SanitizeRulesHandle:
    """Test-facing view of the process-wide rule registry."""

    def set(self, rules: t.Iterable[SanitizeRule]) -> None:
        """Replace the active rules."""
        pipeline.set_rules(rules)

    def register(self, rule: SanitizeRule) -> None:
        """Append *rule* to the active rules."""
        pipeline.register_rule(rule)

    def reset(self) -> None:
        """Reinstall the default rules."""
        pipeline.reset_to_defaults()

    @property
    def names(self) -> list[str]:
        """Return the names of the active rules."""
        return [rule.name for rule in pipeline.active_rules()]


def _start_from_defaults(request: pytest.FixtureRequest) -> bool:
    """Return the marker override for the starting pipeline, if present."""
    marker = request.node.get_closest_marker("clip_sanitize")
    if marker is None or "defaults" not in marker.kwargs:
        return True
    return bool(marker.kwargs["defaults"])


@pytest.fixture
def sanitize_rules(
    request: pytest.FixtureRequest,
) -> t.Generator[SanitizeRulesHandle, None, None]:
    """Yield a handle for configuring rules; restore the pipeline afterwards."""
    start = default_rules() if _start_from_defaults(request) else ()
    with pipeline.override_rules(start) as installed:
        logger.debug("sanitize_rules fixture starting from %s", installed.names)
        yield SanitizeRulesHandle()
