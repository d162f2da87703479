"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import clip_sanitize.pipeline


@pytest.fixture(autouse=True)
def reset_sanitize_rules() -> t.Generator[None, None, None]:
    """Ensure every test starts and ends with the default rules."""
    clip_sanitize.pipeline.reset_to_defaults()
    yield
    clip_sanitize.pipeline.reset_to_defaults()
