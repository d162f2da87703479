"""Environment-driven configuration for clip-sanitize.

Values are read on every call so that tests (and long-running applications)
see changes to the environment without reloading the module.
"""

from __future__ import annotations

import os
import typing as t

# Set to a truthy value to let text cross the clipboard boundary untouched.
RAW_MODE_ENV: t.Final[str] = "CLIP_SANITIZE_RAW"

_TRUTHY: t.Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})


def _is_truthy(value: str | None) -> bool:
    """Return ``True`` when *value* spells an enabled flag."""
    if value is None:
        return False
    return value.strip().lower() in _TRUTHY


def raw_mode_enabled(environ: t.Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when raw clipboard access is requested."""
    env = os.environ if environ is None else environ
    return _is_truthy(env.get(RAW_MODE_ENV))


__all__ = ["RAW_MODE_ENV", "raw_mode_enabled"]
