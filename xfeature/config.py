"""XFEATURE FILE PURPOSE
Purpose: environment configuration helpers (safe defaults).
Hot path: no (read at registration time only).
Feature flags: FEATURES, XFEATURE_DEBUG.
Failure mode: safe defaults when unset.
"""

from __future__ import annotations

import os

DEFAULT_SOURCE = "FEATURES"


def env_value(name: str, default: str = "") -> str:
    return os.getenv(name) or default


def env_flag(name: str, default: str = "0") -> bool:
    v = env_value(name, default).strip().lower()
    return v in ("1", "true", "yes", "on")


def is_debug() -> bool:
    return env_flag("XFEATURE_DEBUG", "0")
