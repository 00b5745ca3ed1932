"""XFEATURE FILE PURPOSE
Purpose: error raised for unknown feature names in configuration strings.
Hot path: no (startup only).
Feature flags: none.
Failure mode: propagates to the caller; the load is aborted.
"""

from __future__ import annotations

from typing import Iterable


class FlagLookupError(LookupError):
    """Raised when a configuration token names a flag that is not registered."""

    def __init__(self, name: str, available: Iterable[str]) -> None:
        self.name = name
        self.available = list(available)
        super().__init__(f"Feature {name} not found. Available features: {', '.join(self.available)}")
