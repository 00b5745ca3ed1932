"""XFEATURE FILE PURPOSE
Purpose: flat registry of flags keyed by qualified name.
Hot path: low (lookups during resolution; mutation at startup only).
Feature flags: FEATURES (default configuration source), XFEATURE_DEBUG.
Failure mode: unknown names in the configuration source raise FlagLookupError at startup.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, TypeVar

from xfeature.config import DEFAULT_SOURCE, env_value, is_debug
from xfeature.loader import NEGATION, load_features, load_from_string
from xfeature.logging import logger
from xfeature.node import DisabledMarker, Directive, FlagNode
from xfeature.resolution import SEPARATOR, resolve

F = TypeVar("F", bound=Mapping)


class FlagRegistry:
    """Mapping of qualified name to flag node, plus the operations that act on it.

    The registry is plain process-local state without locking: register and
    load during startup, before concurrent readers exist.
    """

    def __init__(self) -> None:
        self._flags: dict[str, FlagNode] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._flags

    def __len__(self) -> int:
        return len(self._flags)

    def __iter__(self) -> Iterator[FlagNode]:
        return iter(list(self._flags.values()))

    def register(
        self,
        forest: F,
        *,
        override: bool = False,
        load_from_source: bool | str = True,
    ) -> F:
        """Flatten every node reachable from `forest` into the registry.

        override: clear the registry (and the state of the flags it held) first.
        load_from_source: True reads the FEATURES env var, a string names another
            env var, False leaves loading to the caller.
        """
        if override:
            self.clear()

        count = 0
        for root in forest.values():
            if not isinstance(root, FlagNode):
                continue
            for node in root.walk():
                self._flags[node.qualified_name] = node
                node._registry = self
                count += 1

        if is_debug():
            logger.info("FLAGS_REGISTERED count=%s total=%s override=%s", count, len(self._flags), override)

        if load_from_source:
            source = load_from_source if isinstance(load_from_source, str) else DEFAULT_SOURCE
            self.load_from_string(env_value(source))

        return forest

    def lookup(self, name: str) -> FlagNode | None:
        return self._flags.get(name)

    def get(self, name: str) -> FlagNode | DisabledMarker | None:
        """Find a flag; a leading '-' returns a disabled marker for it instead."""
        if name.startswith(NEGATION):
            node = self._flags.get(name[len(NEGATION) :])
            if node is None:
                return None
            return node.as_disabled()
        return self._flags.get(name)

    def is_enabled(self, node: FlagNode) -> bool:
        return resolve(node, self.lookup)

    def names(self) -> list[str]:
        return list(self._flags.keys())

    def roots(self) -> list[FlagNode]:
        return [node for name, node in self._flags.items() if SEPARATOR not in name]

    def snapshot(self) -> dict[str, bool]:
        return {name: self.is_enabled(node) for name, node in self._flags.items()}

    def _owned(self) -> list[FlagNode]:
        # a node registered again elsewhere belongs to that registry now
        return [node for node in self._flags.values() if node._registry is self]

    def reset_states(self) -> None:
        for node in self._owned():
            node.explicit_state = None

    def clear(self) -> None:
        for node in self._owned():
            node.explicit_state = None
            node._registry = None
        self._flags.clear()

    def load_features(self, directives: Iterable[Directive], override: bool = False) -> None:
        load_features(self, directives, override=override)

    def load_from_string(self, text: str) -> None:
        load_from_string(self, text)
