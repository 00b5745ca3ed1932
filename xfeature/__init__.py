"""Hierarchical feature flags.

    Flags = register_flags({
        "Posts": define_flag("posts", {
            "Search": define_flag("search", {"Ai": define_flag("ai")}),
        }),
    })
    Flags["Posts"].Search.Ai.is_enabled()

Flags are on by default; a flag without explicit state follows its nearest
explicitly enabled/disabled ancestor. With `FEATURES="-*,posts.search"` every
root is off except `posts.search` and its children.

The module-level functions act on `default_registry`; create a `FlagRegistry`
directly for an independent set of flags.
"""

from __future__ import annotations

from typing import Iterable, Mapping, TypeVar

from xfeature.errors import FlagLookupError
from xfeature.loader import parse_tokens
from xfeature.node import DisabledMarker, Directive, FlagNode, define_flag
from xfeature.registry import FlagRegistry
from xfeature.resolution import ancestor_chain, resolve

F = TypeVar("F", bound=Mapping)

default_registry = FlagRegistry()


def register_flags(forest: F, *, override: bool = False, load_from_source: bool | str = True) -> F:
    return default_registry.register(forest, override=override, load_from_source=load_from_source)


def load_from_string(text: str) -> None:
    default_registry.load_from_string(text)


def load_features(directives: Iterable[Directive], override: bool = False) -> None:
    default_registry.load_features(directives, override=override)


def is_enabled(node: FlagNode) -> bool:
    return node.is_enabled()


def get_flag(name: str) -> FlagNode | DisabledMarker | None:
    return default_registry.get(name)


__all__ = [
    "DisabledMarker",
    "Directive",
    "FlagLookupError",
    "FlagNode",
    "FlagRegistry",
    "ancestor_chain",
    "default_registry",
    "define_flag",
    "get_flag",
    "is_enabled",
    "load_features",
    "load_from_string",
    "parse_tokens",
    "register_flags",
    "resolve",
]
