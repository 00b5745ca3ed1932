"""XFEATURE FILE PURPOSE
Purpose: effective state of a flag (explicit state, nearest stated ancestor, default on).
Hot path: yes (recomputed on every read; nothing is cached).
Feature flags: none.
Failure mode: never raises; unknown ancestors are skipped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from xfeature.node import FlagNode

SEPARATOR = "."

Lookup = Callable[[str], Optional["FlagNode"]]


def ancestor_chain(qualified_name: str) -> list[str]:
    """Every prefix of a dotted name, root first: "a.b.c" -> ["a", "a.b", "a.b.c"]."""
    parts = qualified_name.split(SEPARATOR)
    return [SEPARATOR.join(parts[: i + 1]) for i in range(len(parts))]


def resolve(node: FlagNode, lookup: Lookup) -> bool:
    """Features are namespaced by dot notation and the most specific rule wins.

    A node's own explicit state decides first. Otherwise the nearest ancestor
    found through `lookup` that carries an explicit state decides; ancestors that
    are missing or stateless are skipped. With no stated ancestor a flag is on.
    """
    if node.explicit_state is not None:
        return node.explicit_state

    for parent_name in reversed(ancestor_chain(node.qualified_name)[:-1]):
        parent = lookup(parent_name)
        if parent is None:
            continue
        if parent.explicit_state is not None:
            return parent.explicit_state

    return True
