"""XFEATURE FILE PURPOSE
Purpose: flag nodes, disabled markers and the tree builder (`define_flag`).
Hot path: yes (`is_enabled` is called wherever a feature is gated).
Feature flags: none.
Failure mode: no validation; names containing '.', '-' or '*' are the caller's problem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Mapping, Union

from xfeature.resolution import resolve


@dataclass(frozen=True)
class DisabledMarker:
    """Directive meaning "disable the registered node with this name"."""

    qualified_name: str

    def name(self) -> str:
        return self.qualified_name


@dataclass(eq=False)
class FlagNode:
    leaf_name: str
    qualified_name: str
    children: dict[str, FlagNode] = field(default_factory=dict)
    explicit_state: bool | None = None
    _registry: Any = field(default=None, init=False, repr=False)

    def __getattr__(self, key: str) -> FlagNode:
        # children declared under identifier keys read like attributes: Flags.Two.One
        children = self.__dict__.get("children")
        if children is not None and key in children:
            return children[key]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {key!r}")

    def __getitem__(self, key: str) -> FlagNode:
        return self.children[key]

    def name(self) -> str:
        return self.qualified_name

    def enable(self) -> None:
        self.explicit_state = True

    def disable(self) -> None:
        self.explicit_state = False

    def is_enabled(self) -> bool:
        if self._registry is not None:
            return self._registry.is_enabled(self)
        return resolve(self, lambda _name: None)

    def is_disabled(self) -> bool:
        return not self.is_enabled()

    def as_disabled(self) -> DisabledMarker:
        return DisabledMarker(self.qualified_name)

    def walk(self) -> Iterator[FlagNode]:
        """Yield this node and every descendant, parents before children."""
        yield self
        for child in self.children.values():
            yield from child.walk()


Directive = Union[FlagNode, DisabledMarker]


def _attach(node: FlagNode, prefix: str) -> FlagNode:
    # Every attachment gets its own copy so a subtree can be embedded under several parents.
    qualified = f"{prefix}.{node.leaf_name}"
    copy = FlagNode(leaf_name=node.leaf_name, qualified_name=qualified, explicit_state=node.explicit_state)
    for key, child in node.children.items():
        copy.children[key] = _attach(child, qualified)
    return copy


def define_flag(name: str, children: Mapping[str, Any] | None = None) -> FlagNode:
    """Build a root flag named `name` with `children` renamed beneath it.

    Children may be subtrees built earlier with `define_flag`; each is copied and
    every descendant's qualified name is rewritten to `<parent>.<leaf>`. Values
    that are not flag nodes are ignored.
    """
    node = FlagNode(leaf_name=name, qualified_name=name)
    for key, child in (children or {}).items():
        if isinstance(child, FlagNode):
            node.children[key] = _attach(child, name)
    return node
