"""XFEATURE FILE PURPOSE
Purpose: parse configuration strings ("a,-b,-*,c.d") and apply enable/disable directives.
Hot path: no (startup only).
Feature flags: XFEATURE_DEBUG.
Failure mode: unknown flag => FlagLookupError; the `-*` pass stays applied, named tokens are not.

Grammar (tokens separated by commas and/or whitespace, newlines included):
  *       reserved, ignored
  -*      disable every root-level flag; children keep inheriting
  -name   disable `name`
  name    enable `name`
`-*` is applied before any named token wherever it appears in the string.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Iterable

from xfeature.config import is_debug
from xfeature.errors import FlagLookupError
from xfeature.logging import logger
from xfeature.node import DisabledMarker, Directive, FlagNode

if TYPE_CHECKING:
    from xfeature.registry import FlagRegistry

WILDCARD = "*"
NEGATION = "-"
DISABLE_ALL = NEGATION + WILDCARD

_TOKEN_SPLIT_RE = re.compile(r"[,\s]+")


def parse_tokens(text: str) -> list[str]:
    tokens = (t.strip() for t in _TOKEN_SPLIT_RE.split(text or ""))
    return [t for t in tokens if t]


def load_features(registry: FlagRegistry, directives: Iterable[Directive], override: bool = False) -> None:
    if override:
        registry.reset_states()

    for directive in directives:
        if isinstance(directive, DisabledMarker):
            base = registry.lookup(directive.qualified_name)
            if base is not None:
                base.disable()
            elif is_debug():
                logger.info("FLAG_DISABLE_SKIPPED name=%s reason=not_registered", directive.qualified_name)
        elif isinstance(directive, FlagNode):
            directive.enable()


def load_from_string(registry: FlagRegistry, text: str) -> None:
    tokens = parse_tokens(text)

    if DISABLE_ALL in tokens:
        load_features(registry, [node.as_disabled() for node in registry.roots()])

    resolved: list[Directive] = []
    for token in tokens:
        if token in (WILDCARD, DISABLE_ALL):
            continue
        found = registry.get(token)
        if found is None:
            logger.warning("FLAG_UNKNOWN name=%s", token)
            raise FlagLookupError(token, registry.names())
        resolved.append(found)

    load_features(registry, resolved)

    if is_debug():
        logger.info("FLAGS_LOADED tokens=%s disable_all=%s", tokens, DISABLE_ALL in tokens)
