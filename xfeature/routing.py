"""XFEATURE FILE PURPOSE
Purpose: FastAPI wiring gated by flags (conditional routers, per-request gate, state report).
Hot path: `require_feature` runs per request; everything else is startup only.
Feature flags: XFEATURE_DEBUG.
Failure mode: disabled flag => router not mounted / 404.
"""

from __future__ import annotations

from typing import Any, Callable

from fastapi import APIRouter, FastAPI, HTTPException
from pydantic import BaseModel

from xfeature.config import is_debug
from xfeature.logging import logger
from xfeature.node import FlagNode
from xfeature.registry import FlagRegistry


class FlagState(BaseModel):
    name: str
    enabled: bool
    explicit: bool | None = None


def include_feature_router(
    app: FastAPI | APIRouter,
    flag: FlagNode,
    router: APIRouter,
    **kwargs: Any,
) -> bool:
    # decided once, at wiring time
    if flag.is_disabled():
        if is_debug():
            logger.info("FEATURE_ROUTER_SKIPPED flag=%s", flag.name())
        return False
    app.include_router(router, **kwargs)
    if is_debug():
        logger.info("FEATURE_ROUTER_MOUNTED flag=%s", flag.name())
    return True


def require_feature(flag: FlagNode) -> Callable[[], None]:
    def _dependency() -> None:
        if flag.is_disabled():
            raise HTTPException(status_code=404, detail="not found")

    return _dependency


def flag_state(registry: FlagRegistry, node: FlagNode) -> FlagState:
    return FlagState(name=node.name(), enabled=registry.is_enabled(node), explicit=node.explicit_state)


def registry_router(registry: FlagRegistry, prefix: str = "/features") -> APIRouter:
    router = APIRouter(prefix=prefix, tags=["features"])

    @router.get("")
    async def list_flags() -> list[FlagState]:
        return [flag_state(registry, node) for node in registry]

    @router.get("/{name}")
    async def get_flag(name: str) -> FlagState:
        node = registry.lookup(name)
        if node is None:
            raise HTTPException(status_code=404, detail="unknown feature")
        return flag_state(registry, node)

    return router
