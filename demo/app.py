"""XFEATURE FILE PURPOSE
Purpose: create the demo FastAPI app and mount routers according to its flags.
Hot path: no (startup only).
Feature flags: FEATURES (or the env var named by `source`).
Failure mode: unknown name in the configuration string => FlagLookupError at startup.
"""

from __future__ import annotations

from fastapi import FastAPI

from demo.flags import build_flags
from demo.weather import build_forecast_router, build_router
from xfeature import FlagRegistry
from xfeature.routing import include_feature_router, registry_router


def create_app(registry: FlagRegistry | None = None, source: bool | str = True) -> FastAPI:
    registry = registry if registry is not None else FlagRegistry()
    flags = registry.register(build_flags(), override=True, load_from_source=source)

    app = FastAPI()
    app.state.flags = flags
    app.state.registry = registry

    @app.get("/")
    async def root() -> dict[str, bool]:
        return {"ok": True}

    app.include_router(build_router(flags))
    include_feature_router(app, flags["Advanced"].Forecast, build_forecast_router(flags))
    include_feature_router(app, flags["Admin"], registry_router(registry))
    return app
