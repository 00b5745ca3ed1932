"""XFEATURE FILE PURPOSE
Purpose: weather endpoints whose output and routes depend on demo flags.
Hot path: yes (request handlers; flag reads are dictionary walks).
Feature flags: display.celsius, display.alerts, advanced.forecast, advanced.air-quality.
Failure mode: disabled forecast => route not mounted; disabled air quality => 404.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from xfeature import FlagNode
from xfeature.routing import require_feature

WEATHER = {
    "temperature": 22,
    "condition": "Sunny",
    "alerts": ["UV Index High"],
    "hourly": [
        {"time": "12:00", "temp": 22, "condition": "Sunny"},
        {"time": "13:00", "temp": 23, "condition": "Sunny"},
        {"time": "14:00", "temp": 24, "condition": "Partly Cloudy"},
    ],
    "air_quality": "Good",
}


def format_temp(celsius: int, use_celsius: bool) -> str:
    if use_celsius:
        return f"{celsius}°C"
    return f"{celsius * 9 / 5 + 32:.1f}°F"


def build_router(flags: dict[str, FlagNode]) -> APIRouter:
    display = flags["Display"]
    router = APIRouter(prefix="/weather", tags=["weather"])

    @router.get("")
    async def current() -> dict[str, Any]:
        out: dict[str, Any] = {
            "temperature": format_temp(WEATHER["temperature"], display.Celsius.is_enabled()),
            "condition": WEATHER["condition"],
        }
        if display.Alerts.is_enabled():
            out["alerts"] = list(WEATHER["alerts"])
        return out

    @router.get("/air-quality", dependencies=[Depends(require_feature(flags["Advanced"].AirQuality))])
    async def air_quality() -> dict[str, str]:
        return {"air_quality": WEATHER["air_quality"]}

    return router


def build_forecast_router(flags: dict[str, FlagNode]) -> APIRouter:
    display = flags["Display"]
    router = APIRouter(prefix="/weather", tags=["weather"])

    @router.get("/forecast")
    async def forecast() -> dict[str, Any]:
        use_celsius = display.Celsius.is_enabled()
        hourly = [
            {"time": h["time"], "temp": format_temp(h["temp"], use_celsius), "condition": h["condition"]}
            for h in WEATHER["hourly"]
        ]
        return {"hourly": hourly}

    return router
