"""XFEATURE FILE PURPOSE
Purpose: flag declarations for the weather demo.
Hot path: no (built once per app).
Feature flags: display{celsius,alerts}, advanced{forecast,air-quality}, admin.
Failure mode: none.
"""

from __future__ import annotations

from xfeature import FlagNode, define_flag


def build_flags() -> dict[str, FlagNode]:
    return {
        # weather display
        "Display": define_flag(
            "display",
            {
                "Celsius": define_flag("celsius"),
                "Alerts": define_flag("alerts"),
            },
        ),
        "Advanced": define_flag(
            "advanced",
            {
                "Forecast": define_flag("forecast"),
                "AirQuality": define_flag("air-quality"),
            },
        ),
        # /features state report
        "Admin": define_flag("admin"),
    }
