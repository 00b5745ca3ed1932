"""XFEATURE FILE PURPOSE
Purpose: FastAPI entrypoint for the weather demo.
Hot path: no (process-level startup only).
Feature flags: FEATURES.
Failure mode: fail fast on unknown feature names.
"""

from demo.app import create_app

app = create_app()
