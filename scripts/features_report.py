#!/usr/bin/env python3
"""Print the resolved state of every demo flag as JSON.

Reads the configuration string from --features, or from the env var named by
--source (default: FEATURES).
Exit: 0 if the configuration string is valid, 3 on an unknown feature name
(2 stays argparse's usage error).

Supported invocation from repo root:
  python scripts/features_report.py --features "-*,advanced.forecast"
  python scripts/features_report.py --features=-admin,display
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from demo.flags import build_flags  # noqa: E402
from xfeature import FlagLookupError, FlagRegistry  # noqa: E402
from xfeature.config import DEFAULT_SOURCE  # noqa: E402
from xfeature.routing import flag_state  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Report resolved feature flag state.")
    parser.add_argument(
        "--features",
        help="Configuration string, e.g. '-*,advanced.forecast' (a leading '-' is part of the value)",
    )
    parser.add_argument(
        "--source",
        default=DEFAULT_SOURCE,
        help=f"Env var holding the configuration string when --features is absent (default: {DEFAULT_SOURCE})",
    )
    return parser


def join_features_value(argv: list[str]) -> list[str]:
    # argparse reads "-*,x" or "-name" after --features as an option; glue it on as --features=VALUE
    out: list[str] = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == "--features" and i + 1 < len(argv):
            out.append(f"--features={argv[i + 1]}")
            i += 2
            continue
        out.append(arg)
        i += 1
    return out


def main(argv: list[str] | None = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    args = build_parser().parse_args(join_features_value(argv))
    registry = FlagRegistry()
    try:
        if args.features is not None:
            registry.register(build_flags(), load_from_source=False)
            registry.load_from_string(args.features)
        else:
            registry.register(build_flags(), load_from_source=args.source)
    except FlagLookupError as e:
        print(f"FEATURES_INVALID: {e}", file=sys.stderr)
        return 3

    report = [flag_state(registry, node).model_dump() for node in registry]
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
