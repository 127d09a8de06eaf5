#!/usr/bin/env python3
"""Print the year-by-year inflation schedule.

Usage:
  python3 scripts/inflation_schedule.py --preset default --years 20
  python3 scripts/inflation_schedule.py --preset fixed --rate 0.05 --json
  python3 scripts/inflation_schedule.py --config ./inflation.json

With no --preset/--config the active config is read from the environment
(NETINFLATION_INFLATION_PATH / NETINFLATION_INFLATION_PRESET).
"""

from __future__ import annotations

import argparse
import json

from netinflation.ledger.schedule import terminal_year, validator_exhaustion_year, yearly_schedule
from netinflation.ledger.schema import inflation_to_json
from netinflation.runtime.errors import InflationConfigError
from netinflation.runtime.inflation_config import (
    PRESET_NAMES,
    inflation_from_preset,
    load_inflation_from_env,
    read_inflation_file,
)
from netinflation.util.structured_logging import configure_structured_logging


def _fmt_pct(v: float) -> str:
    return f"{v * 100:8.4f}%"


def main() -> int:
    ap = argparse.ArgumentParser()
    src = ap.add_mutually_exclusive_group()
    src.add_argument("--preset", choices=PRESET_NAMES)
    src.add_argument("--config", help="JSON file in the serialized inflation form")
    ap.add_argument("--rate", type=float, default=None, help="rate for --preset fixed")
    ap.add_argument("--years", type=float, default=20.0)
    ap.add_argument("--step", type=float, default=1.0)
    ap.add_argument("--json", action="store_true", help="emit JSON instead of a table")
    args = ap.parse_args()

    configure_structured_logging()

    try:
        if args.config:
            inflation = read_inflation_file(args.config)
        elif args.preset:
            inflation = inflation_from_preset(args.preset, args.rate)
        else:
            inflation = load_inflation_from_env()
        rows = yearly_schedule(inflation, years=args.years, step=args.step)
    except (InflationConfigError, ValueError) as e:
        print(f"error: {e}")
        return 2

    if args.json:
        out = {
            "inflation": inflation_to_json(inflation),
            "terminal_year": terminal_year(inflation),
            "validator_exhaustion_year": validator_exhaustion_year(inflation),
            "schedule": [r.to_json() for r in rows],
        }
        print(json.dumps(out, indent=2, ensure_ascii=False))
        return 0

    print(f"{'year':>8}  {'total':>9}  {'validator':>9}  {'foundation':>9}  {'vault':>9}")
    for r in rows:
        print(
            f"{r.year:8.2f}  {_fmt_pct(r.total)}  {_fmt_pct(r.validator)}  "
            f"{_fmt_pct(r.foundation)}  {_fmt_pct(r.vault)}"
        )

    ty = terminal_year(inflation)
    print(f"terminal reached: {'never' if ty is None else f'year {ty:.2f}'}")
    ey = validator_exhaustion_year(inflation)
    if ey is not None:
        print(f"warning: validator share <= 0 from year {ey:.2f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
