# src/netinflation/runtime/inflation_config.py
from __future__ import annotations

"""Operator selection of the active Inflation parameters.

Sources, highest precedence first:
  1) NETINFLATION_INFLATION_PATH: JSON file in the serialized form
     (see ledger.schema)
  2) NETINFLATION_INFLATION_PRESET: one of default|disabled|full|pico|fixed
     (default: "default"); "fixed" reads its rate from NETINFLATION_FIXED_RATE

A .env file is honored (see netinflation.env) but never overrides variables
already set in the process environment.
"""

import json
import logging
import math
import os
from pathlib import Path
from typing import Callable, Dict, Union

from netinflation.env import load_dotenv_if_present
from netinflation.ledger.inflation import Inflation
from netinflation.ledger.schedule import validator_exhaustion_year
from netinflation.ledger.schema import inflation_from_json, inflation_to_json
from netinflation.runtime.errors import InflationConfigError
from netinflation.util.structured_logging import log_event

_LOG = logging.getLogger("netinflation.config")

DEFAULT_PRESET: str = "default"

_PRESETS: Dict[str, Callable[[], Inflation]] = {
    "default": Inflation.default,
    "disabled": Inflation.disabled,
    "full": Inflation.full,
    "pico": Inflation.pico,
}

PRESET_NAMES = tuple(sorted(list(_PRESETS) + ["fixed"]))


def _as_rate(v: object) -> float:
    try:
        rate = float(str(v).strip())
    except (TypeError, ValueError) as e:
        raise InflationConfigError("invalid_rate", "not_a_number", {"rate": v}) from e
    if not math.isfinite(rate) or rate < 0.0:
        raise InflationConfigError("invalid_rate", "must_be_finite_and_non_negative", {"rate": v})
    return rate


def inflation_from_preset(name: str, rate: Union[float, str, None] = None) -> Inflation:
    preset = str(name or "").strip().lower()
    if preset == "fixed":
        if rate is None:
            raise InflationConfigError("invalid_preset", "fixed_requires_rate", {"preset": preset})
        return Inflation.fixed(_as_rate(rate))

    factory = _PRESETS.get(preset)
    if factory is None:
        raise InflationConfigError(
            "invalid_preset", "unknown_preset", {"preset": name, "allowed": list(PRESET_NAMES)}
        )
    return factory()


def read_inflation_file(path: str) -> Inflation:
    p = Path(path)
    if not p.is_file():
        raise InflationConfigError("invalid_config_path", "not_a_file", {"path": str(path)})

    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except ValueError as e:
        raise InflationConfigError("invalid_inflation", "invalid_json", {"path": str(path), "error": str(e)}) from e

    return inflation_from_json(raw)


def load_inflation_from_env() -> Inflation:
    load_dotenv_if_present()

    path = (os.environ.get("NETINFLATION_INFLATION_PATH") or "").strip()
    if path:
        inflation = read_inflation_file(path)
        source = f"file:{path}"
    else:
        preset = (os.environ.get("NETINFLATION_INFLATION_PRESET") or DEFAULT_PRESET).strip().lower()
        rate = os.environ.get("NETINFLATION_FIXED_RATE")
        inflation = inflation_from_preset(preset, rate)
        source = f"preset:{preset}"

    log_event(_LOG, "inflation_loaded", source=source, inflation=inflation_to_json(inflation))

    # validator_share() is not clamped; warn when it runs out.
    exhausted = validator_exhaustion_year(inflation)
    if exhausted is not None:
        log_event(
            _LOG,
            "validator_share_exhausted",
            year=exhausted,
            vault=inflation.vault_deduction(),
            terminal=inflation.terminal,
        )
    return inflation
