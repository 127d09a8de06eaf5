# src/netinflation/ledger/schedule.py
from __future__ import annotations

"""Year-by-year projections of an Inflation curve."""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, List, Optional

from netinflation.ledger.inflation import Inflation

Json = Dict[str, Any]


@dataclass(frozen=True)
class InflationSnapshot:
    year: float
    total: float
    validator: float
    foundation: float
    vault: float

    def to_json(self) -> Json:
        return asdict(self)


def snapshot(inflation: Inflation, year: float) -> InflationSnapshot:
    """Evaluate every share of `inflation` at `year`."""

    y = float(year)
    return InflationSnapshot(
        year=y,
        total=inflation.total(y),
        validator=inflation.validator_share(y),
        foundation=inflation.foundation_share(y),
        vault=inflation.vault_deduction(),
    )


def schedule(inflation: Inflation, years: Iterable[float]) -> List[InflationSnapshot]:
    return [snapshot(inflation, y) for y in years]


def yearly_schedule(inflation: Inflation, *, years: float, step: float = 1.0) -> List[InflationSnapshot]:
    """Snapshots at 0, step, 2*step, ... up to and including `years`."""

    horizon = float(years)
    st = float(step)
    if not horizon >= 0.0:
        raise ValueError(f"years must be >= 0; got: {years!r}")
    if not st > 0.0:
        raise ValueError(f"step must be > 0; got: {step!r}")

    # Multiply instead of accumulating so long horizons don't drift.
    n = int(math.floor(horizon / st + 1e-9))
    return schedule(inflation, (i * st for i in range(n + 1)))


def _year_total_reaches(inflation: Inflation, level: float) -> Optional[float]:
    # Earliest year with total(year) <= level, None if never.
    if inflation.initial <= level:
        return 0.0
    if inflation.terminal > level:
        return None
    if inflation.taper >= 1.0:
        # Drops to terminal immediately after year 0.
        return 0.0
    if inflation.taper <= 0.0 or level <= 0.0:
        return None
    return math.log(level / inflation.initial) / math.log(1.0 - inflation.taper)


def terminal_year(inflation: Inflation) -> Optional[float]:
    """Year from which total() sits on the terminal floor.

    0.0 when the curve starts at (or immediately drops to) terminal, None
    when it never gets there (taper == 0, or a zero floor it only approaches).
    """

    return _year_total_reaches(inflation, inflation.terminal)


def validator_exhaustion_year(inflation: Inflation) -> Optional[float]:
    """Year from which validator_share() is <= 0, or None if it stays positive.

    The validator share is not clamped: once the foundation and vault
    carve-outs cover all of total(), the residual goes to zero and then
    negative. The foundation carve-out stops at foundation_term, so running
    out inside the window only counts if the vaults alone still exhaust the
    share from the term onward.
    """

    vault = inflation.vault_deduction()
    post = _year_total_reaches(inflation, vault)
    if post is None:
        return None

    term = inflation.foundation_term
    if term > 0.0 and post <= term:
        if inflation.foundation >= 1.0:
            return 0.0
        pre = _year_total_reaches(inflation, vault / (1.0 - inflation.foundation))
        return post if pre is None else pre
    return post
