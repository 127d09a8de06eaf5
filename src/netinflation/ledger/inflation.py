# src/netinflation/ledger/inflation.py
from __future__ import annotations

"""Network inflation parameters.

The total rate decays from `initial` by `taper` per year until it reaches
`terminal`, then stays there:

    total(year) == max(terminal, initial * (1 - taper) ** year)

That total is split three ways:
  - foundation: `foundation` * total, only while year < foundation_term
  - vaults: a fixed, year-invariant carve-out (see ledger.vaults)
  - validators: whatever is left (NOT clamped at zero)

All queries are pure. A negative year is a caller bug and raises ValueError.
"""

import math
from dataclasses import dataclass, field

from netinflation.ledger.constants import (
    DEFAULT_FOUNDATION,
    DEFAULT_FOUNDATION_TERM,
    DEFAULT_INITIAL,
    DEFAULT_TAPER,
    DEFAULT_TERMINAL,
    PICO_RATE,
)
from netinflation.ledger.vaults import vault_total


def _require_year(year: float) -> float:
    y = float(year)
    # NaN fails this comparison too.
    if not y >= 0.0:
        raise ValueError(f"year must be >= 0; got: {year!r}")
    return y


@dataclass(frozen=True)
class Inflation:
    # Initial inflation rate, from year 0
    initial: float

    # Terminal inflation rate, as year -> infinity
    terminal: float

    # Fraction per year by which `initial` decays until reaching `terminal`
    taper: float

    # Fraction of total inflation allocated to the foundation
    foundation: float

    # Duration of the foundation allocation, in years
    foundation_term: float

    # Unused. Kept at 0.0 so the record layout matches older configs.
    _unused: float = field(default=0.0, init=False, repr=False)

    def __post_init__(self) -> None:
        for name in ("initial", "terminal", "taper", "foundation", "foundation_term"):
            v = getattr(self, name)
            if isinstance(v, bool) or not isinstance(v, (int, float)):
                raise ValueError(f"{name} must be a number; got: {v!r}")
            if not math.isfinite(v) or v < 0.0:
                raise ValueError(f"{name} must be finite and >= 0; got: {v!r}")
            object.__setattr__(self, name, float(v))

        if self.taper > 1.0:
            raise ValueError(f"taper must be <= 1; got: {self.taper!r}")
        if self.foundation > 1.0:
            raise ValueError(f"foundation must be <= 1; got: {self.foundation!r}")

    @classmethod
    def default(cls) -> "Inflation":
        return cls(
            initial=DEFAULT_INITIAL,
            terminal=DEFAULT_TERMINAL,
            taper=DEFAULT_TAPER,
            foundation=DEFAULT_FOUNDATION,
            foundation_term=DEFAULT_FOUNDATION_TERM,
        )

    @classmethod
    def disabled(cls) -> "Inflation":
        return cls(initial=0.0, terminal=0.0, taper=0.0, foundation=0.0, foundation_term=0.0)

    @classmethod
    def fixed(cls, rate: float) -> "Inflation":
        """Constant `rate` forever, all of it to validators (minus vaults)."""

        # taper=1.0 is irrelevant here: initial == terminal already.
        return cls(initial=rate, terminal=rate, taper=1.0, foundation=0.0, foundation_term=0.0)

    @classmethod
    def pico(cls) -> "Inflation":
        return cls.fixed(PICO_RATE)

    @classmethod
    def full(cls) -> "Inflation":
        """Reference curve with no foundation allocation."""

        return cls(
            initial=DEFAULT_INITIAL,
            terminal=DEFAULT_TERMINAL,
            taper=DEFAULT_TAPER,
            foundation=0.0,
            foundation_term=0.0,
        )

    def total(self, year: float) -> float:
        """Inflation rate at `year`."""

        y = _require_year(year)
        tapered = self.initial * ((1.0 - self.taper) ** y)

        if tapered > self.terminal:
            return tapered
        return self.terminal

    def foundation_share(self, year: float) -> float:
        """Portion of total that goes to the foundation."""

        y = _require_year(year)
        if y < self.foundation_term:
            return self.total(y) * self.foundation
        return 0.0

    def vault_deduction(self) -> float:
        """Portion of total that goes to the listed vaults."""

        return vault_total()

    def validator_share(self, year: float) -> float:
        """Portion of total that goes to validators.

        Negative when the vault carve-out exceeds what is left of total.
        """

        y = _require_year(year)
        return self.total(y) - self.foundation_share(y) - self.vault_deduction()
