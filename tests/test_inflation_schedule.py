from __future__ import annotations

import pytest

from netinflation.ledger.inflation import Inflation
from netinflation.ledger.schedule import (
    schedule,
    snapshot,
    terminal_year,
    validator_exhaustion_year,
    yearly_schedule,
)


def test_snapshot_matches_queries() -> None:
    inflation = Inflation.default()
    snap = snapshot(inflation, 3)

    assert snap.year == 3.0
    assert snap.total == inflation.total(3)
    assert snap.validator == inflation.validator_share(3)
    assert snap.foundation == inflation.foundation_share(3)
    assert snap.vault == inflation.vault_deduction()
    assert snap.to_json() == {
        "year": 3.0,
        "total": snap.total,
        "validator": snap.validator,
        "foundation": snap.foundation,
        "vault": snap.vault,
    }


def test_schedule_rejects_negative_years() -> None:
    with pytest.raises(ValueError):
        schedule(Inflation.default(), [0.0, 1.0, -1.0])


def test_yearly_schedule_includes_both_ends() -> None:
    rows = yearly_schedule(Inflation.default(), years=10)
    assert [r.year for r in rows] == [float(y) for y in range(11)]


def test_yearly_schedule_fractional_step_does_not_drift() -> None:
    rows = yearly_schedule(Inflation.default(), years=1.0, step=0.1)
    assert len(rows) == 11
    assert rows[-1].year == pytest.approx(1.0)


def test_yearly_schedule_zero_horizon() -> None:
    rows = yearly_schedule(Inflation.pico(), years=0)
    assert len(rows) == 1
    assert rows[0].total == 0.0001


@pytest.mark.parametrize("kwargs", [{"years": -1}, {"years": 5, "step": 0}, {"years": 5, "step": -1.0}])
def test_yearly_schedule_rejects_bad_arguments(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        yearly_schedule(Inflation.default(), **kwargs)


def test_terminal_year_of_default_curve() -> None:
    inflation = Inflation.default()
    ty = terminal_year(inflation)

    assert ty is not None
    assert 10.0 < ty < 11.0
    assert inflation.total(ty - 0.01) > inflation.terminal
    assert inflation.total(ty + 0.01) == inflation.terminal


@pytest.mark.parametrize(
    "inflation,expected",
    [
        (Inflation.fixed(0.05), 0.0),
        (Inflation.disabled(), 0.0),
        (Inflation(initial=0.05, terminal=0.01, taper=0.0, foundation=0.0, foundation_term=0.0), None),
        (Inflation(initial=0.05, terminal=0.0, taper=0.5, foundation=0.0, foundation_term=0.0), None),
        (Inflation(initial=0.05, terminal=0.01, taper=1.0, foundation=0.0, foundation_term=0.0), 0.0),
    ],
)
def test_terminal_year_edge_cases(inflation: Inflation, expected: object) -> None:
    assert terminal_year(inflation) == expected


@pytest.mark.parametrize(
    "inflation",
    [
        Inflation.default(),
        Inflation.full(),
        Inflation(initial=0.08, terminal=0.0, taper=0.5, foundation=0.05, foundation_term=0.5),
        Inflation(initial=0.08, terminal=0.01, taper=0.2, foundation=0.5, foundation_term=3.0),
    ],
)
def test_validator_exhaustion_year_is_the_sign_change(inflation: Inflation) -> None:
    ey = validator_exhaustion_year(inflation)

    assert ey is not None
    assert ey > 0.0
    assert inflation.validator_share(ey - 0.01) > 0.0
    assert inflation.validator_share(ey + 0.01) < 0.0

    term = inflation.foundation_term
    for year in [ey + 0.5, term, term + 0.5, ey + 10.0, 100.0]:
        if year > ey:
            assert inflation.validator_share(year) <= 0.0


def test_validator_exhaustion_year_ignores_dip_inside_foundation_term() -> None:
    # Foundation + vaults cover total from ~1.29, but validators are paid
    # again once the foundation carve-out stops at year 3.
    inflation = Inflation(initial=0.08, terminal=0.01, taper=0.2, foundation=0.5, foundation_term=3.0)
    assert inflation.validator_share(2.0) < 0.0
    assert inflation.validator_share(3.0) > 0.0

    ey = validator_exhaustion_year(inflation)

    assert ey is not None
    assert ey > inflation.foundation_term
    assert inflation.total(ey) == pytest.approx(inflation.vault_deduction())
    assert inflation.validator_share(ey - 0.01) > 0.0


def test_validator_exhaustion_year_of_default_is_inside_foundation_term() -> None:
    inflation = Inflation.default()
    ey = validator_exhaustion_year(inflation)

    assert ey is not None
    assert ey < inflation.foundation_term
    assert inflation.validator_share(ey) == pytest.approx(0.0, abs=1e-12)


@pytest.mark.parametrize("inflation", [Inflation.disabled(), Inflation.pico(), Inflation.fixed(0.02)])
def test_validator_exhaustion_year_when_vaults_exceed_total_from_start(inflation: Inflation) -> None:
    assert validator_exhaustion_year(inflation) == 0.0
    assert inflation.validator_share(0) <= 0.0


def test_validator_exhaustion_year_none_when_floor_covers_vaults() -> None:
    inflation = Inflation(initial=0.10, terminal=0.05, taper=0.1, foundation=0.1, foundation_term=5.0)
    assert validator_exhaustion_year(inflation) is None
    assert inflation.validator_share(1000) > 0.0
