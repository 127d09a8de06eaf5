# src/netinflation/__init__.py
"""
netinflation: network inflation schedule

This package computes the token-issuance rate of a network over time:
  - ledger.inflation: Inflation parameter record + the four rate queries
  - ledger.vaults: fixed, process-wide vault allocation table
  - ledger.schema: camelCase serialized form (pydantic)
  - ledger.schedule: year-by-year projections of the curve
  - runtime.inflation_config: operator selection (presets, env, JSON file)

Nothing here moves balances. Ledger/distribution code consumes these rates.
"""

from __future__ import annotations

from netinflation.ledger.inflation import Inflation
from netinflation.ledger.vaults import vault_addresses

__all__ = [
    "Inflation",
    "vault_addresses",
]
