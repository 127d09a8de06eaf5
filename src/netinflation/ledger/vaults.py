# src/netinflation/ledger/vaults.py
from __future__ import annotations

"""Vault allocation table.

A fixed set of well-known vault addresses each receive a fixed fraction of
total inflation, deducted from the validator share regardless of year.

The table is built on first access and then shared read-only for the life of
the process. Building it is deterministic, so a racing first access at worst
builds the same table twice.
"""

from functools import lru_cache
from types import MappingProxyType
from typing import Mapping

from netinflation.ledger.constants import VAULT_ALLOCATIONS
from netinflation.util.pubkey import validate_pubkey_str


@lru_cache(maxsize=1)
def vault_addresses() -> Mapping[str, float]:
    """Return the read-only address -> fraction table."""

    table = {}
    for address, fraction in VAULT_ALLOCATIONS:
        v = validate_pubkey_str(address)
        if not v.ok:
            raise RuntimeError(f"invalid vault address {address!r}: {v.reason}")
        if v.pubkey in table:
            raise RuntimeError(f"duplicate vault address {v.pubkey!r}")
        table[v.pubkey] = float(fraction)
    return MappingProxyType(table)


def vault_total() -> float:
    """Sum of all vault fractions."""

    return sum(vault_addresses().values())
