# src/netinflation/ledger/constants.py
from __future__ import annotations

"""Inflation schedule constants.

Reference curve:
- Initial inflation: 8% per year
- Terminal (floor) inflation: 1.5% per year
- Taper: 15% per year, applied multiplicatively to the initial rate
- Foundation: 5% of total inflation, for the first 7 years
"""

DEFAULT_INITIAL: float = 0.08
DEFAULT_TERMINAL: float = 0.015
DEFAULT_TAPER: float = 0.15
DEFAULT_FOUNDATION: float = 0.05
DEFAULT_FOUNDATION_TERM: float = 7.0

# Fixed rate used by Inflation.pico(): 0.01% per year
PICO_RATE: float = 0.0001

# Well-known vault addresses (base58, 32-byte public keys).
# Placeholders: treat as opaque keys, never derive them.
VAULT_A_ADDRESS: str = "dummy11111111111111111111111111111111111111"
VAULT_B_ADDRESS: str = "dummy22222222222222222222222222222222222222"

# Fraction of total inflation carved out for each vault
VAULT_ALLOCATIONS = (
    (VAULT_A_ADDRESS, 0.01),
    (VAULT_B_ADDRESS, 0.02),
)
