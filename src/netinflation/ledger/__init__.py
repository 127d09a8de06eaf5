# src/netinflation/ledger/__init__.py
"""Pure inflation math. No I/O, no logging, no mutable state."""
