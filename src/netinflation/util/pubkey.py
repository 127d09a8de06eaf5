# src/netinflation/util/pubkey.py
from __future__ import annotations

"""Public key string validation helpers.

Lightweight and dependency-free:
  - base58btc alphabet (no 0, O, I, l)
  - 32-byte keys encode to 32..44 base58 characters

This is NOT a base58 decoder. The goal is to fail-closed on obviously bad
identifiers (empty, wrong alphabet, wrong length) before they become map keys.
"""

import re
from dataclasses import dataclass

_BASE58_RE = re.compile(r"^[1-9A-HJ-NP-Za-km-z]+$")

PUBKEY_MIN_LEN: int = 32
PUBKEY_MAX_LEN: int = 44


@dataclass(frozen=True)
class PubkeyValidation:
    ok: bool
    reason: str
    pubkey: str


def normalize_pubkey(pubkey: str) -> str:
    return (pubkey or "").strip()


def validate_pubkey_str(pubkey: str) -> PubkeyValidation:
    p = normalize_pubkey(pubkey)
    if not p:
        return PubkeyValidation(False, "missing_pubkey", "")
    if len(p) < PUBKEY_MIN_LEN:
        return PubkeyValidation(False, "pubkey_too_short", p)
    if len(p) > PUBKEY_MAX_LEN:
        return PubkeyValidation(False, "pubkey_too_long", p)
    if not _BASE58_RE.match(p):
        return PubkeyValidation(False, "invalid_base58", p)
    return PubkeyValidation(True, "ok", p)
