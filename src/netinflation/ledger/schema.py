# src/netinflation/ledger/schema.py
from __future__ import annotations

"""Serialized form of Inflation.

Wire/persisted shape (camelCase, in this key order):

    {"initial":0.08,"terminal":0.015,"taper":0.15,"foundation":0.05,"foundationTerm":7.0}

The reserved field of Inflation is never emitted. Unknown keys are ignored on
input so configs written by newer tooling still load; missing keys are errors.
"""

import json
from typing import Any, Dict, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from netinflation.ledger.inflation import Inflation
from netinflation.runtime.errors import InflationConfigError

Json = Dict[str, Any]


class InflationSchema(BaseModel):
    # strict: JSON true or "0.08" must not slip through as a float; ints still widen.
    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True, strict=True)

    initial: float = Field(..., ge=0.0, allow_inf_nan=False)
    terminal: float = Field(..., ge=0.0, allow_inf_nan=False)
    taper: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    foundation: float = Field(..., ge=0.0, le=1.0, allow_inf_nan=False)
    foundation_term: float = Field(..., alias="foundationTerm", ge=0.0, allow_inf_nan=False)

    @classmethod
    def from_inflation(cls, inflation: Inflation) -> "InflationSchema":
        return cls(
            initial=inflation.initial,
            terminal=inflation.terminal,
            taper=inflation.taper,
            foundation=inflation.foundation,
            foundation_term=inflation.foundation_term,
        )

    def to_inflation(self) -> Inflation:
        return Inflation(
            initial=self.initial,
            terminal=self.terminal,
            taper=self.taper,
            foundation=self.foundation,
            foundation_term=self.foundation_term,
        )


def inflation_to_json(inflation: Inflation) -> Json:
    return InflationSchema.from_inflation(inflation).model_dump(by_alias=True)


def inflation_from_json(obj: Any) -> Inflation:
    if not isinstance(obj, dict):
        raise InflationConfigError("invalid_inflation", "not_an_object", {"type": type(obj).__name__})
    try:
        return InflationSchema.model_validate(obj).to_inflation()
    except ValidationError as e:
        errors = [
            {"loc": ".".join(str(p) for p in err.get("loc", ())), "msg": str(err.get("msg", ""))}
            for err in e.errors()
        ]
        raise InflationConfigError("invalid_inflation", "schema_error", errors) from e


def encode_inflation(inflation: Inflation) -> bytes:
    """Compact JSON bytes, stable for a given Inflation value."""

    return json.dumps(inflation_to_json(inflation), separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def decode_inflation(data: Union[bytes, str]) -> Inflation:
    try:
        obj = json.loads(data)
    except (TypeError, ValueError) as e:
        raise InflationConfigError("invalid_inflation", "invalid_json", str(e)) from e
    return inflation_from_json(obj)
