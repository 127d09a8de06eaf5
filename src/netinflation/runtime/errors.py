from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class InflationConfigError(ValueError):
    """Canonical error type for malformed or unsafe inflation configs."""

    code: str
    reason: str
    details: Any | None = None

    def __str__(self) -> str:
        if self.details is None:
            return f"{self.code}:{self.reason}"
        return f"{self.code}:{self.reason}:{self.details}"
