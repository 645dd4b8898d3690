"""Market and capacity inputs for one evaluation."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields
from typing import Dict


def _check(name: str, value: float, allow_zero: bool) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be finite, got {value}")
    if value < 0.0 or (value == 0.0 and not allow_zero):
        bound = "non-negative" if allow_zero else "positive"
        raise ValueError(f"{name} must be {bound}, got {value}")


def check_period(period_days: float) -> float:
    """Validate the production period length and return it as a float."""
    _check("period_days", float(period_days), allow_zero=False)
    return float(period_days)


@dataclass(frozen=True)
class MarketInputs:
    """Product prices ($/t) and natural gas price ($/MMBTU)."""

    ammonia_price: float
    methanol_price: float
    urea_price: float
    gas_price: float

    def __post_init__(self) -> None:
        for f in fields(self):
            _check(f.name, getattr(self, f.name), allow_zero=True)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class CapacityLimits:
    """Daily nameplate limits (t/d) and the gas supply ceiling (MMSCFD)."""

    max_ammonia: float
    max_methanol: float
    max_urea: float
    max_fuel_flow: float

    def __post_init__(self) -> None:
        for f in fields(self):
            _check(f.name, getattr(self, f.name), allow_zero=False)

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)
