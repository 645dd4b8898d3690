"""Optimizer results: production plan, unit costs, fuel use and profit."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict, Optional

from complexlp.models.case import Case


@dataclass(frozen=True)
class ProductionPlan:
    """Period totals (t) of the three decision variables.

    saleable_ammonia is gross throughput minus the ammonia converted to urea.
    """

    methanol: float
    ammonia: float
    urea: float
    saleable_ammonia: float

    @classmethod
    def from_vector(cls, x, urea_ammonia_ratio: float) -> "ProductionPlan":
        methanol, ammonia, urea = (float(v) for v in x)
        return cls(
            methanol=methanol,
            ammonia=ammonia,
            urea=urea,
            saleable_ammonia=ammonia - urea_ammonia_ratio * urea,
        )

    @classmethod
    def zero(cls) -> "ProductionPlan":
        return cls(methanol=0.0, ammonia=0.0, urea=0.0, saleable_ammonia=0.0)

    def daily(self, period_days: float) -> Dict[str, float]:
        """Average daily rates (t/d) over the period."""
        return {k: v / period_days for k, v in asdict(self).items()}

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class UnitCosts:
    """Unit variable costs ($/t) for one gas price and case."""

    ammonia: float
    methanol: float
    urea: float


@dataclass(frozen=True)
class FuelBreakdown:
    """Gas volumes (Nm3) consumed over the period by each consumer."""

    ammonia_feed: float
    methanol_feed: float
    boiler: float
    turbine: float
    flare: float

    @property
    def total(self) -> float:
        return self.ammonia_feed + self.methanol_feed + self.boiler + self.turbine + self.flare

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


@dataclass(frozen=True)
class Solution:
    """Outcome of an evaluation.

    An infeasible solution carries a zero plan and profit None; it is
    returned, never raised.
    """

    case: Optional[Case]
    plan: ProductionPlan
    unit_costs: UnitCosts
    fuel_volume: float
    fuel_flow: float
    steam_rate: float
    revenue: float
    variable_cost: float
    fixed_cost: float
    profit: Optional[float]
    feasible: bool

    @classmethod
    def infeasible(cls, unit_costs: UnitCosts, case: Optional[Case] = None) -> "Solution":
        return cls(
            case=case,
            plan=ProductionPlan.zero(),
            unit_costs=unit_costs,
            fuel_volume=0.0,
            fuel_flow=0.0,
            steam_rate=0.0,
            revenue=0.0,
            variable_cost=0.0,
            fixed_cost=0.0,
            profit=None,
            feasible=False,
        )

    def beats(self, other: "Solution") -> bool:
        """True if this solution is feasible and strictly more profitable."""
        if not self.feasible:
            return False
        if not other.feasible:
            return True
        return self.profit > other.profit
