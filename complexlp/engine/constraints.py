"""Feasible region of one operating case.

Decision vector x = (methanol, ammonia throughput, urea), period totals in t.
Every structural limit is a row ``coeffs . x <= bound``; the gas ceiling is
kept apart because the optimizer handles it by bisection along the edges of
the structural polytope.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

from complexlp.engine.consumption import (
    fixed_fuel,
    flow_from_volume,
    fuel_coefficients,
    volume_from_flow,
)
from complexlp.models.case import Case
from complexlp.models.coefficients import ProcessCoefficients
from complexlp.models.constants import FEASIBILITY_TOL
from complexlp.models.inputs import CapacityLimits


@dataclass(frozen=True)
class LinearConstraint:
    """One row ``coeffs . x <= bound``."""

    name: str
    coeffs: Tuple[float, float, float]
    bound: float

    def slack(self, x) -> float:
        return self.bound - float(np.dot(self.coeffs, x))


@dataclass(frozen=True)
class FeasibleRegion:
    """Structural rows plus the gas ceiling for one case."""

    case: Case
    period_days: float
    constraints: Tuple[LinearConstraint, ...]
    fuel: LinearConstraint
    max_fuel_flow: float
    coefficients: ProcessCoefficients

    @property
    def matrix(self) -> np.ndarray:
        return np.array([c.coeffs for c in self.constraints], dtype=float)

    @property
    def bounds(self) -> np.ndarray:
        return np.array([c.bound for c in self.constraints], dtype=float)

    def slacks(self, x) -> np.ndarray:
        return self.bounds - self.matrix @ np.asarray(x, dtype=float)

    def violations(self, x, tol: float = FEASIBILITY_TOL) -> List[str]:
        """Names of the rows x breaks by more than tol, gas ceiling included."""
        broken = [c.name for c, s in zip(self.constraints, self.slacks(x)) if s < -tol]
        if self.fuel_flow(x) > self.max_fuel_flow + tol:
            broken.append(self.fuel.name)
        return broken

    def structurally_feasible(self, x, tol: float = FEASIBILITY_TOL) -> bool:
        return bool(np.all(self.slacks(x) >= -tol))

    def fuel_feasible(self, x, tol: float = FEASIBILITY_TOL) -> bool:
        return self.fuel_flow(x) <= self.max_fuel_flow + tol

    def is_feasible(self, x, tol: float = FEASIBILITY_TOL) -> bool:
        return self.structurally_feasible(x, tol) and self.fuel_feasible(x, tol)

    def fuel_flow(self, x) -> float:
        """Gas flow (MMSCFD) including the fixed turbine and flare load."""
        variable = float(np.dot(self.fuel.coeffs, np.asarray(x, dtype=float)))
        volume = variable + fixed_fuel(self.period_days, self.coefficients)
        return flow_from_volume(volume, self.period_days, self.coefficients)


def methanol_threshold(
    capacity: CapacityLimits, period_days: float, coefficients: ProcessCoefficients
) -> float:
    """Methanol output (t per period) separating case A from case B."""
    return coefficients.methanol_threshold * capacity.max_methanol * period_days


def build_region(
    case: Case,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients,
    shutdown: bool = False,
) -> FeasibleRegion:
    """Assemble the linear feasible region of ``case``.

    With ``shutdown`` set (case B only) methanol is pinned at its shutdown
    floor, which yields the constant shutdown alternative.
    """
    if shutdown and case is not Case.B:
        raise ValueError("shutdown applies to case B only")

    params = coefficients.case_parameters(case)
    max_methanol = capacity.max_methanol * period_days
    max_ammonia = capacity.max_ammonia * period_days
    max_urea = capacity.max_urea * period_days
    threshold = methanol_threshold(capacity, period_days, coefficients)

    if case is Case.A:
        methanol_lo, methanol_hi = threshold, max_methanol
    else:
        methanol_lo = coefficients.shutdown_methanol
        methanol_hi = min(max_methanol, threshold - coefficients.case_b_margin)
        if shutdown:
            methanol_hi = methanol_lo

    rows = [
        LinearConstraint("methanol_min", (-1.0, 0.0, 0.0), -methanol_lo),
        LinearConstraint("methanol_max", (1.0, 0.0, 0.0), methanol_hi),
        LinearConstraint("ammonia_min", (0.0, -1.0, 0.0), 0.0),
        LinearConstraint("ammonia_max", (0.0, 1.0, 0.0), max_ammonia),
        LinearConstraint(
            "ammonia_available",
            (-params.synergy, 1.0, 0.0),
            max_ammonia - params.capacity_loss,
        ),
        LinearConstraint("urea_min", (0.0, 0.0, -1.0), 0.0),
        LinearConstraint("urea_max", (0.0, 0.0, 1.0), max_urea),
        LinearConstraint(
            "ammonia_balance", (0.0, -1.0, coefficients.urea_ammonia_ratio), 0.0
        ),
    ]
    if params.yield_ceiling is not None:
        rows.append(
            LinearConstraint("urea_yield", (0.0, -params.yield_ceiling, 1.0), 0.0)
        )

    fuel_vector = fuel_coefficients(case, coefficients)
    fuel_budget = volume_from_flow(capacity.max_fuel_flow, period_days, coefficients) - fixed_fuel(
        period_days, coefficients
    )
    fuel = LinearConstraint("fuel_ceiling", tuple(float(v) for v in fuel_vector), fuel_budget)

    return FeasibleRegion(
        case=case,
        period_days=period_days,
        constraints=tuple(rows),
        fuel=fuel,
        max_fuel_flow=capacity.max_fuel_flow,
        coefficients=coefficients,
    )
