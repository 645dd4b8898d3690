"""Exact optimizer for one operating case.

Objective and constraints are linear in (methanol, ammonia throughput, urea),
so the optimum lies on a vertex of the feasible polytope. The search:

1. Solve every triple of structural rows as a 3x3 system and keep the
   solutions that satisfy all structural rows: the vertices of the
   polytope without the gas ceiling.
2. Vertices inside the gas ceiling are candidates as they stand.
3. Along every edge joining a vertex inside the ceiling to one outside, the
   gas flow is monotone; bisection finds the point where the ceiling binds.
   Edges parallel to the throughput axis give the "reduce ammonia until the
   gas fits" vertices.
4. The candidate with the highest profit wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import FrozenSet, List

import numpy as np

from complexlp.engine.constraints import FeasibleRegion, build_region
from complexlp.engine.consumption import flow_from_volume, fuel_volume, steam_rate
from complexlp.engine.costs import margins, unit_costs
from complexlp.logger import get_logger
from complexlp.models.case import Case
from complexlp.models.coefficients import ProcessCoefficients
from complexlp.models.constants import BISECTION_ITERATIONS, FEASIBILITY_TOL, SINGULAR_TOL
from complexlp.models.inputs import CapacityLimits, MarketInputs, check_period
from complexlp.models.solution import ProductionPlan, Solution, UnitCosts

logger = get_logger(__name__)


@dataclass(frozen=True)
class Vertex:
    """A point of the structural polytope and the rows tight at it."""

    x: np.ndarray
    tight: FrozenSet[int]


def structural_vertices(region: FeasibleRegion, tol: float = FEASIBILITY_TOL) -> List[Vertex]:
    """All vertices of the region with the gas ceiling left out."""
    A = region.matrix
    b = region.bounds
    vertices: List[Vertex] = []

    for rows in combinations(range(len(A)), 3):
        idx = list(rows)
        sub = A[idx]
        if abs(np.linalg.det(sub)) < SINGULAR_TOL:
            continue
        x = np.linalg.solve(sub, b[idx])
        slacks = b - A @ x
        if np.any(slacks < -tol):
            continue
        tight = frozenset(int(i) for i in np.flatnonzero(np.abs(slacks) <= tol))

        # Degenerate vertices come out of several triples; merge them.
        for k, seen in enumerate(vertices):
            if np.allclose(seen.x, x, rtol=0.0, atol=tol):
                vertices[k] = Vertex(seen.x, seen.tight | tight)
                break
        else:
            vertices.append(Vertex(x, tight))

    return vertices


def bisect_fuel_ceiling(region: FeasibleRegion, inside: np.ndarray, outside: np.ndarray) -> np.ndarray:
    """Point on the segment inside->outside where the gas ceiling binds.

    The gas flow is affine along the segment, hence monotone; the returned
    point is always on the feasible side.
    """
    lo, hi = 0.0, 1.0
    step = outside - inside
    for _ in range(BISECTION_ITERATIONS):
        mid = 0.5 * (lo + hi)
        if region.fuel_flow(inside + mid * step) <= region.max_fuel_flow:
            lo = mid
        else:
            hi = mid
    return inside + lo * step


def candidate_points(region: FeasibleRegion) -> List[np.ndarray]:
    """Vertices of the full region, gas ceiling included."""
    vertices = structural_vertices(region)
    inside = [region.fuel_feasible(v.x, tol=0.0) for v in vertices]

    candidates = [v.x for v, ok in zip(vertices, inside) if ok]
    for i, j in combinations(range(len(vertices)), 2):
        if inside[i] == inside[j]:
            continue
        if len(vertices[i].tight & vertices[j].tight) < 2:
            continue
        a, b = (i, j) if inside[i] else (j, i)
        candidates.append(bisect_fuel_ceiling(region, vertices[a].x, vertices[b].x))

    return [x for x in candidates if region.is_feasible(x)]


def _clean(x: np.ndarray) -> np.ndarray:
    return np.where(np.abs(x) < FEASIBILITY_TOL, 0.0, x)


def build_solution(
    x: np.ndarray,
    case: Case,
    market: MarketInputs,
    costs: UnitCosts,
    period_days: float,
    coefficients: ProcessCoefficients,
) -> Solution:
    """Score a production vector and package it as a Solution."""
    plan = ProductionPlan.from_vector(x, coefficients.urea_ammonia_ratio)
    revenue = (
        market.methanol_price * plan.methanol
        + market.ammonia_price * plan.saleable_ammonia
        + market.urea_price * plan.urea
    )
    variable_cost = (
        costs.methanol * plan.methanol
        + costs.ammonia * plan.saleable_ammonia
        + costs.urea * plan.urea
    )
    fixed_cost = coefficients.fixed_cost_total
    volume = fuel_volume(x, case, period_days, coefficients)

    return Solution(
        case=case,
        plan=plan,
        unit_costs=costs,
        fuel_volume=volume,
        fuel_flow=flow_from_volume(volume, period_days, coefficients),
        steam_rate=steam_rate(x, case, period_days, coefficients),
        revenue=revenue,
        variable_cost=variable_cost,
        fixed_cost=fixed_cost,
        profit=revenue - variable_cost - fixed_cost,
        feasible=True,
    )


def optimize_case(
    case: Case,
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients,
    shutdown: bool = False,
) -> Solution:
    """Profit-maximizing plan for one case, or an infeasible Solution."""
    period_days = check_period(period_days)
    costs = unit_costs(market.gas_price, coefficients, case)
    region = build_region(case, capacity, period_days, coefficients, shutdown=shutdown)

    candidates = candidate_points(region)
    if not candidates:
        logger.debug("Case %s: no feasible vertex", case.value)
        return Solution.infeasible(costs, case)

    c = margins(market, costs, coefficients)
    best = candidates[0]
    best_value = float(c @ best)
    for x in candidates[1:]:
        value = float(c @ x)
        if value > best_value:
            best, best_value = x, value

    solution = build_solution(_clean(best), case, market, costs, period_days, coefficients)
    logger.debug(
        "Case %s%s: profit %.0f, MeOH %.0f t, NH3 %.0f t, urea %.0f t, gas %.2f MMSCFD",
        case.value,
        " (shutdown)" if shutdown else "",
        solution.profit,
        solution.plan.methanol,
        solution.plan.ammonia,
        solution.plan.urea,
        solution.fuel_flow,
    )
    return solution
