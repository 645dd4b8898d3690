"""Scenario sweeps built from repeated evaluations.

Shutdown sweep: running profit across a methanol price grid against the
constant profit of running with methanol shut down, and the methanol price
at which running starts to pay.

Gas sensitivity: profit across a gas price grid at fixed product prices.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List, Optional, Sequence, Tuple

import numpy as np

from complexlp.engine.costs import unit_costs
from complexlp.engine.optimizer import optimize_case
from complexlp.engine.selector import evaluate
from complexlp.logger import get_logger
from complexlp.models.case import Case
from complexlp.models.coefficients import DEFAULT_COEFFICIENTS, ProcessCoefficients
from complexlp.models.constants import CROSSOVER_TOLERANCE, GAS_PRICE_GRID, METHANOL_PRICE_GRID
from complexlp.models.inputs import CapacityLimits, MarketInputs, check_period
from complexlp.models.solution import Solution

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShutdownPoint:
    """One methanol price of the shutdown sweep.

    running_profit is the best of both cases and never falls below the
    shutdown profit; case_a_profit is methanol running at or above the
    threshold load, the line that actually crosses the shutdown profit.
    """

    methanol_price: float
    running_profit: Optional[float]
    shutdown_profit: Optional[float]
    case_a_profit: Optional[float] = None

    @property
    def advantage(self) -> Optional[float]:
        """Running minus shutdown profit, None if either is infeasible."""
        if self.running_profit is None or self.shutdown_profit is None:
            return None
        return self.running_profit - self.shutdown_profit

    @property
    def case_a_advantage(self) -> Optional[float]:
        """Case A minus shutdown profit, None if either is infeasible."""
        if self.case_a_profit is None or self.shutdown_profit is None:
            return None
        return self.case_a_profit - self.shutdown_profit


@dataclass(frozen=True)
class ShutdownSweep:
    points: Tuple[ShutdownPoint, ...]
    crossover_price: Optional[float]
    shutdown_profit: Optional[float]
    methanol_unit_cost: float


@dataclass(frozen=True)
class GasSensitivityPoint:
    gas_price: float
    profit: Optional[float]


def _grid(values: Optional[Sequence[float]], default: Sequence[float], name: str) -> List[float]:
    grid = [float(v) for v in (default if values is None else values)]
    if not grid:
        raise ValueError(f"{name} must not be empty")
    if np.any(np.diff(grid) <= 0.0):
        raise ValueError(f"{name} must be strictly increasing")
    return grid


def shutdown_solution(
    ammonia_price: float,
    urea_price: float,
    gas_price: float,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients = DEFAULT_COEFFICIENTS,
) -> Solution:
    """Case B with methanol held at its shutdown floor.

    Methanol made at the floor is not credited, so the result does not
    depend on the methanol price. A non-zero ``shutdown_methanol`` therefore
    costs the floor tonnage at the methanol unit cost with no revenue.
    """
    period_days = check_period(period_days)
    coefficients.validate()
    market = MarketInputs(
        ammonia_price=ammonia_price,
        methanol_price=0.0,
        urea_price=urea_price,
        gas_price=gas_price,
    )
    return optimize_case(Case.B, market, capacity, period_days, coefficients, shutdown=True)


def find_crossover(
    points: Sequence[ShutdownPoint], tolerance: float = CROSSOVER_TOLERANCE
) -> Optional[float]:
    """Methanol price where case A first overtakes shutdown.

    Linear interpolation of the case A advantage between the last grid
    point at or below zero and the next one above it. Advantages within
    ``tolerance`` count as zero. The best-of-both running profit is flat at
    the shutdown profit below break-even, so it cannot locate the crossing.
    """
    previous: Optional[Tuple[float, float]] = None
    for point in points:
        diff = point.case_a_advantage
        if diff is None:
            previous = None
            continue
        if previous is not None:
            price0, diff0 = previous
            if diff0 <= tolerance < diff:
                frac = min(max(-diff0 / (diff - diff0), 0.0), 1.0)
                return price0 + (point.methanol_price - price0) * frac
        previous = (point.methanol_price, diff)
    return None


def sweep_shutdown(
    ammonia_price: float,
    urea_price: float,
    gas_price: float,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients = DEFAULT_COEFFICIENTS,
    price_range: Optional[Sequence[float]] = None,
) -> ShutdownSweep:
    """Running vs shutdown profit across methanol prices."""
    prices = _grid(price_range, METHANOL_PRICE_GRID, "price_range")
    shutdown = shutdown_solution(
        ammonia_price, urea_price, gas_price, capacity, period_days, coefficients
    )

    points = []
    for price in prices:
        market = MarketInputs(
            ammonia_price=ammonia_price,
            methanol_price=price,
            urea_price=urea_price,
            gas_price=gas_price,
        )
        running = evaluate(market, capacity, period_days, coefficients)
        case_a = optimize_case(Case.A, market, capacity, period_days, coefficients)
        points.append(ShutdownPoint(price, running.profit, shutdown.profit, case_a.profit))

    crossover = find_crossover(points)
    logger.info(
        "Shutdown sweep over %d prices: crossover %s",
        len(points),
        "none" if crossover is None else f"{crossover:.1f} $/t",
    )
    return ShutdownSweep(
        points=tuple(points),
        crossover_price=crossover,
        shutdown_profit=shutdown.profit,
        methanol_unit_cost=unit_costs(gas_price, coefficients, Case.B).methanol,
    )


def sweep_gas_sensitivity(
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients = DEFAULT_COEFFICIENTS,
    gas_price_range: Optional[Sequence[float]] = None,
) -> List[GasSensitivityPoint]:
    """Optimal profit across gas prices with product prices held fixed."""
    prices = _grid(gas_price_range, GAS_PRICE_GRID, "gas_price_range")
    points = [
        GasSensitivityPoint(
            gas_price=g,
            profit=evaluate(replace(market, gas_price=g), capacity, period_days, coefficients).profit,
        )
        for g in prices
    ]
    logger.info("Gas sensitivity sweep over %d prices", len(points))
    return points
