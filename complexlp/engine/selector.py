"""Case selection: solve both operating modes and keep the better one."""

from __future__ import annotations

from complexlp.engine.costs import unit_costs
from complexlp.engine.optimizer import optimize_case
from complexlp.logger import get_logger
from complexlp.models.case import Case
from complexlp.models.coefficients import DEFAULT_COEFFICIENTS, ProcessCoefficients
from complexlp.models.inputs import CapacityLimits, MarketInputs, check_period
from complexlp.models.solution import Solution

logger = get_logger(__name__)


def evaluate(
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: float,
    coefficients: ProcessCoefficients = DEFAULT_COEFFICIENTS,
) -> Solution:
    """Most profitable operating point over both cases.

    Case B spans methanol down to its shutdown floor, so full methanol
    shutdown is covered without a separate case. Case A is kept on a tie.
    If neither case has a feasible point an infeasible Solution is returned.
    """
    period_days = check_period(period_days)
    coefficients.validate()

    best = optimize_case(Case.A, market, capacity, period_days, coefficients)
    other = optimize_case(Case.B, market, capacity, period_days, coefficients)
    if other.beats(best):
        best = other

    if not best.feasible:
        logger.warning(
            "No feasible operating point: gas ceiling %.2f MMSCFD, %g days",
            capacity.max_fuel_flow,
            period_days,
        )
        return Solution.infeasible(unit_costs(market.gas_price, coefficients, Case.A))

    logger.debug(
        "Selected case %s: profit %.0f, gas %.2f MMSCFD",
        best.case.value,
        best.profit,
        best.fuel_flow,
    )
    return best
