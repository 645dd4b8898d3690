"""Unit variable cost model.

Each product's unit cost is affine in the gas price and calibrated so that
at the reference gas price it equals the base cost exactly:

    cost = base + gas_share * (gas_price / reference - 1)
         = slope * gas_price + intercept

In case B the ammonia train loses the methanol synergy: ammonia pays a fixed
penalty per tonne and urea pays the same penalty scaled by the ammonia it
consumes.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from complexlp.models.case import Case
from complexlp.models.coefficients import ProcessCoefficients
from complexlp.models.inputs import MarketInputs
from complexlp.models.solution import UnitCosts


def _affine(base: float, gas_share: float, gas_price: float, reference: float) -> float:
    return base + gas_share * (gas_price / reference - 1.0)


def cost_line(base: float, gas_share: float, reference: float) -> Tuple[float, float]:
    """Return (slope, intercept) of a unit cost against the gas price."""
    slope = gas_share / reference
    return slope, base - gas_share


def unit_costs(gas_price: float, coefficients: ProcessCoefficients, case: Case) -> UnitCosts:
    """Unit variable costs ($/t) of the three products for one case."""
    ref = coefficients.reference_gas_price
    penalty = coefficients.case_parameters(case).ammonia_penalty

    ammonia = _affine(coefficients.ammonia_base_cost, coefficients.ammonia_gas_cost, gas_price, ref)
    methanol = _affine(coefficients.methanol_base_cost, coefficients.methanol_gas_cost, gas_price, ref)
    urea = _affine(coefficients.urea_base_cost, coefficients.urea_gas_cost, gas_price, ref)

    return UnitCosts(
        ammonia=ammonia + penalty,
        methanol=methanol,
        urea=urea + coefficients.urea_ammonia_ratio * penalty,
    )


def margins(
    market: MarketInputs, costs: UnitCosts, coefficients: ProcessCoefficients
) -> np.ndarray:
    """Objective vector over (methanol, ammonia throughput, urea).

    Ammonia is sold net of what urea consumes, so the urea margin is charged
    with ratio * ammonia margin.
    """
    ammonia_margin = market.ammonia_price - costs.ammonia
    return np.array(
        [
            market.methanol_price - costs.methanol,
            ammonia_margin,
            market.urea_price - costs.urea - coefficients.urea_ammonia_ratio * ammonia_margin,
        ]
    )
