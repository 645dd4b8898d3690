"""Profit optimizer for an ammonia / methanol / urea complex."""

from complexlp.engine import evaluate, optimize_case
from complexlp.models import (
    DEFAULT_CAPACITY,
    DEFAULT_COEFFICIENTS,
    DEFAULT_MARKET,
    CapacityLimits,
    Case,
    MarketInputs,
    ProcessCoefficients,
    ProductionPlan,
    Solution,
)
from complexlp.scenarios import sweep_gas_sensitivity, sweep_shutdown

__all__ = [
    "evaluate",
    "optimize_case",
    "sweep_gas_sensitivity",
    "sweep_shutdown",
    "DEFAULT_CAPACITY",
    "DEFAULT_COEFFICIENTS",
    "DEFAULT_MARKET",
    "CapacityLimits",
    "Case",
    "MarketInputs",
    "ProcessCoefficients",
    "ProductionPlan",
    "Solution",
]
