from complexlp.models.case import Case, CaseParameters
from complexlp.models.coefficients import DEFAULT_COEFFICIENTS, ProcessCoefficients
from complexlp.models.constants import DEFAULT_CAPACITY, DEFAULT_MARKET, DEFAULT_PERIOD_DAYS
from complexlp.models.inputs import CapacityLimits, MarketInputs
from complexlp.models.solution import FuelBreakdown, ProductionPlan, Solution, UnitCosts

__all__ = [
    "Case",
    "CaseParameters",
    "DEFAULT_COEFFICIENTS",
    "ProcessCoefficients",
    "DEFAULT_CAPACITY",
    "DEFAULT_MARKET",
    "DEFAULT_PERIOD_DAYS",
    "CapacityLimits",
    "MarketInputs",
    "FuelBreakdown",
    "ProductionPlan",
    "Solution",
    "UnitCosts",
]
