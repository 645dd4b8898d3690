from complexlp.engine.constraints import FeasibleRegion, LinearConstraint, build_region
from complexlp.engine.consumption import fuel_breakdown, fuel_flow, fuel_volume, steam_rate
from complexlp.engine.costs import margins, unit_costs
from complexlp.engine.optimizer import optimize_case
from complexlp.engine.selector import evaluate

__all__ = [
    "FeasibleRegion",
    "LinearConstraint",
    "build_region",
    "fuel_breakdown",
    "fuel_flow",
    "fuel_volume",
    "steam_rate",
    "margins",
    "unit_costs",
    "optimize_case",
    "evaluate",
]
