"""Default inputs, calendar data, sweep grids and numerical tolerances."""

import numpy as np

from complexlp.models.inputs import CapacityLimits, MarketInputs


# Reference market ($/t, gas $/MMBTU)
DEFAULT_MARKET = MarketInputs(
    ammonia_price=325.0,
    methanol_price=80.0,
    urea_price=400.0,
    gas_price=5.0,
)

# Nameplate capacities (t/d) and gas supply ceiling (MMSCFD)
DEFAULT_CAPACITY = CapacityLimits(
    max_ammonia=1320.0,
    max_methanol=1250.0,
    max_urea=2150.0,
    max_fuel_flow=128.0,
)

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DEFAULT_PERIOD_DAYS = 31


# Sweep grids
METHANOL_PRICE_GRID = tuple(float(p) for p in np.arange(0.0, 355.0, 5.0))    # $/t
GAS_PRICE_GRID = tuple(float(g) for g in np.arange(0.5, 10.25, 0.25))        # $/MMBTU


# Numerical tolerances
FEASIBILITY_TOL = 1e-6        # absolute, t or MMSCFD
FUEL_REPORT_TOL = 0.01        # MMSCFD, acceptance margin on reported fuel flow
SINGULAR_TOL = 1e-12          # |det| below which a vertex system is skipped
BISECTION_ITERATIONS = 60
CROSSOVER_TOLERANCE = 1.0     # $, profit gap treated as a tie in the shutdown sweep
