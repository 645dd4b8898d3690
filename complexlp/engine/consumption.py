"""Natural gas consumption of the complex.

Total gas over a period is ammonia feedstock (case-specific rate), methanol
feedstock, auxiliary boiler gas (linear in all three products) and the fixed
turbine and flare load. The flow rate in MMSCFD is

    volume * heating_factor / (flow_scale * days)
"""

from __future__ import annotations

import numpy as np

from complexlp.models.case import Case
from complexlp.models.coefficients import ProcessCoefficients
from complexlp.models.solution import FuelBreakdown


def fuel_coefficients(case: Case, coefficients: ProcessCoefficients) -> np.ndarray:
    """Gas (Nm3) per tonne of (methanol, ammonia throughput, urea)."""
    params = coefficients.case_parameters(case)
    return np.array(
        [
            coefficients.methanol_fuel + coefficients.boiler_methanol,
            params.ammonia_fuel + coefficients.boiler_ammonia,
            coefficients.boiler_urea,
        ]
    )


def fixed_fuel(period_days: float, coefficients: ProcessCoefficients) -> float:
    """Turbine and flare gas over the period (Nm3)."""
    return (coefficients.turbine_fuel_per_day + coefficients.flare_fuel_per_day) * period_days


def flow_from_volume(volume: float, period_days: float, coefficients: ProcessCoefficients) -> float:
    return volume * coefficients.fuel_heating_factor / (coefficients.flow_scale * period_days)


def volume_from_flow(flow: float, period_days: float, coefficients: ProcessCoefficients) -> float:
    return flow * coefficients.flow_scale * period_days / coefficients.fuel_heating_factor


def fuel_volume(x, case: Case, period_days: float, coefficients: ProcessCoefficients) -> float:
    """Total gas (Nm3) for x = (methanol, ammonia throughput, urea)."""
    variable = float(np.dot(fuel_coefficients(case, coefficients), np.asarray(x, dtype=float)))
    return variable + fixed_fuel(period_days, coefficients)


def fuel_flow(x, case: Case, period_days: float, coefficients: ProcessCoefficients) -> float:
    """Average gas flow (MMSCFD) for x over the period."""
    volume = fuel_volume(x, case, period_days, coefficients)
    return flow_from_volume(volume, period_days, coefficients)


def fuel_breakdown(
    x, case: Case, period_days: float, coefficients: ProcessCoefficients
) -> FuelBreakdown:
    methanol, ammonia, urea = (float(v) for v in x)
    params = coefficients.case_parameters(case)
    return FuelBreakdown(
        ammonia_feed=params.ammonia_fuel * ammonia,
        methanol_feed=coefficients.methanol_fuel * methanol,
        boiler=(
            coefficients.boiler_methanol * methanol
            + coefficients.boiler_ammonia * ammonia
            + coefficients.boiler_urea * urea
        ),
        turbine=coefficients.turbine_fuel_per_day * period_days,
        flare=coefficients.flare_fuel_per_day * period_days,
    )


def steam_rate(x, case: Case, period_days: float, coefficients: ProcessCoefficients) -> float:
    """Average HP steam raised by the auxiliary boilers (t/h)."""
    boiler = fuel_breakdown(x, case, period_days, coefficients).boiler
    return boiler / coefficients.steam_fuel_ratio / (period_days * 24.0)
