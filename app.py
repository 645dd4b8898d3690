"""Complex Profitability Optimizer.

Streamlit front end for the ammonia / methanol / urea profit optimizer.
Picks the most profitable operating case and production mix for a month,
shows where shutting methanol down pays, and how profit responds to the
gas price.
"""

from __future__ import annotations

from typing import List

import streamlit as st

from complexlp import evaluate, sweep_gas_sensitivity, sweep_shutdown
from complexlp.models import CapacityLimits, MarketInputs, ProcessCoefficients, Solution
from complexlp.scenarios import GasSensitivityPoint, ShutdownSweep
from complexlp.ui.dashboard import render_dashboard
from complexlp.ui.settings import current_coefficients, render_settings
from complexlp.ui.sidebar import render_sidebar
from complexlp.ui.trends import render_gas_sensitivity, render_shutdown


# ---------------------------------------------------------------------------
# Cached evaluations (every call is a pure function of its arguments)
# ---------------------------------------------------------------------------

@st.cache_data(show_spinner=False)
def _solve(
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: int,
    coefficients: ProcessCoefficients,
) -> Solution:
    return evaluate(market, capacity, period_days, coefficients)


@st.cache_data(show_spinner=False)
def _shutdown(
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: int,
    coefficients: ProcessCoefficients,
) -> ShutdownSweep:
    return sweep_shutdown(
        market.ammonia_price,
        market.urea_price,
        market.gas_price,
        capacity,
        period_days,
        coefficients,
    )


@st.cache_data(show_spinner=False)
def _gas(
    market: MarketInputs,
    capacity: CapacityLimits,
    period_days: int,
    coefficients: ProcessCoefficients,
) -> List[GasSensitivityPoint]:
    return sweep_gas_sensitivity(market, capacity, period_days, coefficients)


# ---------------------------------------------------------------------------
# Main app
# ---------------------------------------------------------------------------

def main() -> None:
    st.set_page_config(
        page_title="Complex Profitability Optimizer",
        page_icon="🏭",
        layout="wide",
    )

    st.markdown(
        "# Complex Profitability Optimizer\n"
        "*Ammonia, methanol and urea production mix under a shared gas ceiling*"
    )

    market, capacity, period_days, month = render_sidebar()
    coefficients = current_coefficients()

    tab_opt, tab_shut, tab_gas, tab_settings = st.tabs(
        ["Optimizer", "Methanol Shutdown", "Gas Sensitivity", "Settings"]
    )

    with tab_opt:
        solution = _solve(market, capacity, period_days, coefficients)
        render_dashboard(solution, capacity, period_days, month, coefficients)

    with tab_shut:
        render_shutdown(_shutdown(market, capacity, period_days, coefficients))

    with tab_gas:
        render_gas_sensitivity(_gas(market, capacity, period_days, coefficients))

    with tab_settings:
        render_settings()


if __name__ == "__main__":
    main()
