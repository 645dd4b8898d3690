"""KPI bar, production chart and profit breakdown for the selected case."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from complexlp.engine.consumption import fuel_breakdown
from complexlp.models.coefficients import ProcessCoefficients
from complexlp.models.inputs import CapacityLimits
from complexlp.models.solution import Solution


def _millions(value: float) -> str:
    return f"${value / 1e6:,.2f}M"


def render_dashboard(
    solution: Solution,
    capacity: CapacityLimits,
    period_days: int,
    month: str,
    coefficients: ProcessCoefficients,
) -> None:
    """Render the optimizer tab for one solution."""

    if not solution.feasible:
        st.error(
            "No feasible operating point: the gas ceiling cannot cover the "
            "fixed turbine and flare load plus any production."
        )
        return

    plan = solution.plan
    daily = plan.daily(period_days)

    st.markdown("### Key Indicators")
    c1, c2, c3, c4, c5, c6 = st.columns(6)
    c1.metric("Net Profit", _millions(solution.profit), f"Case {solution.case.value} | {month}", delta_color="off")
    c2.metric("Ammonia", f"{daily['ammonia']:,.1f} t/d", f"{plan.saleable_ammonia:,.0f} t saleable", delta_color="off")
    c3.metric("Methanol", f"{daily['methanol']:,.1f} t/d", f"{plan.methanol:,.0f} t", delta_color="off")
    c4.metric("Urea", f"{daily['urea']:,.1f} t/d", f"{plan.urea:,.0f} t", delta_color="off")
    c5.metric(
        "Gas",
        f"{solution.fuel_flow:,.2f} MMSCFD",
        f"{solution.fuel_flow / capacity.max_fuel_flow:.1%} of ceiling",
        delta_color="off",
    )
    c6.metric("Boiler Steam", f"{solution.steam_rate:,.1f} t/h")

    col_left, col_right = st.columns(2)

    with col_left:
        st.markdown("**Daily Production vs Capacity (t/d)**")
        prod_df = pd.DataFrame(
            {
                "Production": [daily["ammonia"], daily["methanol"], daily["urea"]],
                "Capacity": [capacity.max_ammonia, capacity.max_methanol, capacity.max_urea],
            },
            index=["Ammonia", "Methanol", "Urea"],
        )
        st.bar_chart(prod_df, height=240)

    with col_right:
        st.markdown("**Profit Breakdown**")
        costs = solution.unit_costs
        margin_df = pd.DataFrame(
            {
                "Unit cost ($/t)": [costs.ammonia, costs.methanol, costs.urea],
                "Volume (t)": [plan.saleable_ammonia, plan.methanol, plan.urea],
            },
            index=["Ammonia", "Methanol", "Urea"],
        )
        st.dataframe(margin_df.round(2), use_container_width=True)
        st.markdown(
            f"Revenue {_millions(solution.revenue)} | "
            f"Variable {_millions(-solution.variable_cost)} | "
            f"Fixed {_millions(-solution.fixed_cost)}"
        )

    st.markdown("**Gas Consumption (Nm3)**")
    x = (plan.methanol, plan.ammonia, plan.urea)
    gas = fuel_breakdown(x, solution.case, period_days, coefficients).to_dict()
    st.bar_chart(pd.DataFrame({"Nm3": gas}), height=200)
