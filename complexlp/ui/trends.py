"""Sweep charts: methanol shutdown crossover and gas price sensitivity."""

from __future__ import annotations

from typing import List

import pandas as pd
import streamlit as st

from complexlp.scenarios.sweeps import GasSensitivityPoint, ShutdownSweep


def _millions(values) -> List[float]:
    return [float("nan") if v is None else v / 1e6 for v in values]


def render_shutdown(sweep: ShutdownSweep) -> None:
    """Running vs shutdown profit across methanol prices."""

    st.markdown("### Methanol Shutdown Analysis")

    if sweep.shutdown_profit is None:
        st.warning("Shutdown operation is infeasible at this gas ceiling.")

    df = pd.DataFrame(
        {
            "Running ($M)": _millions(p.running_profit for p in sweep.points),
            "Shutdown ($M)": _millions(p.shutdown_profit for p in sweep.points),
            "Case A ($M)": _millions(p.case_a_profit for p in sweep.points),
        },
        index=pd.Index([p.methanol_price for p in sweep.points], name="Methanol ($/t)"),
    )
    st.line_chart(df, height=320)

    c1, c2 = st.columns(2)
    if sweep.crossover_price is None:
        c1.metric("Shutdown crossover", "none in range")
    else:
        c1.metric("Shutdown crossover", f"${sweep.crossover_price:,.1f}/t")
    c2.metric("Methanol unit cost", f"${sweep.methanol_unit_cost:,.2f}/t")


def render_gas_sensitivity(points: List[GasSensitivityPoint]) -> None:
    """Optimal profit across gas prices."""

    st.markdown("### Gas Price Sensitivity")
    df = pd.DataFrame(
        {"Profit ($M)": _millions(p.profit for p in points)},
        index=pd.Index([p.gas_price for p in points], name="Gas ($/MMBTU)"),
    )
    st.line_chart(df, height=320)
