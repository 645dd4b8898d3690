"""Sidebar: market prices, plant capacities and production month."""

from __future__ import annotations

from typing import Tuple

import streamlit as st

from complexlp.models.constants import DEFAULT_CAPACITY, DEFAULT_MARKET, MONTH_DAYS, MONTHS
from complexlp.models.inputs import CapacityLimits, MarketInputs


def render_sidebar() -> Tuple[MarketInputs, CapacityLimits, int, str]:
    """Render the sidebar and return (market, capacity, period_days, month)."""

    st.sidebar.header("Market")
    ammonia = st.sidebar.number_input("Ammonia price ($/t)", 0.0, 2000.0, DEFAULT_MARKET.ammonia_price, 5.0)
    methanol = st.sidebar.number_input("Methanol price ($/t)", 0.0, 2000.0, DEFAULT_MARKET.methanol_price, 5.0)
    urea = st.sidebar.number_input("Urea price ($/t)", 0.0, 2000.0, DEFAULT_MARKET.urea_price, 5.0)
    gas = st.sidebar.number_input("Natural gas ($/MMBTU)", 0.0, 30.0, DEFAULT_MARKET.gas_price, 0.25)

    st.sidebar.divider()

    st.sidebar.header("Plant")
    max_ammonia = st.sidebar.number_input("Max ammonia (t/d)", 1.0, 5000.0, DEFAULT_CAPACITY.max_ammonia, 10.0)
    max_methanol = st.sidebar.number_input("Max methanol (t/d)", 1.0, 5000.0, DEFAULT_CAPACITY.max_methanol, 10.0)
    max_urea = st.sidebar.number_input("Max urea (t/d)", 1.0, 5000.0, DEFAULT_CAPACITY.max_urea, 10.0)
    max_gas = st.sidebar.number_input("Max gas (MMSCFD)", 1.0, 500.0, DEFAULT_CAPACITY.max_fuel_flow, 1.0)

    month = st.sidebar.selectbox("Month", MONTHS, index=0)
    period_days = MONTH_DAYS[MONTHS.index(month)]
    st.sidebar.caption(f"{period_days} days")

    market = MarketInputs(
        ammonia_price=ammonia,
        methanol_price=methanol,
        urea_price=urea,
        gas_price=gas,
    )
    capacity = CapacityLimits(
        max_ammonia=max_ammonia,
        max_methanol=max_methanol,
        max_urea=max_urea,
        max_fuel_flow=max_gas,
    )
    return market, capacity, period_days, month
