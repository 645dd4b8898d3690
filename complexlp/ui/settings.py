"""Editable process coefficients with reset to the documented defaults."""

from __future__ import annotations

from dataclasses import fields

import streamlit as st

from complexlp.models.coefficients import DEFAULT_COEFFICIENTS, ProcessCoefficients

_KEY = "coefficients"


def current_coefficients() -> ProcessCoefficients:
    if _KEY not in st.session_state:
        st.session_state[_KEY] = DEFAULT_COEFFICIENTS
    return st.session_state[_KEY]


def render_settings() -> None:
    """Render one numeric input per coefficient."""

    st.markdown("### Plant Coefficients")
    coefficients = current_coefficients()

    values = {}
    cols = st.columns(3)
    for i, f in enumerate(fields(ProcessCoefficients)):
        with cols[i % 3]:
            values[f.name] = st.number_input(
                f.name.replace("_", " "),
                value=float(getattr(coefficients, f.name)),
                format="%.7g",
                key=f"coef_{f.name}",
            )

    apply_col, reset_col = st.columns(2)
    if apply_col.button("Apply", type="primary", use_container_width=True):
        try:
            st.session_state[_KEY] = ProcessCoefficients.from_dict(values)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.rerun()
    if reset_col.button("Reset to defaults", use_container_width=True):
        st.session_state[_KEY] = DEFAULT_COEFFICIENTS
        for f in fields(ProcessCoefficients):
            st.session_state.pop(f"coef_{f.name}", None)
        st.rerun()
