"""Tests for the per-case vertex optimizer."""

from dataclasses import replace

import numpy as np
import pytest

from complexlp.engine.constraints import build_region
from complexlp.engine.costs import margins, unit_costs
from complexlp.engine.optimizer import (
    bisect_fuel_ceiling,
    candidate_points,
    optimize_case,
    structural_vertices,
)
from complexlp.models import (
    DEFAULT_CAPACITY,
    DEFAULT_COEFFICIENTS,
    DEFAULT_MARKET,
    CapacityLimits,
    Case,
)

DAYS = 31


def _capacity(max_fuel_flow):
    return CapacityLimits(
        max_ammonia=DEFAULT_CAPACITY.max_ammonia,
        max_methanol=DEFAULT_CAPACITY.max_methanol,
        max_urea=DEFAULT_CAPACITY.max_urea,
        max_fuel_flow=max_fuel_flow,
    )


class TestReferenceMonth:
    """Reference market, nameplate capacity, 31 days, gas not binding."""

    def test_case_a(self):
        sol = optimize_case(Case.A, DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        assert sol.feasible
        assert sol.case is Case.A
        # Methanol loses money, so it sits at the case A floor.
        assert sol.plan.methanol == pytest.approx(23250.0)
        assert sol.plan.ammonia == pytest.approx(36673.0 + 0.1092174534 * 23250.0)
        assert sol.plan.urea == pytest.approx(2150.0 * DAYS)
        assert sol.profit == pytest.approx(5869187.1, rel=1e-6)

    def test_case_b(self):
        sol = optimize_case(Case.B, DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        assert sol.feasible
        assert sol.plan.methanol == 0.0
        assert sol.plan.ammonia == pytest.approx(35340.0)
        # CO2-limited urea
        assert sol.plan.urea == pytest.approx(1.660263 * 35340.0)
        assert sol.profit == pytest.approx(6315179.4, rel=1e-6)
        assert sol.fuel_flow == pytest.approx(67.2717, rel=1e-4)
        assert sol.steam_rate == pytest.approx(185.6146, rel=1e-4)

    def test_profit_decomposition(self):
        sol = optimize_case(Case.B, DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        assert sol.profit == pytest.approx(sol.revenue - sol.variable_cost - sol.fixed_cost)
        assert sol.fixed_cost == pytest.approx(8279075.116)

    def test_shutdown_pins_methanol(self):
        sol = optimize_case(
            Case.B, DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS, shutdown=True
        )
        assert sol.plan.methanol == 0.0
        assert sol.profit == pytest.approx(6315179.4, rel=1e-6)


class TestGasCeiling:
    @pytest.mark.parametrize("case", [Case.A, Case.B])
    def test_binding_ceiling(self, case):
        sol = optimize_case(case, DEFAULT_MARKET, _capacity(60.0), DAYS, DEFAULT_COEFFICIENTS)
        assert sol.feasible
        assert sol.fuel_flow <= 60.0 + 1e-6
        assert sol.fuel_flow == pytest.approx(60.0, abs=1e-3)

    @pytest.mark.parametrize("case", [Case.A, Case.B])
    def test_ceiling_below_fixed_load(self, case):
        sol = optimize_case(case, DEFAULT_MARKET, _capacity(5.0), DAYS, DEFAULT_COEFFICIENTS)
        assert not sol.feasible
        assert sol.case is case
        assert sol.profit is None

    def test_case_a_needs_more_gas_than_case_b(self):
        # 41.96 MMSCFD covers the case A methanol floor but nothing else.
        cap = _capacity(40.0)
        assert not optimize_case(Case.A, DEFAULT_MARKET, cap, DAYS, DEFAULT_COEFFICIENTS).feasible
        assert optimize_case(Case.B, DEFAULT_MARKET, cap, DAYS, DEFAULT_COEFFICIENTS).feasible

    def test_bisection_lands_on_ceiling(self):
        region = build_region(Case.A, _capacity(60.0), DAYS, DEFAULT_COEFFICIENTS)
        inside = np.array([23250.0, 0.0, 0.0])
        outside = np.array([23250.0, 39212.0, 66650.0])
        x = bisect_fuel_ceiling(region, inside, outside)
        assert region.fuel_flow(x) <= 60.0
        assert region.fuel_flow(x) == pytest.approx(60.0, abs=1e-6)


class TestVertices:
    def test_vertices_are_feasible(self):
        region = build_region(Case.B, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        vertices = structural_vertices(region)
        assert vertices
        for v in vertices:
            assert region.structurally_feasible(v.x)
            assert len(v.tight) >= 3

    def test_origin_is_a_case_b_vertex(self):
        region = build_region(Case.B, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        assert any(np.allclose(v.x, 0.0, atol=1e-9) for v in structural_vertices(region))

    def test_candidates_respect_ceiling(self):
        region = build_region(Case.A, _capacity(60.0), DAYS, DEFAULT_COEFFICIENTS)
        for x in candidate_points(region):
            assert region.is_feasible(x)


class TestAgainstLPSolver:
    """Cross-check the vertex search against a general LP solver."""

    @pytest.mark.parametrize("case", [Case.A, Case.B])
    @pytest.mark.parametrize("ceiling", [128.0, 60.0, 45.0])
    @pytest.mark.parametrize("methanol_price", [80.0, 200.0, 350.0])
    def test_matches_cvxpy(self, case, ceiling, methanol_price):
        cp = pytest.importorskip("cvxpy")

        market = replace(DEFAULT_MARKET, methanol_price=methanol_price)
        capacity = _capacity(ceiling)
        region = build_region(case, capacity, DAYS, DEFAULT_COEFFICIENTS)
        c = margins(market, unit_costs(market.gas_price, DEFAULT_COEFFICIENTS, case), DEFAULT_COEFFICIENTS)

        x = cp.Variable(3)
        problem = cp.Problem(
            cp.Maximize(c @ x),
            [
                region.matrix @ x <= region.bounds,
                np.array(region.fuel.coeffs) @ x <= region.fuel.bound,
            ],
        )
        problem.solve()

        sol = optimize_case(case, market, capacity, DAYS, DEFAULT_COEFFICIENTS)
        assert sol.feasible
        expected = problem.value - DEFAULT_COEFFICIENTS.fixed_cost_total
        assert sol.profit == pytest.approx(expected, rel=1e-4, abs=100.0)
