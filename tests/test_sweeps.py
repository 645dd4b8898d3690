"""Tests for the methanol shutdown and gas sensitivity sweeps."""

import numpy as np
import pytest

from complexlp import evaluate, sweep_gas_sensitivity, sweep_shutdown
from complexlp.engine.optimizer import optimize_case
from complexlp.models import (
    DEFAULT_CAPACITY,
    DEFAULT_COEFFICIENTS,
    DEFAULT_MARKET,
    Case,
    ProcessCoefficients,
)
from complexlp.scenarios import ShutdownPoint, find_crossover, shutdown_solution

DAYS = 31


def _shutdown_sweep(price_range=None):
    return sweep_shutdown(
        DEFAULT_MARKET.ammonia_price,
        DEFAULT_MARKET.urea_price,
        DEFAULT_MARKET.gas_price,
        DEFAULT_CAPACITY,
        DAYS,
        price_range=price_range,
    )


@pytest.fixture(scope="module")
def reference_sweep():
    return _shutdown_sweep()


class TestShutdownSweep:
    def test_default_grid(self, reference_sweep):
        prices = [p.methanol_price for p in reference_sweep.points]
        assert len(prices) == 71
        assert prices[0] == 0.0
        assert prices[-1] == 350.0

    def test_shutdown_profit_constant(self, reference_sweep):
        values = {p.shutdown_profit for p in reference_sweep.points}
        assert values == {reference_sweep.shutdown_profit}

    def test_shutdown_matches_pinned_case_b(self, reference_sweep):
        pinned = optimize_case(
            Case.B, DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS, shutdown=True
        )
        assert reference_sweep.shutdown_profit == pytest.approx(pinned.profit)
        assert reference_sweep.shutdown_profit == pytest.approx(6315179.4, rel=1e-6)

    def test_running_never_below_shutdown(self, reference_sweep):
        for point in reference_sweep.points:
            assert point.running_profit >= point.shutdown_profit - 1.0

    def test_running_profit_matches_evaluate(self, reference_sweep):
        point = reference_sweep.points[16]
        assert point.methanol_price == 80.0
        sol = evaluate(DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS)
        assert point.running_profit == pytest.approx(sol.profit)

    def test_crossover_at_case_a_break_even(self, reference_sweep):
        # Case A keeps methanol at its floor load here, so its profit rises by
        # the floor tonnage for every $/t of methanol price.
        market = DEFAULT_MARKET
        case_a = optimize_case(Case.A, market, DEFAULT_CAPACITY, DAYS, DEFAULT_COEFFICIENTS)
        gap = reference_sweep.shutdown_profit - case_a.profit
        expected = market.methanol_price + gap / case_a.plan.methanol

        assert case_a.plan.methanol == pytest.approx(23250.0)
        assert expected == pytest.approx(99.1824, abs=1e-3)
        assert reference_sweep.crossover_price == pytest.approx(expected, abs=0.1)

    def test_crossover_off_grid(self, reference_sweep):
        assert reference_sweep.crossover_price % 5.0 == pytest.approx(4.18, abs=0.1)

    def test_case_a_line_recorded(self, reference_sweep):
        for point in reference_sweep.points:
            assert point.case_a_profit is not None
            assert point.running_profit >= point.case_a_profit - 1.0

    def test_methanol_unit_cost(self, reference_sweep):
        assert reference_sweep.methanol_unit_cost == pytest.approx(205.34865)

    def test_no_crossover_when_running_always_ahead(self):
        sweep = _shutdown_sweep(price_range=np.arange(200.0, 355.0, 5.0))
        assert sweep.crossover_price is None

    def test_no_crossover_when_shutdown_never_beaten(self):
        sweep = _shutdown_sweep(price_range=[0.0, 10.0, 20.0, 30.0, 40.0, 50.0])
        assert sweep.crossover_price is None
        for point in sweep.points:
            assert point.advantage == pytest.approx(0.0, abs=1.0)

    @pytest.mark.parametrize("grid", [[], [10.0, 5.0], [5.0, 5.0]])
    def test_bad_grid(self, grid):
        with pytest.raises(ValueError, match="price_range"):
            _shutdown_sweep(price_range=grid)

    def test_shutdown_solution_ignores_methanol_price(self):
        sol = shutdown_solution(325.0, 400.0, 5.0, DEFAULT_CAPACITY, DAYS)
        assert sol.plan.methanol == 0.0
        assert sol.case is Case.B


class TestFindCrossover:
    def test_interpolates_sign_change(self):
        points = [
            ShutdownPoint(0.0, 200.0, 200.0, 100.0),
            ShutdownPoint(10.0, 300.0, 200.0, 300.0),
        ]
        assert find_crossover(points) == pytest.approx(5.0)

    def test_running_clamped_at_shutdown(self):
        # Running is the better of case A and shutdown, flat until break-even;
        # the crossing comes from the case A line at 9.5.
        shutdown = 1000.0
        points = []
        for price in (0.0, 5.0, 10.0, 15.0):
            case_a = 100.0 * price + 50.0
            points.append(ShutdownPoint(price, max(case_a, shutdown), shutdown, case_a))
        assert find_crossover(points) == pytest.approx(9.5)

    def test_uses_last_tie_before_gain(self):
        points = [
            ShutdownPoint(0.0, 200.0, 200.0, 200.0),
            ShutdownPoint(10.0, 200.0, 200.0, 200.0),
            ShutdownPoint(20.0, 500.0, 200.0, 500.0),
        ]
        assert find_crossover(points) == pytest.approx(10.0)

    def test_infeasible_points_skipped(self):
        points = [
            ShutdownPoint(0.0, 200.0, 200.0, 100.0),
            ShutdownPoint(10.0, 200.0, 200.0, None),
            ShutdownPoint(20.0, 300.0, 200.0, 300.0),
        ]
        assert find_crossover(points) is None

    def test_without_case_a_line(self):
        points = [ShutdownPoint(0.0, 200.0, 200.0), ShutdownPoint(10.0, 300.0, 200.0)]
        assert find_crossover(points) is None

    def test_empty(self):
        assert find_crossover([]) is None


class TestShutdownSolution:
    def test_rejects_invalid_coefficients(self):
        with pytest.raises(ValueError, match="boiler_urea"):
            shutdown_solution(
                325.0, 400.0, 5.0, DEFAULT_CAPACITY, DAYS, ProcessCoefficients(boiler_urea=-1.0)
            )

    def test_rejects_bad_period(self):
        with pytest.raises(ValueError, match="period_days"):
            shutdown_solution(325.0, 400.0, 5.0, DEFAULT_CAPACITY, 0)

    def test_floor_methanol_charged_at_unit_cost(self):
        floor = DEFAULT_COEFFICIENTS.with_overrides(shutdown_methanol=1000.0)
        base = shutdown_solution(325.0, 400.0, 5.0, DEFAULT_CAPACITY, DAYS)
        held = shutdown_solution(325.0, 400.0, 5.0, DEFAULT_CAPACITY, DAYS, floor)
        assert held.plan.methanol == pytest.approx(1000.0)
        assert held.revenue == pytest.approx(base.revenue)
        assert held.profit == pytest.approx(base.profit - 1000.0 * 205.34865)


class TestGasSensitivity:
    @pytest.fixture(scope="class")
    def points(self):
        return sweep_gas_sensitivity(DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS)

    def test_default_grid(self, points):
        assert len(points) == 39
        assert points[0].gas_price == 0.5
        assert points[-1].gas_price == 10.0

    def test_profit_non_increasing(self, points):
        profits = [p.profit for p in points]
        for before, after in zip(profits, profits[1:]):
            assert after <= before + 1e-6 * abs(before)

    def test_reference_price_matches_evaluate(self, points):
        point = next(p for p in points if p.gas_price == 5.0)
        assert point.profit == pytest.approx(evaluate(DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS).profit)

    def test_custom_grid(self):
        points = sweep_gas_sensitivity(DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, gas_price_range=[1.0, 9.0])
        assert [p.gas_price for p in points] == [1.0, 9.0]
        assert points[0].profit > points[1].profit

    def test_bad_grid(self):
        with pytest.raises(ValueError, match="gas_price_range"):
            sweep_gas_sensitivity(DEFAULT_MARKET, DEFAULT_CAPACITY, DAYS, gas_price_range=[3.0, 2.0])
