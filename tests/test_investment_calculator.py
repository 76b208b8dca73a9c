"""Tests for InvestmentCalculator accumulation and drawdown projections."""

import os
import sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from calc.investment_calculator import InvestmentCalculator, monthly_rate_from_annual
from model.ProjectionData import ProjectionPhase


class TestMonthlyRate:
    def test_compounds_to_annual_rate(self):
        monthly = monthly_rate_from_annual(0.10)
        assert (1 + monthly) ** 12 == pytest.approx(1.10)
        assert monthly < 0.10 / 12

    def test_zero_rate(self):
        assert monthly_rate_from_annual(0.0) == 0.0


class TestAccumulation:
    def test_zero_contributions_stay_zero(self):
        calc = InvestmentCalculator(0.10)
        points = calc.project_accumulation([0.0] * 36, 2025)
        assert all(p.balance == 0 for p in points)
        assert all(p.interest_accrued == 0 for p in points)

    def test_twelve_month_balance_matches_closed_form(self):
        calc = InvestmentCalculator(0.10)
        monthly = calc.monthly_rate
        contribution = 1000.0
        points = calc.project_accumulation([contribution] * 12, 2025)
        expected = sum(contribution * (1 + monthly) ** k for k in range(12))
        assert points[-1].balance == pytest.approx(expected, rel=1e-6)
        assert points[-1].principal_contributed == pytest.approx(12000)
        assert points[-1].interest_accrued == pytest.approx(expected - 12000, rel=1e-6)

    def test_one_point_per_year_plus_start(self):
        calc = InvestmentCalculator(0.07)
        points = calc.project_accumulation([100.0] * 60, 2025)
        assert [p.month for p in points] == [0, 12, 24, 36, 48, 60]
        assert [p.year for p in points] == [2025, 2026, 2027, 2028, 2029, 2030]
        assert points[0].balance == 0

    def test_partial_final_year_gets_a_point(self):
        calc = InvestmentCalculator(0.07)
        points = calc.project_accumulation([100.0] * 18, 2025)
        assert [p.month for p in points] == [0, 12, 18]
        assert points[-1].year == 2027
        assert points[-1].principal_contributed == pytest.approx(1800)

    def test_annual_contributions_spread_monthly(self):
        calc = InvestmentCalculator(0.0)
        points = calc.project_annual_contributions([1200.0, 2400.0], 2025)
        assert [p.balance for p in points] == pytest.approx([0, 1200, 3600])

    def test_balance_is_non_decreasing(self):
        calc = InvestmentCalculator(0.10)
        points = calc.project_accumulation([250.0] * 480, 2025)
        balances = [p.balance for p in points]
        assert balances == sorted(balances)


class TestDrawdown:
    def test_large_withdrawal_exhausts_fund(self):
        calc = InvestmentCalculator(0.10)
        result = calc.project_drawdown(10000, 2000, 120, 2030)
        assert result.ending_balance == 0
        assert result.exhausted
        assert result.phase is ProjectionPhase.EXHAUSTED
        assert result.months_sustained < result.max_months
        # five full withdrawals, the sixth only partially funded
        assert result.months_sustained == 5
        assert result.total_withdrawn == pytest.approx(
            5 * 2000
            + 10000 * (1 + calc.monthly_rate) ** 6
            - sum(2000 * (1 + calc.monthly_rate) ** k for k in range(1, 6)),
            rel=1e-9,
        )

    def test_small_withdrawal_survives_horizon(self):
        calc = InvestmentCalculator(0.10)
        result = calc.project_drawdown(100000, 100, 240, 2030)
        assert result.ending_balance > 0
        assert result.phase is ProjectionPhase.SURVIVED
        assert result.months_sustained == result.max_months == 240
        assert result.total_withdrawn == pytest.approx(24000)

    def test_final_point_at_horizon(self):
        calc = InvestmentCalculator(0.05)
        result = calc.project_drawdown(500000, 1000, 30, 2030)
        assert [p.month for p in result.points] == [0, 12, 24, 30]

    def test_final_point_when_exhausted_mid_year(self):
        calc = InvestmentCalculator(0.0)
        result = calc.project_drawdown(3000, 1000, 24, 2030)
        assert result.points[-1].month == 3
        assert result.points[-1].balance == 0
        assert result.months_sustained == 3
        assert result.exhausted

    def test_zero_balance_never_withdraws(self):
        calc = InvestmentCalculator(0.10)
        result = calc.project_drawdown(0, 1000, 12, 2030)
        assert result.months_sustained == 0
        assert result.total_withdrawn == 0
        assert len(result.points) == 1


class TestLifetime:
    def test_drawdown_starts_from_accumulated_balance(self):
        calc = InvestmentCalculator(0.06)
        projection = calc.project_lifetime([12000.0] * 10, 500, 120, 2025)
        accumulated = projection.accumulation[-1]
        assert projection.drawdown.points[0].balance == pytest.approx(accumulated.balance)
        assert projection.drawdown.points[0].year == accumulated.year == 2035
        assert projection.principal_contributed == pytest.approx(120000)

    def test_phase_reflects_drawdown_outcome(self):
        calc = InvestmentCalculator(0.06)
        survived = calc.project_lifetime([12000.0] * 10, 100, 120, 2025)
        exhausted = calc.project_lifetime([1200.0] * 2, 5000, 120, 2025)
        assert survived.phase is ProjectionPhase.SURVIVED
        assert exhausted.phase is ProjectionPhase.EXHAUSTED
