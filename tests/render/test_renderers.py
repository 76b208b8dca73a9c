"""Tests for the report renderers."""

import pytest
import sys
import os

# Add src directory to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'src'))

from calc.benefit_calculator import BenefitCalculator
from calc.social_security_calculator import SocialSecurityCalculator
from calc.tax_compare_calculator import TaxCompareCalculator
from model.FilingStatus import FilingStatus
from model.inputs import StateCompareInput, WorkHistory
from render.renderers import (
    BenefitRenderer,
    ContributionsRenderer,
    ProjectionRenderer,
    RENDERER_REGISTRY,
    StateComparisonRenderer,
    comparison_headline,
    format_usd,
)
from tax.StateDetails import StateDetails


@pytest.fixture(scope="module")
def compare_calculator():
    return TaxCompareCalculator(StateDetails.load())


def comparison(calculator, state_a, state_b):
    request = StateCompareInput(
        income=100000, home_value=450000, filing_status=FilingStatus.SINGLE,
        state_a=state_a, state_b=state_b, years_invested=3, annual_return=0.10,
    )
    return calculator.compare(request, 2025)


@pytest.fixture
def social_security_result(synthetic_social_security):
    calculator = SocialSecurityCalculator(BenefitCalculator(synthetic_social_security))
    history = WorkHistory(income=42000, start_year=2020, years_worked=35, birth_year=1960)
    return calculator.calculate(history, 2025)


class TestFormatting:
    def test_format_usd(self):
        assert format_usd(10350) == "$10,350"
        assert format_usd(1234.56) == "$1,235"
        assert format_usd(-1234.4) == "-$1,234"
        assert format_usd(0) == "$0"

    def test_headline_when_moving_saves(self, compare_calculator):
        result = comparison(compare_calculator, "IL", "FL")
        assert comparison_headline(result) == "Taxes Saved By Moving: $10,350 Each Year"

    def test_headline_when_moving_costs(self, compare_calculator):
        result = comparison(compare_calculator, "FL", "IL")
        assert comparison_headline(result) == "Additional Tax Owed By Moving: $10,350 Each Year"

    def test_headline_when_equal(self, compare_calculator):
        result = comparison(compare_calculator, "TX", "TX")
        assert comparison_headline(result) == "No significant difference per year"


class TestStateComparisonRenderer:
    def test_renders_both_states_and_projection(self, compare_calculator, capsys):
        StateComparisonRenderer().render(comparison(compare_calculator, "IL", "FL"))
        output = capsys.readouterr().out
        assert "ILLINOIS VS FLORIDA" in output
        assert "$14,850" in output
        assert "$4,500" in output
        assert "INVESTED AT 10% FOR 3 YEARS" in output
        assert "2028" in output

    def test_no_projection_without_difference(self, compare_calculator, capsys):
        StateComparisonRenderer().render(comparison(compare_calculator, "TX", "TX"))
        output = capsys.readouterr().out
        assert "No significant difference per year" in output
        assert "INVESTED AT" not in output


class TestSocialSecurityRenderers:
    def test_contributions(self, social_security_result, capsys):
        ContributionsRenderer().render(social_security_result)
        output = capsys.readouterr().out
        assert "SNAPSHOT: 2020" in output
        assert "OVER 35 YEARS (2020-2054)" in output
        # 42,000 * 6.2%
        assert "$2,604" in output

    def test_contributions_coverage_note(self, social_security_result, capsys):
        ContributionsRenderer().render(social_security_result)
        assert "Note: Wage caps are only built in through 2010" in capsys.readouterr().out

    def test_benefit(self, social_security_result, capsys):
        BenefitRenderer().render(social_security_result)
        output = capsys.readouterr().out
        assert "CLAIM YEAR 2027" in output
        assert "$        3,500" in output
        assert "1,820.70" in output

    def test_projection(self, social_security_result, capsys):
        ProjectionRenderer().render(social_security_result)
        output = capsys.readouterr().out
        assert "ACCUMULATION" in output
        assert "WITHDRAWING $1,821 PER MONTH" in output
        assert "Months sustained:" in output
        assert social_security_result.projection.phase.value in output


def test_registry_modes():
    assert set(RENDERER_REGISTRY) == {'StateComparison', 'Contributions', 'Benefit', 'Projection'}
    assert RENDERER_REGISTRY['Benefit'] is BenefitRenderer
