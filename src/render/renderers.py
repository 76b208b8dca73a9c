"""Renderer classes for displaying tax comparison and Social Security results.

This module contains renderer classes that handle the presentation logic
for each calculation result. Each renderer prints a fixed-width report.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from model.ProjectionData import DrawdownResult, ProjectionPoint
from model.SocialSecurityResults import SocialSecurityResult
from model.TaxResults import StateTaxResult, TaxComparisonResult


def format_usd(amount: float) -> str:
    """Format a dollar amount without cents, e.g. -$1,235."""
    rounded = round(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,}"


def comparison_headline(result: TaxComparisonResult) -> str:
    """One-line verdict for moving from state A to state B."""
    comparison = result.comparison
    if comparison.moving_saves_money:
        return f"Taxes Saved By Moving: {format_usd(comparison.annual_difference)} Each Year"
    if comparison.moving_costs_money:
        return f"Additional Tax Owed By Moving: {format_usd(comparison.annual_difference)} Each Year"
    return "No significant difference per year"


def comparison_subtitle(result: TaxComparisonResult) -> str:
    a = result.comparison.state_a.state
    b = result.comparison.state_b.state
    if result.comparison.moving_saves_money:
        return f"Moving to {b} saves you money each year versus {a}."
    if result.comparison.moving_costs_money:
        return (f"{b} costs more per year than {a}. "
                f"This shows what that difference could grow into if invested.")
    return "There is no annual difference between these states based on this estimate."


def _section(title: str) -> None:
    print()
    print("-" * 60)
    print(title)
    print("-" * 60)


def _banner(title: str) -> None:
    print()
    print("=" * 60)
    print(f"{title:^60}")
    print("=" * 60)


def _projection_table(points: List[ProjectionPoint]) -> None:
    print(f"  {'Year':<6} {'Balance':>16} {'Principal':>16} {'Interest':>16}")
    print(f"  {'-' * 6} {'-' * 16} {'-' * 16} {'-' * 16}")
    for p in points:
        print(f"  {p.year:<6} {format_usd(p.balance):>16} "
              f"{format_usd(p.principal_contributed):>16} {format_usd(p.interest_accrued):>16}")


class BaseRenderer(ABC):
    """Abstract base class for all renderers."""

    @abstractmethod
    def render(self, data: Any) -> None:
        """Render the data to output.

        Args:
            data: The calculation result to display
        """
        pass


class StateComparisonRenderer(BaseRenderer):
    """Renderer for the tax paid in two states and the invested difference."""

    def _render_state(self, result: StateTaxResult) -> None:
        print(f"  {result.state_name} ({result.state})")
        if result.standard_deduction > 0:
            print(f"    {'Standard deduction:':<38} {format_usd(result.standard_deduction):>14}")
        print(f"    {'Taxable income:':<38} {format_usd(result.taxable_income):>14}")
        print(f"    {'Income tax:':<38} {format_usd(result.income_tax):>14}")
        if result.surtax > 0:
            print(f"    {'  of which surtax:':<38} {format_usd(result.surtax):>14}")
        print(f"    {'Property tax:':<38} {format_usd(result.property_tax):>14}")
        print(f"    {'Total:':<38} {format_usd(result.total):>14}")

    def render(self, data: TaxComparisonResult) -> None:
        comparison = data.comparison
        a, b = comparison.state_a, comparison.state_b
        _banner(f"{a.state_name.upper()} VS {b.state_name.upper()}")
        print(f"  Filing status: {a.filing_status.display_name}")
        print(f"  Income: {format_usd(a.gross_income)}   Home value: {format_usd(a.home_value)}")

        _section("TAX PAID IN EACH STATE")
        self._render_state(a)
        print()
        self._render_state(b)

        _section("DIFFERENCE")
        print(f"  {comparison_headline(data)}")
        print(f"  {comparison_subtitle(data)}")

        if comparison.annual_difference > 0:
            _section(f"INVESTED AT {data.annual_return:.0%} FOR {data.years_invested} YEARS")
            print(f"  Moving could increase your net worth by: {format_usd(data.invested_difference)}")
            print()
            _projection_table(data.projection)


class ContributionsRenderer(BaseRenderer):
    """Renderer for yearly OASDI contributions."""

    def render(self, data: SocialSecurityResult) -> None:
        contributions = data.contributions
        _banner("ESTIMATED SOCIAL SECURITY CONTRIBUTIONS")

        snapshot = contributions.snapshot
        if snapshot is not None:
            _section(f"PER YEAR (SNAPSHOT: {snapshot.year})")
            print(f"  {'Wage base used:':<40} {format_usd(snapshot.wage_base):>14}")
            print(f"  {'Taxable wages:':<40} {format_usd(snapshot.taxable_wages):>14}")
            print(f"  {'You pay:':<40} {format_usd(snapshot.employee):>14}")
            print(f"  {'Employer pays:':<40} {format_usd(snapshot.employer):>14}")
            print(f"  {'Total:':<40} {format_usd(snapshot.total):>14}")

        _section(f"OVER {len(contributions.years)} YEARS "
                 f"({contributions.first_year}-{contributions.last_year})")
        if contributions.years:
            print(f"  {'First-year wage base:':<40} {format_usd(contributions.years[0].wage_base):>14}")
            print(f"  {'Last-year wage base:':<40} {format_usd(contributions.years[-1].wage_base):>14}")
        print(f"  {'You pay:':<40} {format_usd(contributions.total_employee):>14}")
        print(f"  {'Employer pays:':<40} {format_usd(contributions.total_employer):>14}")
        print(f"  {'Total:':<40} {format_usd(contributions.total):>14}")

        if data.coverage_note:
            print()
            print(f"  Note: {data.coverage_note}")


class BenefitRenderer(BaseRenderer):
    """Renderer for the estimated retirement benefit."""

    def render(self, data: SocialSecurityResult) -> None:
        benefit = data.benefit
        _banner(f"ESTIMATED BENEFIT AT CLAIM YEAR {benefit.claim_year}")

        _section("EARNINGS")
        print(f"  {'Years of earnings counted:':<40} {benefit.years_counted:>14}")
        print(f"  {'AIME:':<40} ${benefit.aime:>13,}")

        _section(f"PRIMARY INSURANCE AMOUNT (ELIGIBLE {benefit.eligibility_year})")
        first, second = benefit.bend_points
        print(f"  {'Bend points:':<40} {format_usd(first):>6} / {format_usd(second)}")
        print(f"  {'PIA before COLA:':<40} ${benefit.pia_before_cola:>13,.2f}")
        print(f"  {'COLA factor:':<40} {benefit.cola_factor:>14.4f}")
        print(f"  {'Monthly benefit:':<40} ${benefit.pia_monthly:>13,.2f}")
        print(f"  {'Annual benefit:':<40} ${benefit.annual_benefit:>13,.2f}")
        print(f"  {'Lifetime estimate:':<40} ${benefit.total_lifetime_estimate:>13,.2f}")
        print(f"  ({benefit.remaining_years_at_claim:.2f} average remaining years at claim age)")


class ProjectionRenderer(BaseRenderer):
    """Renderer for contributions invested instead, then drawn down by the benefit."""

    def _render_drawdown(self, drawdown: DrawdownResult, monthly_withdrawal: float) -> None:
        _section(f"WITHDRAWING {format_usd(monthly_withdrawal)} PER MONTH")
        _projection_table(drawdown.points)
        print()
        print(f"  Outcome: {drawdown.phase.value}")
        print(f"  Months sustained: {drawdown.months_sustained} of {drawdown.max_months}")
        print(f"  Ending balance: {format_usd(drawdown.ending_balance)}")
        print(f"  Total withdrawn: {format_usd(drawdown.total_withdrawn)}")

    def render(self, data: SocialSecurityResult) -> None:
        projection = data.projection
        _banner(f"IF THOSE CONTRIBUTIONS WERE INVESTED AT {data.annual_return:.0%}")

        _section("ACCUMULATION")
        print(f"  {'Estimated value:':<40} {format_usd(projection.balance_at_retirement):>14}")
        print(f"  {'Principal:':<40} {format_usd(projection.principal_contributed):>14}")
        print(f"  {'Interest:':<40} "
              f"{format_usd(projection.balance_at_retirement - projection.principal_contributed):>14}")
        print()
        _projection_table(projection.accumulation)

        if projection.drawdown is not None:
            self._render_drawdown(projection.drawdown, data.benefit.pia_monthly)


# Registry of renderer classes, keyed by the CLI mode name
RENDERER_REGISTRY = {
    'StateComparison': StateComparisonRenderer,
    'Contributions': ContributionsRenderer,
    'Benefit': BenefitRenderer,
    'Projection': ProjectionRenderer,
}
