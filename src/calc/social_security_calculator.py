"""Social Security contributions versus investing the same money.

Builds the contribution history and benefit estimate for a work history, then
invests each year's combined employee and employer contribution and draws the
fund down by the estimated monthly benefit over the average remaining
lifetime at the claim age.
"""

from calc.benefit_calculator import BenefitCalculator
from calc.investment_calculator import InvestmentCalculator
from model.SocialSecurityResults import SocialSecurityResult
from model.inputs import WorkHistory


class SocialSecurityCalculator:
    def __init__(self, benefit_calculator: BenefitCalculator):
        self.benefit_calculator = benefit_calculator

    @property
    def social_security(self):
        return self.benefit_calculator.social_security

    def drawdown_months(self) -> int:
        return round(self.social_security.remaining_years_at_claim * 12)

    def calculate(self, history: WorkHistory, start_year: int) -> SocialSecurityResult:
        """Run contributions, benefit and opportunity-cost projection for one history.

        Args:
            history: Validated work history
            start_year: Calendar year of the projection's initial "now" point

        Returns:
            SocialSecurityResult with every component
        """
        contributions = self.benefit_calculator.estimate_contributions(
            history.income, history.start_year, history.years_worked)
        benefit = self.benefit_calculator.estimate_benefit(
            history.income, history.start_year, history.years_worked, history.birth_year)

        investment = InvestmentCalculator(history.annual_return)
        projection = investment.project_lifetime(
            annual_contributions=[y.total for y in contributions.years],
            monthly_withdrawal=benefit.pia_monthly,
            horizon_months=self.drawdown_months(),
            start_year=start_year,
        )

        return SocialSecurityResult(
            contributions=contributions,
            benefit=benefit,
            projection=projection,
            annual_return=history.annual_return,
            coverage_note=self.social_security.coverage_note(history.start_year, history.last_year),
        )
