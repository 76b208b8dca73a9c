"""OASDI contribution and retirement benefit estimator.

Turns a constant-income work history into yearly payroll contributions and an
estimated monthly benefit (PIA) at the claim age:

1. Cap each year's earnings at that year's wage base.
2. Wage-index years before the indexing year (age 60) by AWI(age 60) / AWI(year).
3. Average the highest 35 indexed years over 420 months, floored to a dollar (AIME).
4. Apply the 90/32/15 bend-point formula for the eligibility year (age 62),
   truncating to the dime.
5. Compound tabulated COLAs for the years after eligibility through the claim
   year (age 67), truncating to the dime again.
"""

import math
from typing import List

from model.SocialSecurityResults import BenefitEstimate, ContributionSummary, IndexedEarnings
from model.StateTaxRule import TaxBracket
from tax.ProgressiveTax import compute_bracket_tax
from tax.SocialSecurityDetails import SocialSecurityDetails


def floor_to_dime(amount: float) -> float:
    """Truncate a dollar amount down to the nearest $0.10."""
    # the epsilon absorbs binary error such as 1234.5 * 10 == 12344.999...
    return math.floor(amount * 10 + 1e-9) / 10


class BenefitCalculator:
    """Estimates OASDI contributions and the retirement benefit they earn."""

    def __init__(self, social_security: SocialSecurityDetails):
        self.social_security = social_security

    def estimate_contributions(self, income: float, start_year: int, years_worked: int) -> ContributionSummary:
        """Calculate contributions for each working year.

        Args:
            income: Annual wages, assumed constant across the career.
            start_year: First calendar year worked.
            years_worked: Number of consecutive years worked.

        Returns:
            ContributionSummary with one ContributionYear per working year.
        """
        return ContributionSummary(years=[
            self.social_security.contribution(income, year)
            for year in range(start_year, start_year + years_worked)
        ])

    def index_earnings(self, income: float, start_year: int, years_worked: int,
                       birth_year: int) -> List[IndexedEarnings]:
        ss = self.social_security
        indexing_year = birth_year + ss.indexing_age
        indexing_awi = ss.average_wage_index(indexing_year)

        indexed = []
        for year in range(start_year, start_year + years_worked):
            if year < indexing_year:
                factor = indexing_awi / ss.average_wage_index(year)
            else:
                factor = 1.0
            indexed.append(IndexedEarnings(
                year=year,
                covered_earnings=ss.taxable_wages(income, year),
                indexing_factor=factor,
            ))
        return indexed

    def average_indexed_monthly_earnings(self, indexed: List[IndexedEarnings]) -> int:
        """Average the highest computation years over a fixed number of months.

        Fewer years than the computation period count as zero years; the
        divisor never shrinks.
        """
        years = self.social_security.computation_years
        top = sorted((e.indexed_earnings for e in indexed), reverse=True)[:years]
        return math.floor(sum(top) / (years * 12))

    def primary_insurance_amount(self, aime: float, eligibility_year: int) -> float:
        """Apply the bend-point formula, truncated to the dime, before any COLA."""
        first, second = self.social_security.bend_points(eligibility_year)
        low, middle, high = self.social_security.replacement_rates
        tiers = (
            TaxBracket(upper_bound=first, rate=low),
            TaxBracket(upper_bound=second, rate=middle),
            TaxBracket(upper_bound=math.inf, rate=high),
        )
        return floor_to_dime(compute_bracket_tax(aime, tiers))

    def cola_factor(self, eligibility_year: int, claim_year: int) -> float:
        """Compound the tabulated COLAs after eligibility through the claim year.

        Years without a tabulated COLA are skipped.
        """
        factor = 1.0
        for year in range(eligibility_year + 1, claim_year + 1):
            cola = self.social_security.cost_of_living_adjustment(year)
            if cola is not None:
                factor *= 1 + cola
        return factor

    def estimate_benefit(self, income: float, start_year: int, years_worked: int,
                         birth_year: int) -> BenefitEstimate:
        ss = self.social_security
        indexed = self.index_earnings(income, start_year, years_worked, birth_year)
        aime = self.average_indexed_monthly_earnings(indexed)

        eligibility_year = birth_year + ss.eligibility_age
        claim_year = birth_year + ss.claim_age
        pia_before_cola = self.primary_insurance_amount(aime, eligibility_year)
        cola_factor = self.cola_factor(eligibility_year, claim_year)

        return BenefitEstimate(
            birth_year=birth_year,
            eligibility_year=eligibility_year,
            claim_year=claim_year,
            indexed_earnings=indexed,
            aime=aime,
            bend_points=ss.bend_points(eligibility_year),
            pia_before_cola=pia_before_cola,
            cola_factor=cola_factor,
            pia_monthly=floor_to_dime(pia_before_cola * cola_factor),
            remaining_years_at_claim=ss.remaining_years_at_claim,
        )
