"""Result data for OASDI contribution and retirement benefit estimates."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from model.ProjectionData import LifetimeProjection


@dataclass
class ContributionYear:
    """Payroll contributions for a single working year."""
    year: int
    wage_base: float
    taxable_wages: float
    employee_rate: float
    employer_rate: float
    employee: float
    employer: float

    @property
    def total(self) -> float:
        return self.employee + self.employer


@dataclass
class ContributionSummary:
    """Contributions across all working years, in year order."""
    years: List[ContributionYear] = field(default_factory=list)

    @property
    def total_employee(self) -> float:
        return sum(y.employee for y in self.years)

    @property
    def total_employer(self) -> float:
        return sum(y.employer for y in self.years)

    @property
    def total(self) -> float:
        return self.total_employee + self.total_employer

    @property
    def first_year(self) -> Optional[int]:
        return self.years[0].year if self.years else None

    @property
    def last_year(self) -> Optional[int]:
        return self.years[-1].year if self.years else None

    @property
    def snapshot(self) -> Optional[ContributionYear]:
        """The first working year, used as the representative per-year view."""
        return self.years[0] if self.years else None


@dataclass
class IndexedEarnings:
    year: int
    covered_earnings: float
    indexing_factor: float

    @property
    def indexed_earnings(self) -> float:
        return self.covered_earnings * self.indexing_factor


@dataclass
class BenefitEstimate:
    """Estimated retirement benefit at the claim age.

    aime is whole dollars; PIA amounts are truncated to the dime.
    """
    birth_year: int
    eligibility_year: int
    claim_year: int
    indexed_earnings: List[IndexedEarnings]
    aime: int
    bend_points: Tuple[float, float]
    pia_before_cola: float
    cola_factor: float
    pia_monthly: float
    remaining_years_at_claim: float

    @property
    def annual_benefit(self) -> float:
        return self.pia_monthly * 12

    @property
    def total_lifetime_estimate(self) -> float:
        return self.pia_monthly * 12 * self.remaining_years_at_claim

    @property
    def years_counted(self) -> int:
        return len(self.indexed_earnings)


@dataclass
class SocialSecurityResult:
    """Contributions, the benefit they earn, and the same money invested instead."""
    contributions: ContributionSummary
    benefit: BenefitEstimate
    projection: LifetimeProjection
    annual_return: float
    coverage_note: Optional[str] = None
