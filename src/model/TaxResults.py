from dataclasses import dataclass, field
from typing import List

from model.FilingStatus import FilingStatus
from model.ProjectionData import ProjectionPoint


@dataclass
class StateTaxResult:
    """Income and property tax owed in one state for one household."""
    state: str
    state_name: str
    filing_status: FilingStatus
    gross_income: float
    home_value: float
    standard_deduction: float
    taxable_income: float
    base_income_tax: float
    surtax: float
    property_tax: float

    @property
    def income_tax(self) -> float:
        return self.base_income_tax + self.surtax

    @property
    def total(self) -> float:
        return self.income_tax + self.property_tax


@dataclass
class StateComparison:
    """Comparison of moving from state A to state B.

    delta is B.total - A.total: negative means moving to B saves money.
    """
    state_a: StateTaxResult
    state_b: StateTaxResult

    @property
    def delta(self) -> float:
        return self.state_b.total - self.state_a.total

    @property
    def annual_difference(self) -> float:
        return abs(self.delta)

    @property
    def moving_saves_money(self) -> bool:
        return self.delta < 0

    @property
    def moving_costs_money(self) -> bool:
        return self.delta > 0


@dataclass
class TaxComparisonResult:
    """A state comparison plus the growth of the yearly difference if invested."""
    comparison: StateComparison
    years_invested: int
    annual_return: float
    projection: List[ProjectionPoint] = field(default_factory=list)

    @property
    def invested_difference(self) -> float:
        return self.projection[-1].balance if self.projection else 0.0
