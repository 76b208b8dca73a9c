"""Immutable state tax rule data.

A state either has no wage income tax, a flat rate, or a progressive bracket
schedule per filing status. Standard deductions and surtaxes are optional on
either taxing policy.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from model.FilingStatus import FilingStatus


@dataclass(frozen=True)
class TaxBracket:
    upper_bound: float  # math.inf for the top bracket
    rate: float

    @property
    def is_unbounded(self) -> bool:
        return math.isinf(self.upper_bound)


@dataclass(frozen=True)
class Surtax:
    threshold: float
    rate: float


@dataclass(frozen=True)
class IncomeTaxPolicy:
    standard_deduction_by_status: Dict[FilingStatus, float] = field(default_factory=dict)
    surtaxes: Tuple[Surtax, ...] = ()

    def standard_deduction(self, filing_status: FilingStatus) -> float:
        return self.standard_deduction_by_status.get(filing_status, 0.0)


@dataclass(frozen=True)
class NoIncomeTax(IncomeTaxPolicy):
    pass


@dataclass(frozen=True, kw_only=True)
class FlatIncomeTax(IncomeTaxPolicy):
    rate: float


@dataclass(frozen=True, kw_only=True)
class ProgressiveIncomeTax(IncomeTaxPolicy):
    brackets_by_status: Dict[FilingStatus, Tuple[TaxBracket, ...]]

    def brackets(self, filing_status: FilingStatus) -> Tuple[TaxBracket, ...]:
        return self.brackets_by_status[filing_status]


@dataclass(frozen=True)
class StateTaxRule:
    key: str
    name: str
    property_tax_rate: float
    income_tax: IncomeTaxPolicy = field(default_factory=NoIncomeTax)

    @property
    def has_income_tax(self) -> bool:
        return not isinstance(self.income_tax, NoIncomeTax)
