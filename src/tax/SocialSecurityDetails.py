import json
import os
from bisect import bisect_right
from typing import Dict, Generic, List, Optional, Tuple, TypeVar

from model.SocialSecurityResults import ContributionYear


DEFAULT_REFERENCE_PATH = os.path.normpath(
    os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'social-security.json')
)

T = TypeVar('T')


class YearTable(Generic[T]):
    """Year-keyed lookup that never fails for a year outside the table.

    Years before the first entry use the first entry, years after the last
    entry use the last entry, and years inside a gap use the closest earlier
    entry.
    """

    def __init__(self, name: str, values: Dict[int, T]):
        if not values:
            raise ValueError(f"{name} table must contain at least one year")
        self.name = name
        self.values = dict(values)
        self.years = sorted(self.values)

    @property
    def first_year(self) -> int:
        return self.years[0]

    @property
    def last_year(self) -> int:
        return self.years[-1]

    def __contains__(self, year: int) -> bool:
        return year in self.values

    def get(self, year: int) -> T:
        if year in self.values:
            return self.values[year]
        if year < self.first_year:
            return self.values[self.first_year]
        return self.values[self.years[bisect_right(self.years, year) - 1]]


def _year_table(name: str, entries: List[dict], value_of, year_key: str = "year") -> YearTable:
    values = {}
    for entry in sorted(entries, key=lambda e: e[year_key]):
        year = int(entry[year_key])
        if year in values:
            raise ValueError(f"{name} table lists year {year} more than once")
        values[year] = value_of(entry)
    return YearTable(name, values)


class SocialSecurityDetails:
    """Holds OASDI statutory tables and computes per-year payroll contributions.

    Loads the wage base, rate, average wage index, bend point and COLA tables
    from reference/social-security.json. Every table lookup resolves years
    outside the tabulated range to the nearest boundary year.
    """

    def __init__(self, data: dict):
        """Build the lookup tables from parsed social-security.json data.

        Args:
            data: Dictionary in the social-security.json format.
        """
        self.snapshot_year = data.get("snapshotYear")
        self.wage_bases = _year_table(
            "wageBases", data.get("wageBases", []), lambda e: float(e["maximumTaxedIncome"]))
        self.rates = _year_table(
            "rates", data.get("rates", []),
            lambda e: (float(e["employeePortion"]), float(e.get("employerPortion", e["employeePortion"]))))
        self.average_wage_indexes = _year_table(
            "averageWageIndex", data.get("averageWageIndex", []), lambda e: float(e["index"]))
        self.bend_point_table = _year_table(
            "bendPoints", data.get("bendPoints", []),
            lambda e: (float(e["first"]), float(e["second"])), year_key="eligibilityYear")
        # COLAs are applied only for tabulated years, so this one stays a plain dict
        self.colas: Dict[int, float] = {
            int(e["year"]): float(e["adjustment"]) for e in data.get("costOfLivingAdjustments", [])
        }

        formula = data.get("benefitFormula", {})
        self.replacement_rates: Tuple[float, ...] = tuple(formula.get("replacementRates", (0.90, 0.32, 0.15)))
        if len(self.replacement_rates) != 3:
            raise ValueError("benefitFormula.replacementRates must list exactly three rates")
        self.computation_years = int(formula.get("computationYears", 35))
        self.indexing_age = int(formula.get("indexingAge", 60))
        self.eligibility_age = int(formula.get("eligibilityAge", 62))
        self.claim_age = int(formula.get("claimAge", 67))

        life = data.get("remainingLifeExpectancyAt67", {})
        if not life:
            raise ValueError("social-security.json must contain 'remainingLifeExpectancyAt67'")
        self.remaining_years_at_claim = sum(life.values()) / len(life)

    @classmethod
    def load(cls, ref_path: Optional[str] = None) -> "SocialSecurityDetails":
        with open(ref_path or DEFAULT_REFERENCE_PATH, 'r') as f:
            return cls(json.load(f))

    def wage_base(self, year: int) -> float:
        return self.wage_bases.get(year)

    def employee_rate(self, year: int) -> float:
        return self.rates.get(year)[0]

    def employer_rate(self, year: int) -> float:
        return self.rates.get(year)[1]

    def average_wage_index(self, year: int) -> float:
        return self.average_wage_indexes.get(year)

    def bend_points(self, eligibility_year: int) -> Tuple[float, float]:
        return self.bend_point_table.get(eligibility_year)

    def cost_of_living_adjustment(self, year: int) -> Optional[float]:
        """Return the COLA for year, or None when the year is not tabulated."""
        return self.colas.get(year)

    def taxable_wages(self, income: float, year: int) -> float:
        return min(max(0.0, income), self.wage_base(year))

    def contribution(self, income: float, year: int) -> ContributionYear:
        """Calculate employee and employer OASDI contributions for one year.

        Args:
            income: Annual wages.
            year: Calendar year worked.

        Returns:
            ContributionYear with the wage base, taxable wages and both shares.
        """
        taxable = self.taxable_wages(income, year)
        employee_rate, employer_rate = self.rates.get(year)
        return ContributionYear(
            year=year,
            wage_base=self.wage_base(year),
            taxable_wages=taxable,
            employee_rate=employee_rate,
            employer_rate=employer_rate,
            employee=taxable * employee_rate,
            employer=taxable * employer_rate,
        )

    def coverage_note(self, first_year: int, last_year: int) -> Optional[str]:
        """Explain when working years fall outside the tabulated wage bases."""
        lo, hi = self.wage_bases.first_year, self.wage_bases.last_year
        too_early = first_year < lo
        too_late = last_year > hi
        if too_early and too_late:
            return (f"Wage caps are only built in for {lo}-{hi}. "
                    f"Years outside that range use the nearest available cap.")
        if too_early:
            return f"Wage caps are only built in starting {lo}. Earlier years use the {lo} cap."
        if too_late:
            return f"Wage caps are only built in through {hi}. Later years use the {hi} cap."
        return None
