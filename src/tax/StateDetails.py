import os
import json
import math
from typing import Dict, List, Optional, Tuple

from model.FilingStatus import FilingStatus
from model.StateTaxRule import (
    FlatIncomeTax,
    IncomeTaxPolicy,
    NoIncomeTax,
    ProgressiveIncomeTax,
    StateTaxRule,
    Surtax,
    TaxBracket,
)
from model.TaxResults import StateComparison, StateTaxResult
from model.errors import InvalidKeyError
from tax.ProgressiveTax import compute_bracket_tax, validate_brackets


DEFAULT_REFERENCE_PATH = os.path.normpath(
    os.path.join(os.path.dirname(__file__), '..', '..', 'reference', 'state-tax-rules.json')
)


def _parse_brackets(entries: List[dict]) -> Tuple[TaxBracket, ...]:
    brackets = tuple(
        TaxBracket(
            upper_bound=math.inf if e.get("upTo") is None else float(e["upTo"]),
            rate=float(e["rate"]),
        )
        for e in entries
    )
    validate_brackets(brackets)
    return brackets


def _parse_income_tax(key: str, data: Optional[dict]) -> IncomeTaxPolicy:
    if data is None:
        return NoIncomeTax()

    deductions = {
        FilingStatus.parse(status): float(amount)
        for status, amount in data.get("standardDeductionByStatus", {}).items()
    }
    surtaxes = tuple(
        Surtax(threshold=float(s["threshold"]), rate=float(s["rate"]))
        for s in data.get("surtaxes", [])
    )

    if "bracketsByStatus" in data:
        brackets_by_status = {
            FilingStatus.parse(status): _parse_brackets(entries)
            for status, entries in data["bracketsByStatus"].items()
        }
        missing = [s.value for s in FilingStatus if s not in brackets_by_status]
        if missing:
            raise ValueError(f"State {key} is missing brackets for filing statuses {missing}")
        return ProgressiveIncomeTax(
            standard_deduction_by_status=deductions,
            surtaxes=surtaxes,
            brackets_by_status=brackets_by_status,
        )
    if "flatRate" in data:
        return FlatIncomeTax(
            standard_deduction_by_status=deductions,
            surtaxes=surtaxes,
            rate=float(data["flatRate"]),
        )
    raise ValueError(f"State {key} income tax must define either 'flatRate' or 'bracketsByStatus'")


def parse_state_rules(data: dict) -> Dict[str, StateTaxRule]:
    """Build StateTaxRule objects from the state-tax-rules.json structure."""
    states = data.get("states", {})
    if not states:
        raise ValueError("state-tax-rules.json must contain a non-empty 'states' object")
    rules = {}
    for key, entry in states.items():
        key = key.upper()
        rules[key] = StateTaxRule(
            key=key,
            name=entry["name"],
            property_tax_rate=float(entry.get("propertyTaxRate", 0)),
            income_tax=_parse_income_tax(key, entry.get("incomeTax")),
        )
    return rules


def _slugify(name: str) -> str:
    return "-".join(name.lower().split())


class StateDetails:
    """Holds per-state income and property tax rules and computes state tax estimates.

    Rules are static configuration: loaded once from reference/state-tax-rules.json
    (or injected directly for tests) and never mutated.
    """

    def __init__(self, rules: Dict[str, StateTaxRule], tax_year: Optional[int] = None):
        self.rules = dict(rules)
        self.tax_year = tax_year
        self._slugs = {}
        for key, rule in self.rules.items():
            self._slugs[key.lower()] = key
            self._slugs[_slugify(rule.name)] = key
            self._slugs[_slugify(rule.name).replace("-", "")] = key

    @classmethod
    def load(cls, ref_path: Optional[str] = None) -> "StateDetails":
        with open(ref_path or DEFAULT_REFERENCE_PATH, 'r') as f:
            data = json.load(f)
        return cls(parse_state_rules(data), data.get("taxYear"))

    def states(self) -> List[Tuple[str, str]]:
        """Return (key, name) pairs sorted by state name."""
        return sorted(((k, r.name) for k, r in self.rules.items()), key=lambda kv: kv[1])

    def get_rule(self, state: str) -> StateTaxRule:
        key = str(state).strip().upper()
        if key not in self.rules:
            raise InvalidKeyError(f"Unknown state '{state}'. Known states: {sorted(self.rules)}")
        return self.rules[key]

    def state_from_slug(self, slug: str) -> str:
        """Resolve a URL slug such as 'new-york' or 'ny' to a state key."""
        key = self._slugs.get(slug.strip().lower())
        if key is None:
            raise InvalidKeyError(f"Unknown state slug '{slug}'")
        return key

    def parse_pair(self, pair: str) -> Tuple[str, str]:
        """Resolve a comparison slug like 'illinois-vs-florida' to (state_a, state_b)."""
        parts = pair.strip().lower().split("-vs-")
        if len(parts) != 2 or not all(parts):
            raise InvalidKeyError(f"Comparison '{pair}' must look like '<state>-vs-<state>'")
        return self.state_from_slug(parts[0]), self.state_from_slug(parts[1])

    def taxable_income(self, state: str, filing_status: FilingStatus, gross_income: float) -> float:
        """Gross income less the state standard deduction, floored at 0."""
        rule = self.get_rule(state)
        return max(0.0, gross_income - rule.income_tax.standard_deduction(filing_status))

    def base_income_tax(self, state: str, filing_status: FilingStatus, taxable_income: float) -> float:
        income_tax = self.get_rule(state).income_tax
        income = max(0.0, taxable_income)
        if isinstance(income_tax, ProgressiveIncomeTax):
            return compute_bracket_tax(income, income_tax.brackets(filing_status))
        if isinstance(income_tax, FlatIncomeTax):
            return income * income_tax.rate
        return 0.0

    def surtax(self, state: str, taxable_income: float) -> float:
        """Additional tax above each surtax threshold, independent of brackets."""
        return sum(
            max(0.0, taxable_income - s.threshold) * s.rate
            for s in self.get_rule(state).income_tax.surtaxes
        )

    def property_tax(self, state: str, home_value: float) -> float:
        return max(0.0, home_value) * self.get_rule(state).property_tax_rate

    def estimate(self, state: str, filing_status: FilingStatus, gross_income: float,
                 home_value: float) -> StateTaxResult:
        """Estimate income tax, property tax and their total for one state."""
        rule = self.get_rule(state)
        filing_status = FilingStatus.parse(filing_status)
        taxable = self.taxable_income(rule.key, filing_status, gross_income)
        return StateTaxResult(
            state=rule.key,
            state_name=rule.name,
            filing_status=filing_status,
            gross_income=gross_income,
            home_value=home_value,
            standard_deduction=rule.income_tax.standard_deduction(filing_status),
            taxable_income=taxable,
            base_income_tax=self.base_income_tax(rule.key, filing_status, taxable),
            surtax=self.surtax(rule.key, taxable),
            property_tax=self.property_tax(rule.key, home_value),
        )

    def compare(self, state_a: str, state_b: str, filing_status: FilingStatus,
                gross_income: float, home_value: float) -> StateComparison:
        return StateComparison(
            state_a=self.estimate(state_a, filing_status, gross_income, home_value),
            state_b=self.estimate(state_b, filing_status, gross_income, home_value),
        )
