"""True Tax Cost Tools for MCP Server.

This module provides the tool implementations that wrap the state tax and
Social Security calculators and expose their results through MCP as plain
JSON-ready dictionaries.
"""

import os
import sys
import json
from datetime import date
from typing import Dict, List, Optional

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from tax.StateDetails import StateDetails
from tax.SocialSecurityDetails import SocialSecurityDetails
from calc.benefit_calculator import BenefitCalculator
from calc.investment_calculator import InvestmentCalculator
from calc.social_security_calculator import SocialSecurityCalculator
from calc.tax_compare_calculator import TaxCompareCalculator
from model.FilingStatus import FilingStatus
from model.ProjectionData import DrawdownResult, ProjectionPoint
from model.SocialSecurityResults import BenefitEstimate, ContributionSummary, ContributionYear, SocialSecurityResult
from model.TaxResults import StateTaxResult, TaxComparisonResult
from model.errors import InvalidInputError
from model.inputs import (
    MAX_YEAR, MAX_YEARS, MIN_YEAR, MIN_YEARS, StateCompareInput, WorkHistory,
    annual_return, clamped_int, money, state_key,
)


def _points(points: List[ProjectionPoint]) -> List[dict]:
    return [
        {
            "year": p.year,
            "month": p.month,
            "balance": p.balance,
            "principal_contributed": p.principal_contributed,
            "interest_accrued": p.interest_accrued,
        }
        for p in points
    ]


def _state_result(result: StateTaxResult) -> dict:
    return {
        "state": result.state,
        "state_name": result.state_name,
        "filing_status": result.filing_status.value,
        "gross_income": result.gross_income,
        "standard_deduction": result.standard_deduction,
        "taxable_income": result.taxable_income,
        "income_tax": result.income_tax,
        "surtax": result.surtax,
        "property_tax": result.property_tax,
        "total": result.total,
    }


def _comparison(result: TaxComparisonResult) -> dict:
    comparison = result.comparison
    return {
        "state_a": _state_result(comparison.state_a),
        "state_b": _state_result(comparison.state_b),
        "delta": comparison.delta,
        "annual_difference": comparison.annual_difference,
        "moving_saves_money": comparison.moving_saves_money,
        "years_invested": result.years_invested,
        "annual_return": result.annual_return,
        "invested_difference": result.invested_difference,
        "projection": _points(result.projection),
    }


def _contribution_year(year: ContributionYear) -> dict:
    return {
        "year": year.year,
        "wage_base": year.wage_base,
        "taxable_wages": year.taxable_wages,
        "employee": year.employee,
        "employer": year.employer,
        "total": year.total,
    }


def _contributions(summary: ContributionSummary) -> dict:
    snapshot = summary.snapshot
    return {
        "first_year": summary.first_year,
        "last_year": summary.last_year,
        "snapshot": _contribution_year(snapshot) if snapshot else None,
        "total_employee": summary.total_employee,
        "total_employer": summary.total_employer,
        "total": summary.total,
        "years": [_contribution_year(y) for y in summary.years],
    }


def _benefit(benefit: BenefitEstimate) -> dict:
    return {
        "birth_year": benefit.birth_year,
        "eligibility_year": benefit.eligibility_year,
        "claim_year": benefit.claim_year,
        "years_counted": benefit.years_counted,
        "aime": benefit.aime,
        "bend_points": list(benefit.bend_points),
        "pia_before_cola": benefit.pia_before_cola,
        "cola_factor": benefit.cola_factor,
        "pia_monthly": benefit.pia_monthly,
        "annual_benefit": benefit.annual_benefit,
        "remaining_years_at_claim": benefit.remaining_years_at_claim,
        "total_lifetime_estimate": benefit.total_lifetime_estimate,
    }


def _drawdown(drawdown: DrawdownResult) -> dict:
    return {
        "phase": drawdown.phase.value,
        "months_sustained": drawdown.months_sustained,
        "max_months": drawdown.max_months,
        "ending_balance": drawdown.ending_balance,
        "total_withdrawn": drawdown.total_withdrawn,
        "points": _points(drawdown.points),
    }


def _social_security(result: SocialSecurityResult) -> dict:
    projection = result.projection
    return {
        "contributions": _contributions(result.contributions),
        "benefit": _benefit(result.benefit),
        "coverage_note": result.coverage_note,
        "projection": {
            "annual_return": result.annual_return,
            "phase": projection.phase.value,
            "balance_at_retirement": projection.balance_at_retirement,
            "principal_contributed": projection.principal_contributed,
            "accumulation": _points(projection.accumulation),
            "drawdown": _drawdown(projection.drawdown) if projection.drawdown else None,
        },
    }


class CalculatorTools:
    """Tools that run the calculators directly on request arguments."""

    def __init__(self, base_path: str):
        """Load reference tables from base_path/reference.

        Args:
            base_path: Path to the project root directory
        """
        self.base_path = base_path
        reference_dir = os.path.join(base_path, 'reference')
        self.state_details = StateDetails.load(os.path.join(reference_dir, 'state-tax-rules.json'))
        self.social_security = SocialSecurityDetails.load(os.path.join(reference_dir, 'social-security.json'))
        self.benefit_calculator = BenefitCalculator(self.social_security)
        self.tax_compare_calculator = TaxCompareCalculator(self.state_details)
        self.social_security_calculator = SocialSecurityCalculator(self.benefit_calculator)

    def list_states(self) -> dict:
        return {
            "tax_year": self.state_details.tax_year,
            "states": [{"key": key, "name": name} for key, name in self.state_details.states()],
        }

    def estimate_state_tax(self, arguments: dict) -> dict:
        """Estimate income and property tax for one state."""
        result = self.state_details.estimate(
            state_key(arguments.get('state')),
            FilingStatus.parse(arguments.get('filingStatus', FilingStatus.SINGLE.value)),
            money(arguments, 'income'),
            money(arguments, 'homeValue', 0),
        )
        return _state_result(result)

    def compare_states(self, arguments: dict) -> dict:
        """Compare two states and project the invested yearly difference."""
        request = StateCompareInput.from_dict(arguments)
        result = self.tax_compare_calculator.compare(request, date.today().year)
        return _comparison(result)

    def estimate_contributions(self, arguments: dict) -> dict:
        years_worked = clamped_int(arguments, 'yearsWorked', MIN_YEARS, MAX_YEARS)
        summary = self.benefit_calculator.estimate_contributions(
            money(arguments, 'income'),
            clamped_int(arguments, 'startYear', MIN_YEAR, MAX_YEAR),
            years_worked,
        )
        result = _contributions(summary)
        result["coverage_note"] = self.social_security.coverage_note(summary.first_year, summary.last_year)
        return result

    def estimate_benefit(self, arguments: dict) -> dict:
        history = WorkHistory.from_dict(arguments)
        benefit = self.benefit_calculator.estimate_benefit(
            history.income, history.start_year, history.years_worked, history.birth_year)
        return _benefit(benefit)

    def project_investment(self, arguments: dict) -> dict:
        """Grow a fixed monthly contribution for a number of months."""
        months = clamped_int(arguments, 'months', 0, MAX_YEARS * 12)
        monthly = money(arguments, 'monthlyContribution')
        start_year = clamped_int(arguments, 'startYear', MIN_YEAR, MAX_YEAR, date.today().year)
        calculator = InvestmentCalculator(annual_return(arguments))
        points = calculator.project_accumulation([monthly] * months, start_year)
        return {
            "ending_balance": points[-1].balance,
            "principal_contributed": points[-1].principal_contributed,
            "points": _points(points),
        }

    def project_drawdown(self, arguments: dict) -> dict:
        """Draw a balance down by a fixed monthly withdrawal."""
        months = clamped_int(arguments, 'months', 0, 100 * 12)
        start_year = clamped_int(arguments, 'startYear', MIN_YEAR, MAX_YEAR, date.today().year)
        calculator = InvestmentCalculator(annual_return(arguments))
        result = calculator.project_drawdown(
            starting_balance=money(arguments, 'startingBalance'),
            monthly_withdrawal=money(arguments, 'monthlyWithdrawal'),
            max_months=months,
            start_year=start_year,
        )
        return _drawdown(result)

    def social_security_projection(self, arguments: dict) -> dict:
        """Contributions, benefit and invested-instead projection for one work history."""
        history = WorkHistory.from_dict(arguments)
        result = self.social_security_calculator.calculate(history, date.today().year)
        return _social_security(result)


class MultiProgramTools:
    """Manager for named scenarios under input-parameters.

    Discovers all available programs and runs their stateComparison and
    socialSecurity sections against shared reference tables.
    """

    def __init__(self, base_path: str, default_program: Optional[str] = None):
        """Initialize and discover all available programs.

        Args:
            base_path: Path to the project root directory
            default_program: Default program to use when none specified
        """
        self.base_path = base_path
        self.calculators = CalculatorTools(base_path)
        self.programs: Dict[str, dict] = {}
        self.default_program = default_program
        self._discover_programs()

    def _discover_programs(self):
        """Discover and load all available programs."""
        input_params_path = os.path.join(self.base_path, 'input-parameters')

        if not os.path.exists(input_params_path):
            return

        for name in sorted(os.listdir(input_params_path)):
            spec_path = os.path.join(input_params_path, name, 'spec.json')
            if not os.path.exists(spec_path):
                continue
            try:
                with open(spec_path, 'r') as f:
                    self.programs[name] = json.load(f)
            except (OSError, ValueError) as e:
                # Log but don't fail on individual program errors
                print(f"Warning: Failed to load program '{name}': {e}", file=sys.stderr)

        if self.default_program is None and self.programs:
            self.default_program = next(iter(self.programs))

    def _get_program(self, program: Optional[str] = None) -> dict:
        program_name = program or self.default_program
        if program_name not in self.programs:
            available = list(self.programs.keys())
            raise ValueError(
                f"Program '{program_name}' not found. Available programs: {available}"
            )
        return self.programs[program_name]

    def list_programs(self) -> dict:
        """List all available programs."""
        programs_info = {}
        for name, spec in self.programs.items():
            comparison = spec.get('stateComparison')
            programs_info[name] = {
                "state_comparison": (
                    f"{comparison.get('stateA', 'IL')} vs {comparison.get('stateB', 'FL')}"
                    if comparison is not None else None
                ),
                "social_security": 'socialSecurity' in spec,
            }

        return {
            "available_programs": list(self.programs.keys()),
            "default_program": self.default_program,
            "programs_info": programs_info,
        }

    def reload_programs(self) -> dict:
        """Reload all programs from disk, refreshing the cache.

        Use this after adding, modifying, or removing program spec.json files
        to pick up changes without restarting the server.
        """
        old_programs = set(self.programs.keys())

        self.programs.clear()
        self.default_program = None
        self._discover_programs()

        new_programs = set(self.programs.keys())

        return {
            "status": "success",
            "message": f"Reloaded {len(self.programs)} programs",
            "programs_loaded": list(self.programs.keys()),
            "default_program": self.default_program,
            "changes": {
                "added": sorted(new_programs - old_programs),
                "removed": sorted(old_programs - new_programs),
                "reloaded": sorted(old_programs & new_programs),
            }
        }

    def run_program(self, program: Optional[str] = None) -> dict:
        """Run every section present in a program's spec.json."""
        spec = self._get_program(program)
        if 'stateComparison' not in spec and 'socialSecurity' not in spec:
            raise InvalidInputError(
                "Program must define a 'stateComparison' or 'socialSecurity' section")

        result = {"program": program or self.default_program}
        if 'stateComparison' in spec:
            result["state_comparison"] = self.calculators.compare_states(spec['stateComparison'])
        if 'socialSecurity' in spec:
            result["social_security"] = self.calculators.social_security_projection(spec['socialSecurity'])
        return result
