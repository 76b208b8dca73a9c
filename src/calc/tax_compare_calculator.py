"""State tax comparison with the yearly difference invested."""

from calc.investment_calculator import InvestmentCalculator
from model.TaxResults import TaxComparisonResult
from model.inputs import StateCompareInput
from tax.StateDetails import StateDetails


class TaxCompareCalculator:
    """Compares two states and projects what the yearly difference grows into.

    The absolute yearly difference is deposited in twelve equal monthly
    amounts for the requested number of years.
    """

    def __init__(self, state_details: StateDetails):
        self.state_details = state_details

    def compare(self, request: StateCompareInput, start_year: int) -> TaxComparisonResult:
        comparison = self.state_details.compare(
            request.state_a, request.state_b, request.filing_status,
            request.income, request.home_value,
        )
        investment = InvestmentCalculator(request.annual_return)
        monthly = comparison.annual_difference / 12
        projection = investment.project_accumulation([monthly] * (request.years_invested * 12), start_year)
        return TaxComparisonResult(
            comparison=comparison,
            years_invested=request.years_invested,
            annual_return=request.annual_return,
            projection=projection,
        )
