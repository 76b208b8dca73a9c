"""Investment balance calculator.

Simulates monthly compounding of contributions at a fixed annual return, and
the drawdown of a balance by a fixed monthly withdrawal.
"""

import math
from typing import List, Optional, Sequence

from model.ProjectionData import DrawdownResult, LifetimeProjection, ProjectionPoint


DEFAULT_ANNUAL_RETURN = 0.10


def monthly_rate_from_annual(annual_rate: float) -> float:
    """Monthly rate that compounds to annual_rate over twelve months."""
    return (1 + annual_rate) ** (1 / 12) - 1


def _point(start_year: int, month: int, balance: float, principal: float) -> ProjectionPoint:
    return ProjectionPoint(
        year=start_year + math.ceil(month / 12),
        month=month,
        balance=balance,
        principal_contributed=principal,
        interest_accrued=max(0.0, balance - principal),
    )


class InvestmentCalculator:
    """Calculator for invested balances over time.

    Growth uses the true monthly equivalent of the annual return, not
    annual_rate / 12. Points are emitted at the start, at every twelfth month,
    and at the final month when it does not fall on a year boundary.
    """

    def __init__(self, annual_rate: float = DEFAULT_ANNUAL_RETURN):
        """Initialize the investment calculator.

        Args:
            annual_rate: Expected annual return, e.g. 0.10 for 10%
        """
        self.annual_rate = annual_rate
        self.monthly_rate = monthly_rate_from_annual(annual_rate)

    def project_accumulation(self, monthly_contributions: Sequence[float], start_year: int) -> List[ProjectionPoint]:
        """Grow a zero balance while depositing one contribution per month.

        Each month the existing balance grows first, then that month's
        contribution is added.

        Args:
            monthly_contributions: Contribution for each month, in order
            start_year: Calendar year of the initial "now" point

        Returns:
            List of ProjectionPoints ordered by year
        """
        balance = 0.0
        principal = 0.0
        points = [_point(start_year, 0, balance, principal)]

        month = 0
        for contribution in monthly_contributions:
            month += 1
            balance = balance * (1 + self.monthly_rate) + contribution
            principal += contribution
            if month % 12 == 0:
                points.append(_point(start_year, month, balance, principal))

        if month % 12 != 0:
            points.append(_point(start_year, month, balance, principal))
        return points

    def project_annual_contributions(self, annual_contributions: Sequence[float],
                                     start_year: int) -> List[ProjectionPoint]:
        """Spread each annual amount evenly over its twelve months and accumulate."""
        monthly = [amount / 12 for amount in annual_contributions for _ in range(12)]
        return self.project_accumulation(monthly, start_year)

    def project_drawdown(self, starting_balance: float, monthly_withdrawal: float, max_months: int,
                         start_year: int, principal: Optional[float] = None) -> DrawdownResult:
        """Withdraw a fixed amount each month until the balance runs out or the horizon ends.

        Each month the balance grows first, then the withdrawal is taken; the
        balance never goes below zero. Reaching zero ends the projection early.

        Args:
            starting_balance: Balance at the start of the drawdown
            monthly_withdrawal: Amount withdrawn each month
            max_months: Horizon in months
            start_year: Calendar year the drawdown begins
            principal: Principal carried into the points; defaults to starting_balance

        Returns:
            DrawdownResult; months_sustained counts months where the full
            withdrawal was paid
        """
        balance = max(0.0, starting_balance)
        principal = balance if principal is None else principal
        points = [_point(start_year, 0, balance, principal)]

        month = 0
        months_sustained = 0
        total_withdrawn = 0.0
        while month < max_months and balance > 0:
            month += 1
            balance = balance * (1 + self.monthly_rate)
            payment = min(balance, monthly_withdrawal)
            balance = max(0.0, balance - monthly_withdrawal)
            total_withdrawn += payment
            if payment >= monthly_withdrawal:
                months_sustained += 1
            if month % 12 == 0:
                points.append(_point(start_year, month, balance, principal))

        if points[-1].month != month:
            points.append(_point(start_year, month, balance, principal))

        return DrawdownResult(
            points=points,
            months_sustained=months_sustained,
            max_months=max_months,
            ending_balance=balance,
            total_withdrawn=total_withdrawn,
        )

    def project_lifetime(self, annual_contributions: Sequence[float], monthly_withdrawal: float,
                         horizon_months: int, start_year: int) -> LifetimeProjection:
        """Accumulate annual contributions, then draw the result down.

        The drawdown begins where the accumulation ends and never returns to
        accumulating.
        """
        accumulation = self.project_annual_contributions(annual_contributions, start_year)
        end = accumulation[-1]
        drawdown = self.project_drawdown(
            starting_balance=end.balance,
            monthly_withdrawal=monthly_withdrawal,
            max_months=horizon_months,
            start_year=end.year,
            principal=end.principal_contributed,
        )
        return LifetimeProjection(accumulation=accumulation, drawdown=drawdown)
