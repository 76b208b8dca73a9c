"""Progressive (marginal-rate) bracket evaluation.

Used for state income tax schedules and for the Social Security bend-point
formula, which has the same shape: each rate applies only to the slice of the
amount between the previous bound and its own bound.
"""

import math
from typing import Sequence

from model.StateTaxRule import TaxBracket


def compute_bracket_tax(amount: float, brackets: Sequence[TaxBracket]) -> float:
    """Return the tax owed on amount under an ordered bracket schedule.

    Brackets must be ordered by ascending upper_bound with the last one
    unbounded. Negative amounts are treated as 0, so the result is never
    negative.
    """
    income = max(0.0, amount)
    if income == 0:
        return 0.0

    tax = 0.0
    previous_bound = 0.0
    for bracket in brackets:
        if income <= previous_bound:
            break
        amount_in_bracket = min(income, bracket.upper_bound) - previous_bound
        if amount_in_bracket > 0:
            tax += amount_in_bracket * bracket.rate
        previous_bound = bracket.upper_bound
    return tax


def marginal_rate(amount: float, brackets: Sequence[TaxBracket]) -> float:
    """Return the rate applied to the next dollar above amount."""
    income = max(0.0, amount)
    for bracket in brackets:
        if income < bracket.upper_bound:
            return bracket.rate
    return brackets[-1].rate if brackets else 0.0


def validate_brackets(brackets: Sequence[TaxBracket]) -> None:
    """Raise ValueError unless bounds strictly increase and the last is unbounded."""
    if not brackets:
        raise ValueError("Bracket schedule must contain at least one bracket")
    previous = 0.0
    for i, bracket in enumerate(brackets):
        if bracket.upper_bound <= previous:
            raise ValueError(
                f"Bracket bounds must strictly increase; bracket {i} has upper bound "
                f"{bracket.upper_bound} after {previous}"
            )
        if bracket.rate < 0:
            raise ValueError(f"Bracket {i} has negative rate {bracket.rate}")
        previous = bracket.upper_bound
    if not math.isinf(brackets[-1].upper_bound):
        raise ValueError("The last bracket must be unbounded")
