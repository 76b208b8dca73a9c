"""Request inputs and their boundary validation.

Requests arrive as camelCase dictionaries (scenario spec.json sections or MCP
tool arguments). Values are validated and clamped here so the calculators can
assume sane input.
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from model.FilingStatus import FilingStatus
from model.errors import InvalidInputError, InvalidKeyError

MIN_YEAR = 1900
MAX_YEAR = 2100
MIN_YEARS = 1
MAX_YEARS = 50

DEFAULT_INCOME = 100_000.0
DEFAULT_HOME_VALUE = 450_000.0
DEFAULT_STATE_A = "IL"
DEFAULT_STATE_B = "FL"
DEFAULT_YEARS_INVESTED = 40
DEFAULT_YEARS_WORKED = 35
DEFAULT_ANNUAL_RETURN = 0.10


def _number(data: dict, key: str, default: Optional[float] = None) -> float:
    value = data.get(key, default)
    if value is None:
        raise InvalidInputError(f"'{key}' is required")
    if isinstance(value, bool):
        raise InvalidInputError(f"'{key}' must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InvalidInputError(f"'{key}' must be a number, got {value!r}")
    if not math.isfinite(number):
        raise InvalidInputError(f"'{key}' must be finite, got {value!r}")
    return number


def money(data: dict, key: str, default: Optional[float] = None) -> float:
    """Read a non-negative dollar amount."""
    amount = _number(data, key, default)
    if amount < 0:
        raise InvalidInputError(f"'{key}' must be >= 0, got {amount}")
    return amount


def clamped_int(data: dict, key: str, low: int, high: int, default: Optional[int] = None) -> int:
    """Read a whole number, floored and clamped to [low, high]."""
    value = math.floor(_number(data, key, default))
    return max(low, min(high, value))


def annual_return(data: dict, key: str = "annualReturn") -> float:
    rate = _number(data, key, DEFAULT_ANNUAL_RETURN)
    if rate <= -1:
        raise InvalidInputError(f"'{key}' must be greater than -1, got {rate}")
    return rate


def state_key(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise InvalidKeyError(f"State key must be a non-empty string, got {value!r}")
    return value.strip().upper()


@dataclass(frozen=True)
class StateCompareInput:
    income: float
    home_value: float
    filing_status: FilingStatus
    state_a: str
    state_b: str
    years_invested: int = DEFAULT_YEARS_INVESTED
    annual_return: float = DEFAULT_ANNUAL_RETURN

    @classmethod
    def from_dict(cls, data: dict) -> "StateCompareInput":
        return cls(
            income=money(data, 'income', DEFAULT_INCOME),
            home_value=money(data, 'homeValue', DEFAULT_HOME_VALUE),
            filing_status=FilingStatus.parse(data.get('filingStatus', FilingStatus.SINGLE.value)),
            state_a=state_key(data.get('stateA', DEFAULT_STATE_A)),
            state_b=state_key(data.get('stateB', DEFAULT_STATE_B)),
            years_invested=clamped_int(data, 'yearsInvested', MIN_YEARS, MAX_YEARS, DEFAULT_YEARS_INVESTED),
            annual_return=annual_return(data),
        )


@dataclass(frozen=True)
class WorkHistory:
    """A constant-income working career. Recomputed per request, never stored."""
    income: float
    start_year: int
    years_worked: int
    birth_year: int
    annual_return: float = DEFAULT_ANNUAL_RETURN

    @property
    def last_year(self) -> int:
        return self.start_year + self.years_worked - 1

    @classmethod
    def from_dict(cls, data: dict) -> "WorkHistory":
        years_worked = clamped_int(data, 'yearsWorked', MIN_YEARS, MAX_YEARS, DEFAULT_YEARS_WORKED)
        default_start = date.today().year - years_worked
        return cls(
            income=money(data, 'income', DEFAULT_INCOME),
            start_year=clamped_int(data, 'startYear', MIN_YEAR, MAX_YEAR, default_start),
            years_worked=years_worked,
            birth_year=clamped_int(data, 'birthYear', MIN_YEAR, MAX_YEAR),
            annual_return=annual_return(data),
        )
