import os
import sys
from datetime import date
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from model.FilingStatus import FilingStatus
from model.errors import InvalidInputError, InvalidKeyError
from model.inputs import StateCompareInput, WorkHistory


def test_state_compare_defaults():
    request = StateCompareInput.from_dict({})
    assert request.income == 100000
    assert request.home_value == 450000
    assert request.filing_status is FilingStatus.SINGLE
    assert (request.state_a, request.state_b) == ("IL", "FL")
    assert request.years_invested == 40
    assert request.annual_return == 0.10


def test_state_keys_are_uppercased():
    request = StateCompareInput.from_dict({"stateA": " ca ", "stateB": "nv"})
    assert (request.state_a, request.state_b) == ("CA", "NV")


@pytest.mark.parametrize("value", [-1, float("nan"), float("inf"), "lots", True])
def test_invalid_income_rejected(value):
    with pytest.raises(InvalidInputError):
        StateCompareInput.from_dict({"income": value})


def test_negative_home_value_rejected():
    with pytest.raises(InvalidInputError, match="homeValue"):
        StateCompareInput.from_dict({"homeValue": -5})


def test_numeric_strings_accepted():
    assert StateCompareInput.from_dict({"income": "125000.50"}).income == 125000.50


def test_unknown_filing_status_rejected():
    with pytest.raises(InvalidKeyError):
        StateCompareInput.from_dict({"filingStatus": "WIDOWED"})


def test_filing_status_names_accepted():
    request = StateCompareInput.from_dict({"filingStatus": "married_filing_jointly"})
    assert request.filing_status is FilingStatus.MARRIED_FILING_JOINTLY


def test_empty_state_key_rejected():
    with pytest.raises(InvalidKeyError):
        StateCompareInput.from_dict({"stateA": ""})


def test_years_invested_clamped():
    assert StateCompareInput.from_dict({"yearsInvested": 0}).years_invested == 1
    assert StateCompareInput.from_dict({"yearsInvested": 75}).years_invested == 50
    assert StateCompareInput.from_dict({"yearsInvested": 12.9}).years_invested == 12


def test_annual_return_must_exceed_minus_one():
    with pytest.raises(InvalidInputError):
        StateCompareInput.from_dict({"annualReturn": -1})
    assert StateCompareInput.from_dict({"annualReturn": -0.5}).annual_return == -0.5


def test_work_history_clamps_years():
    history = WorkHistory.from_dict({"income": 50000, "startYear": 1800, "yearsWorked": 99, "birthYear": 2500})
    assert history.start_year == 1900
    assert history.years_worked == 50
    assert history.birth_year == 2100
    assert history.last_year == 1949


def test_work_history_default_start_year():
    history = WorkHistory.from_dict({"income": 50000, "yearsWorked": 10, "birthYear": 1980})
    assert history.start_year == date.today().year - 10


def test_work_history_requires_birth_year():
    with pytest.raises(InvalidInputError, match="birthYear"):
        WorkHistory.from_dict({"income": 50000})
