"""Pytest configuration for the true-tax-cost test suite."""

import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../src')))

from tax.SocialSecurityDetails import SocialSecurityDetails

# Configure pytest-asyncio to use auto mode so all async tests are automatically run
pytest_plugins = ('pytest_asyncio',)


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "asyncio: mark test as an async test"
    )


def synthetic_social_security_data() -> dict:
    """Small OASDI table set with round numbers and deliberate gaps.

    Rates are sparse (2011 and 2012 fall in the 4.2% gap), the AWI table only
    has 2000/2010/2020, and 2024 has no COLA.
    """
    return {
        "snapshotYear": 2024,
        "wageBases": [
            {"year": 2000, "maximumTaxedIncome": 100000},
            {"year": 2010, "maximumTaxedIncome": 120000},
        ],
        "rates": [
            {"year": 2000, "employeePortion": 0.062, "employerPortion": 0.062},
            {"year": 2011, "employeePortion": 0.042, "employerPortion": 0.062},
            {"year": 2013, "employeePortion": 0.062, "employerPortion": 0.062},
        ],
        "averageWageIndex": [
            {"year": 2000, "index": 30000},
            {"year": 2010, "index": 40000},
            {"year": 2020, "index": 60000},
        ],
        "bendPoints": [
            {"eligibilityYear": 2022, "first": 1000, "second": 6000},
        ],
        "costOfLivingAdjustments": [
            {"year": 2023, "adjustment": 0.05},
            {"year": 2025, "adjustment": 0.02},
        ],
        "benefitFormula": {
            "replacementRates": [0.90, 0.32, 0.15],
            "computationYears": 35,
            "indexingAge": 60,
            "eligibilityAge": 62,
            "claimAge": 67,
        },
        "remainingLifeExpectancyAt67": {"male": 15.0, "female": 17.0},
    }


@pytest.fixture
def synthetic_social_security() -> SocialSecurityDetails:
    return SocialSecurityDetails(synthetic_social_security_data())


@pytest.fixture(scope="session")
def reference_social_security() -> SocialSecurityDetails:
    return SocialSecurityDetails.load()
