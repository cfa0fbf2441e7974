"""Pytest fixtures for testing"""

import pytest
from buy_vs_rent.schemas import (
    AnalysisWindow,
    HouseholdAssumptions,
    InvestmentAssumptions,
    LoanTerms,
    OwnershipCostAssumptions,
    RentAssumptions,
)


@pytest.fixture
def loan_terms() -> LoanTerms:
    """3 billion VND apartment, 30% down, 20 years at 8.5%"""
    return LoanTerms(
        property_price=3_000_000_000,
        down_payment_percent=30,
        loan_term_years=20,
        annual_interest_rate_percent=8.5,
    )


@pytest.fixture
def ownership() -> OwnershipCostAssumptions:
    return OwnershipCostAssumptions(property_appreciation_percent=5)


@pytest.fixture
def rent() -> RentAssumptions:
    return RentAssumptions(monthly_rent=15_000_000, rent_inflation_percent=5)


@pytest.fixture
def investment() -> InvestmentAssumptions:
    return InvestmentAssumptions(annual_investment_return_percent=10)


@pytest.fixture
def household() -> HouseholdAssumptions:
    return HouseholdAssumptions(monthly_income=50_000_000)


@pytest.fixture
def window() -> AnalysisWindow:
    return AnalysisWindow(analysis_years=20)


@pytest.fixture
def default_inputs(loan_terms, ownership, rent, investment, household, window) -> dict:
    """Keyword arguments for compute_buy_vs_rent with the calculator defaults"""
    return {
        "loan_terms": loan_terms,
        "ownership": ownership,
        "rent": rent,
        "investment": investment,
        "household": household,
        "window": window,
    }


@pytest.fixture
def paid_in_full_inputs() -> dict:
    """Cash purchase with no growth anywhere, so every figure is easy to check by hand"""
    return {
        "loan_terms": LoanTerms(
            property_price=1_000_000,
            down_payment_percent=100,
            loan_term_years=10,
            annual_interest_rate_percent=0,
        ),
        "ownership": OwnershipCostAssumptions(property_appreciation_percent=0),
        "rent": RentAssumptions(monthly_rent=20_000, rent_inflation_percent=0),
        "investment": InvestmentAssumptions(annual_investment_return_percent=0),
        "household": HouseholdAssumptions(monthly_income=100_000),
        "window": AnalysisWindow(analysis_years=10),
    }
