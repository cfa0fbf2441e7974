"""
Buy vs. rent decision engine.

Projects the cost of buying a property with a mortgage against renting and
investing the difference, finds the year buying pulls ahead, and turns
affordability, price-to-rent and break-even signals into a recommendation.
"""

from .exceptions import BuyVsRentError, InvalidInputError
from .schemas import (
    AnalysisWindow,
    BuyVsRentResult,
    HouseholdAssumptions,
    InvestmentAssumptions,
    LoanTerms,
    OwnershipCostAssumptions,
    RecommendationReason,
    RecommendationResult,
    RentAssumptions,
    Verdict,
    YearlyComparisonRow,
)
from .model import compute_buy_vs_rent

__all__ = [
    "AnalysisWindow",
    "BuyVsRentError",
    "BuyVsRentResult",
    "HouseholdAssumptions",
    "InvalidInputError",
    "InvestmentAssumptions",
    "LoanTerms",
    "OwnershipCostAssumptions",
    "RecommendationReason",
    "RecommendationResult",
    "RentAssumptions",
    "Verdict",
    "YearlyComparisonRow",
    "compute_buy_vs_rent",
]
