"""Buy / rent / consider decision over affordability, market and break-even signals"""

from __future__ import annotations

from .mortgage import DTI_LIMIT_PERCENT
from .schemas import RecommendationReason, RecommendationResult, Verdict

PRICE_TO_RENT_LIMIT = 25.0
QUICK_BREAK_EVEN_YEARS = 7
COMFORTABLE_DTI_PERCENT = 30.0


def debt_to_income_ratio(monthly_payment: float, monthly_income: float) -> float:
    return monthly_payment / monthly_income * 100


def price_to_rent_ratio(property_price: float, monthly_rent: float) -> float:
    return property_price / (monthly_rent * 12)


def gross_rental_yield(property_price: float, monthly_rent: float) -> float:
    return monthly_rent * 12 / property_price * 100


def debt_to_income_band(dti_pct: float) -> str:
    if dti_pct <= COMFORTABLE_DTI_PERCENT:
        return "comfortable"
    if dti_pct <= DTI_LIMIT_PERCENT:
        return "stretched"
    return "exceeds"


def price_to_rent_band(ratio: float) -> str:
    """
    Market-richness heuristic:
    - below 15: prices are cheap relative to rent, favours buying
    - 15 to 20: borderline
    - 20 and up: rent is the cheaper way to live there
    """
    if ratio < 15:
        return "buy"
    if ratio < 20:
        return "consider"
    return "rent"


def determine_verdict(
    dti_pct: float,
    ratio: float,
    net_position_difference: float,
    break_even_year: int,
) -> tuple[Verdict, RecommendationReason]:
    """
    First matching rule wins:
    1. DTI over 40%            -> rent (unaffordable)
    2. Price-to-rent over 25   -> rent (overpriced)
    3. Buying ahead, break-even within 7 years -> buy
    4. Buying ahead, slower break-even or none in the series -> consider
    5. Otherwise               -> rent
    """
    if dti_pct > DTI_LIMIT_PERCENT:
        return Verdict.RENT, RecommendationReason.DTI_EXCEEDS
    if ratio > PRICE_TO_RENT_LIMIT:
        return Verdict.RENT, RecommendationReason.PRICE_TO_RENT_HIGH
    if net_position_difference > 0 and 1 <= break_even_year <= QUICK_BREAK_EVEN_YEARS:
        return Verdict.BUY, RecommendationReason.BUY_BETTER_SHORT
    if net_position_difference > 0:
        return Verdict.CONSIDER, RecommendationReason.BUY_BETTER_LONG
    return Verdict.RENT, RecommendationReason.RENT_BETTER


def recommend(
    monthly_payment: float,
    monthly_income: float,
    property_price: float,
    monthly_rent: float,
    net_position_difference: float,
    break_even_year: int,
) -> RecommendationResult:
    dti = debt_to_income_ratio(monthly_payment, monthly_income)
    ratio = price_to_rent_ratio(property_price, monthly_rent)
    verdict, reason = determine_verdict(
        dti, ratio, net_position_difference, break_even_year
    )
    return RecommendationResult(
        verdict=verdict,
        reason=reason,
        break_even_year=break_even_year,
        net_position_difference=net_position_difference,
        debt_to_income_ratio_percent=dti,
        price_to_rent_ratio=ratio,
        is_affordable=dti <= DTI_LIMIT_PERCENT,
        debt_to_income_band=debt_to_income_band(dti),
        price_to_rent_band=price_to_rent_band(ratio),
    )
