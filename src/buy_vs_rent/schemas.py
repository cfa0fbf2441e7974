from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Optional, Tuple

from .exceptions import InvalidInputError

MAX_SERIES_YEARS = 30
MAX_ANALYSIS_YEARS = 100


def _require_finite(name: str, value: float) -> None:
    if not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidInputError(f"{name} must be a finite number", field=name)


def _require_positive(name: str, value: float) -> None:
    _require_finite(name, value)
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive", field=name)


def _require_positive_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidInputError(f"{name} must be an integer", field=name)
    if value <= 0:
        raise InvalidInputError(f"{name} must be positive", field=name)


def _require_range(name: str, value: float, low: float, high: float) -> None:
    _require_finite(name, value)
    if not low <= value <= high:
        raise InvalidInputError(f"{name} must be between {low} and {high}", field=name)


def _require_growth_rate(name: str, value: float) -> None:
    _require_finite(name, value)
    if not -100 < value <= 100:
        raise InvalidInputError(
            f"{name} must be greater than -100% and at most 100%", field=name
        )


@dataclass(frozen=True)
class LoanTerms:
    """Purchase price and mortgage terms."""

    property_price: float
    down_payment_percent: float = 30.0
    loan_term_years: int = 20
    annual_interest_rate_percent: float = 8.5  # e.g., 8.5 for 8.5%

    @property
    def down_payment(self) -> float:
        return self.property_price * (self.down_payment_percent / 100)

    @property
    def loan_amount(self) -> float:
        return self.property_price - self.down_payment

    @property
    def number_of_payments(self) -> int:
        return self.loan_term_years * 12

    def validate(self) -> None:
        _require_positive("property_price", self.property_price)
        _require_range("down_payment_percent", self.down_payment_percent, 0, 100)
        _require_positive_int("loan_term_years", self.loan_term_years)
        _require_range(
            "annual_interest_rate_percent", self.annual_interest_rate_percent, 0, 100
        )


@dataclass(frozen=True)
class OwnershipCostAssumptions:
    """Appreciation and the carrying costs of owning, as fractions of price."""

    property_appreciation_percent: float = 5.0  # annual
    transaction_cost_rate: float = 0.035  # one-time, at purchase
    annual_maintenance_rate: float = 0.01
    annual_property_tax_rate: float = 0.0003

    def validate(self) -> None:
        _require_growth_rate(
            "property_appreciation_percent", self.property_appreciation_percent
        )
        _require_range("transaction_cost_rate", self.transaction_cost_rate, 0, 1)
        _require_range("annual_maintenance_rate", self.annual_maintenance_rate, 0, 1)
        _require_range("annual_property_tax_rate", self.annual_property_tax_rate, 0, 1)


@dataclass(frozen=True)
class RentAssumptions:
    monthly_rent: float
    rent_inflation_percent: float = 5.0  # annual, applied at year boundaries

    def validate(self) -> None:
        _require_positive("monthly_rent", self.monthly_rent)
        _require_growth_rate("rent_inflation_percent", self.rent_inflation_percent)


@dataclass(frozen=True)
class InvestmentAssumptions:
    annual_investment_return_percent: float = 10.0

    def validate(self) -> None:
        _require_growth_rate(
            "annual_investment_return_percent", self.annual_investment_return_percent
        )


@dataclass(frozen=True)
class HouseholdAssumptions:
    monthly_income: float

    def validate(self) -> None:
        _require_positive("monthly_income", self.monthly_income)


@dataclass(frozen=True)
class AnalysisWindow:
    analysis_years: int = 20

    @property
    def series_years(self) -> int:
        return min(self.analysis_years, MAX_SERIES_YEARS)

    def validate(self) -> None:
        _require_positive_int("analysis_years", self.analysis_years)
        if self.analysis_years > MAX_ANALYSIS_YEARS:
            raise InvalidInputError(
                f"analysis_years must be at most {MAX_ANALYSIS_YEARS}",
                field="analysis_years",
            )


class Verdict(str, Enum):
    BUY = "buy"
    RENT = "rent"
    CONSIDER = "consider"


class RecommendationReason(str, Enum):
    DTI_EXCEEDS = "dti_exceeds"
    PRICE_TO_RENT_HIGH = "price_to_rent_high"
    BUY_BETTER_SHORT = "buy_better_short"
    BUY_BETTER_LONG = "buy_better_long"
    RENT_BETTER = "rent_better"


@dataclass(frozen=True)
class YearlyComparisonRow:
    year: int
    property_value: float
    investment_value: float
    buy_net_position: float
    rent_net_position: float
    buy_cost: float  # cumulative cash outlay for the buy path
    rent_cost: float  # cumulative rent paid


@dataclass(frozen=True)
class YearlySimulation:
    rows: Tuple[YearlyComparisonRow, ...]
    break_even_year: int = -1


@dataclass(frozen=True)
class BuyProjection:
    """Position of the buying path at the end of the analysis window."""

    monthly_payment: float
    monthly_buy_cost: float
    annual_maintenance: float
    annual_property_tax: float
    transaction_cost: float
    future_property_value: float
    property_gain: float
    mortgage_payments_in_period: int
    mortgage_paid_in_period: float
    remaining_loan_balance: float
    equity_built: float
    total_maintenance_cost: float
    total_property_tax: float
    total_buy_cost: float
    net_buy_position: float
    total_mortgage_paid: float
    total_interest_paid: float


@dataclass(frozen=True)
class RentProjection:
    total_rent_cost: float
    final_year_monthly_rent: float
    rent_by_year: Tuple[float, ...] = ()


@dataclass(frozen=True)
class InvestmentProjection:
    """The renter invests the buyer's upfront cash plus any monthly surplus."""

    monthly_savings: float
    down_payment_invested: float
    monthly_savings_invested: float
    total_investment_value: float
    investment_gain: float
    net_rent_position: float


@dataclass(frozen=True)
class RecommendationResult:
    verdict: Verdict
    reason: RecommendationReason
    break_even_year: int
    net_position_difference: float
    debt_to_income_ratio_percent: float
    price_to_rent_ratio: float
    is_affordable: bool
    debt_to_income_band: str
    price_to_rent_band: str


@dataclass(frozen=True)
class BuyVsRentResult:
    loan_amount: float
    down_payment: float
    monthly_mortgage: float
    total_buy_cost: float
    future_property_value: float
    net_buy_position: float
    total_rent_cost: float
    total_investment_value: float
    net_rent_position: float
    buy_vs_rent_difference: float
    break_even_year: int
    debt_to_income_ratio: float
    price_to_rent_ratio: float
    gross_rental_yield: float
    max_affordable_price: Optional[float]
    recommendation: RecommendationResult
    buy: BuyProjection
    rent: RentProjection
    investment: InvestmentProjection
    yearly_comparison: Tuple[YearlyComparisonRow, ...] = field(default_factory=tuple)

    @property
    def better_option(self) -> str:
        if self.buy_vs_rent_difference > 0:
            return "buying"
        if self.buy_vs_rent_difference < 0:
            return "renting"
        return "tie"
