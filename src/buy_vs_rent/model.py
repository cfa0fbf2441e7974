from __future__ import annotations

import dataclasses
import logging
import math
from typing import Any, Iterator, Optional, Tuple

from .exceptions import InvalidInputError
from .mortgage import max_affordable_price, monthly_payment
from .projections import project_buy, project_investment, project_rent
from .recommendation import gross_rental_yield, recommend
from .schemas import (
    AnalysisWindow,
    BuyVsRentResult,
    HouseholdAssumptions,
    InvestmentAssumptions,
    LoanTerms,
    OwnershipCostAssumptions,
    RentAssumptions,
)
from .simulation import simulate_years

logger = logging.getLogger(__name__)


def compute_buy_vs_rent(
    loan_terms: LoanTerms,
    ownership: OwnershipCostAssumptions,
    rent: RentAssumptions,
    investment: InvestmentAssumptions,
    household: HouseholdAssumptions,
    window: Optional[AnalysisWindow] = None,
) -> BuyVsRentResult:
    """
    Compare buying the property against renting and investing the difference.

    All inputs are validated up front; an out-of-range value or a computation
    that overflows raises InvalidInputError and no partial result is returned.
    """
    window = window or AnalysisWindow()
    _validate(loan_terms, ownership, rent, investment, household, window)

    try:
        result = _compute(loan_terms, ownership, rent, investment, household, window)
    except (OverflowError, ZeroDivisionError) as exc:
        logger.warning("Computation overflowed", extra={"error": str(exc)})
        raise InvalidInputError(
            "inputs are too extreme to produce a finite result"
        ) from exc

    bad_field = _first_non_finite(result)
    if bad_field is not None:
        logger.warning("Non-finite result", extra={"field": bad_field})
        raise InvalidInputError(
            f"computation produced a non-finite value for {bad_field}", field=bad_field
        )
    return result


def _validate(*records: Any) -> None:
    for record in records:
        try:
            record.validate()
        except InvalidInputError as exc:
            logger.warning(
                "Rejected input", extra={"field": exc.field, "error": str(exc)}
            )
            raise


def _compute(
    loan_terms: LoanTerms,
    ownership: OwnershipCostAssumptions,
    rent: RentAssumptions,
    investment: InvestmentAssumptions,
    household: HouseholdAssumptions,
    window: AnalysisWindow,
) -> BuyVsRentResult:
    years = window.analysis_years
    payment = monthly_payment(
        loan_terms.loan_amount,
        loan_terms.annual_interest_rate_percent,
        loan_terms.loan_term_years,
    )
    logger.debug(
        "Mortgage payment computed",
        extra={"loan_amount": loan_terms.loan_amount, "monthly_payment": payment},
    )

    buy = project_buy(loan_terms, ownership, years, payment)
    renting = project_rent(rent.monthly_rent, rent.rent_inflation_percent, years)
    invested = project_investment(
        upfront_cash=loan_terms.down_payment + buy.transaction_cost,
        monthly_buy_cost=buy.monthly_buy_cost,
        monthly_rent=rent.monthly_rent,
        annual_return_pct=investment.annual_investment_return_percent,
        analysis_years=years,
        total_rent_cost=renting.total_rent_cost,
    )

    simulation = simulate_years(
        loan_terms,
        ownership,
        monthly_rent=rent.monthly_rent,
        rent_inflation_pct=rent.rent_inflation_percent,
        annual_return_pct=investment.annual_investment_return_percent,
        series_years=window.series_years,
        payment=payment,
        monthly_savings=invested.monthly_savings,
    )
    logger.debug(
        "Yearly series simulated",
        extra={
            "rows": len(simulation.rows),
            "break_even_year": simulation.break_even_year,
        },
    )

    difference = buy.net_buy_position - invested.net_rent_position
    recommendation = recommend(
        monthly_payment=payment,
        monthly_income=household.monthly_income,
        property_price=loan_terms.property_price,
        monthly_rent=rent.monthly_rent,
        net_position_difference=difference,
        break_even_year=simulation.break_even_year,
    )

    return BuyVsRentResult(
        loan_amount=loan_terms.loan_amount,
        down_payment=loan_terms.down_payment,
        monthly_mortgage=payment,
        total_buy_cost=buy.total_buy_cost,
        future_property_value=buy.future_property_value,
        net_buy_position=buy.net_buy_position,
        total_rent_cost=renting.total_rent_cost,
        total_investment_value=invested.total_investment_value,
        net_rent_position=invested.net_rent_position,
        buy_vs_rent_difference=difference,
        break_even_year=simulation.break_even_year,
        debt_to_income_ratio=recommendation.debt_to_income_ratio_percent,
        price_to_rent_ratio=recommendation.price_to_rent_ratio,
        gross_rental_yield=gross_rental_yield(
            loan_terms.property_price, rent.monthly_rent
        ),
        max_affordable_price=max_affordable_price(
            household.monthly_income,
            loan_terms.annual_interest_rate_percent,
            loan_terms.loan_term_years,
            loan_terms.down_payment_percent,
        ),
        recommendation=recommendation,
        buy=buy,
        rent=renting,
        investment=invested,
        yearly_comparison=simulation.rows,
    )


def _first_non_finite(result: BuyVsRentResult) -> Optional[str]:
    for name, value in _iter_numbers(result, ""):
        if not math.isfinite(value):
            return name
    return None


def _iter_numbers(value: Any, path: str) -> Iterator[Tuple[str, float]]:
    if dataclasses.is_dataclass(value):
        for f in dataclasses.fields(value):
            child = f"{path}.{f.name}" if path else f.name
            yield from _iter_numbers(getattr(value, f.name), child)
    elif isinstance(value, tuple):
        for index, item in enumerate(value):
            yield from _iter_numbers(item, f"{path}[{index}]")
    elif isinstance(value, float):
        yield path, value
