"""End-of-window projections for the buying, renting and investing paths."""

from __future__ import annotations

from .mortgage import compound_growth, monthly_rate, remaining_balance, total_interest
from .schemas import (
    BuyProjection,
    InvestmentProjection,
    LoanTerms,
    OwnershipCostAssumptions,
    RentProjection,
)


def project_buy(
    terms: LoanTerms,
    ownership: OwnershipCostAssumptions,
    analysis_years: int,
    payment: float,
) -> BuyProjection:
    price = terms.property_price
    n = terms.number_of_payments
    rate = monthly_rate(terms.annual_interest_rate_percent)

    transaction_cost = price * ownership.transaction_cost_rate
    annual_maintenance = price * ownership.annual_maintenance_rate
    annual_property_tax = price * ownership.annual_property_tax_rate

    future_value = price * (1 + ownership.property_appreciation_percent / 100) ** (
        analysis_years
    )

    payments_in_period = min(analysis_years * 12, n)
    mortgage_paid = payment * payments_in_period
    balance = 0.0
    if analysis_years * 12 < n:
        balance = remaining_balance(
            terms.loan_amount, rate, n, payments_in_period, payment
        )

    maintenance_total = annual_maintenance * analysis_years
    tax_total = annual_property_tax * analysis_years
    total_cost = (
        terms.down_payment
        + transaction_cost
        + mortgage_paid
        + maintenance_total
        + tax_total
    )

    return BuyProjection(
        monthly_payment=payment,
        monthly_buy_cost=payment + annual_maintenance / 12 + annual_property_tax / 12,
        annual_maintenance=annual_maintenance,
        annual_property_tax=annual_property_tax,
        transaction_cost=transaction_cost,
        future_property_value=future_value,
        property_gain=future_value - price,
        mortgage_payments_in_period=payments_in_period,
        mortgage_paid_in_period=mortgage_paid,
        remaining_loan_balance=balance,
        equity_built=future_value - balance,
        total_maintenance_cost=maintenance_total,
        total_property_tax=tax_total,
        total_buy_cost=total_cost,
        net_buy_position=future_value - balance - total_cost,
        total_mortgage_paid=payment * n,
        total_interest_paid=total_interest(terms.loan_amount, payment, n),
    )


def project_rent(
    monthly_rent: float, rent_inflation_pct: float, analysis_years: int
) -> RentProjection:
    # Rent steps up once a year, not monthly.
    growth = 1 + rent_inflation_pct / 100
    current_rent = monthly_rent
    total = 0.0
    by_year = []
    for _ in range(analysis_years):
        yearly_rent = current_rent * 12
        total += yearly_rent
        by_year.append(yearly_rent)
        current_rent *= growth

    return RentProjection(
        total_rent_cost=total,
        final_year_monthly_rent=monthly_rent * growth ** (analysis_years - 1),
        rent_by_year=tuple(by_year),
    )


def project_investment(
    upfront_cash: float,
    monthly_buy_cost: float,
    monthly_rent: float,
    annual_return_pct: float,
    analysis_years: int,
    total_rent_cost: float,
) -> InvestmentProjection:
    """
    Value of the renter's portfolio: the buyer's upfront cash (down payment
    plus transaction cost) compounded annually, plus the monthly surplus of
    the buyer's carrying cost over rent as an ordinary annuity.

    A negative surplus means owning is cheaper month to month; it contributes
    nothing to the portfolio.
    """
    savings = monthly_buy_cost - monthly_rent
    lump_sum = upfront_cash * (1 + annual_return_pct / 100) ** analysis_years

    months = analysis_years * 12
    stream = 0.0
    if savings > 0:
        m = monthly_rate(annual_return_pct)
        growth = compound_growth(m, months)
        if growth == 0:
            stream = savings * months
        else:
            stream = savings * growth / m

    total = lump_sum + stream
    return InvestmentProjection(
        monthly_savings=savings,
        down_payment_invested=lump_sum,
        monthly_savings_invested=stream,
        total_investment_value=total,
        investment_gain=total - upfront_cash,
        net_rent_position=total - total_rent_cost,
    )
