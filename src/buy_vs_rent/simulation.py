from __future__ import annotations

from .mortgage import monthly_rate, remaining_balance
from .schemas import (
    LoanTerms,
    OwnershipCostAssumptions,
    YearlyComparisonRow,
    YearlySimulation,
)


def simulate_years(
    terms: LoanTerms,
    ownership: OwnershipCostAssumptions,
    monthly_rent: float,
    rent_inflation_pct: float,
    annual_return_pct: float,
    series_years: int,
    payment: float,
    monthly_savings: float,
) -> YearlySimulation:
    """
    Walk the buy and rent paths one year at a time and find the break-even year.

    The break-even year is the first year buying's net position exceeds
    renting's. Once found it is kept, even if renting pulls ahead again in a
    later year.
    """
    price = terms.property_price
    n = terms.number_of_payments
    rate = monthly_rate(terms.annual_interest_rate_percent)

    appreciation = 1 + ownership.property_appreciation_percent / 100
    rent_growth = 1 + rent_inflation_pct / 100
    investment_growth = 1 + annual_return_pct / 100
    # Savings are contributed through the year, so they earn roughly half a year.
    yearly_contribution = 0.0
    if monthly_savings > 0:
        yearly_contribution = monthly_savings * 12 * (1 + annual_return_pct / 100 / 2)

    yearly_owner_cost = (
        payment * 12
        + price * ownership.annual_maintenance_rate
        + price * ownership.annual_property_tax_rate
    )

    upfront = terms.down_payment + price * ownership.transaction_cost_rate
    cumulative_buy_cost = upfront
    cumulative_rent_cost = 0.0
    cumulative_investment = upfront
    property_value = price
    year_rent = monthly_rent * 12

    break_even = -1
    rows: list[YearlyComparisonRow] = []

    for year in range(1, series_years + 1):
        cumulative_buy_cost += yearly_owner_cost
        property_value *= appreciation
        cumulative_rent_cost += year_rent

        cumulative_investment = cumulative_investment * investment_growth
        cumulative_investment += yearly_contribution

        paid = min(year * 12, n)
        loan_left = remaining_balance(terms.loan_amount, rate, n, paid, payment)

        buy_net = property_value - loan_left - cumulative_buy_cost
        rent_net = cumulative_investment - cumulative_rent_cost

        rows.append(
            YearlyComparisonRow(
                year=year,
                property_value=property_value,
                investment_value=cumulative_investment,
                buy_net_position=buy_net,
                rent_net_position=rent_net,
                buy_cost=cumulative_buy_cost,
                rent_cost=cumulative_rent_cost,
            )
        )

        if break_even == -1 and buy_net > rent_net:
            break_even = year

        year_rent *= rent_growth

    return YearlySimulation(rows=tuple(rows), break_even_year=break_even)
