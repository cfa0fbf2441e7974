from __future__ import annotations

import json
import time

import typer

from .config import settings
from .exceptions import InvalidInputError
from .logging_config import log_comparison, setup_logging
from .model import compute_buy_vs_rent
from .schemas import (
    AnalysisWindow,
    HouseholdAssumptions,
    InvestmentAssumptions,
    LoanTerms,
    OwnershipCostAssumptions,
    RentAssumptions,
)

app = typer.Typer(help="Decide whether buying or renting leaves you better off.")


@app.command()
def run(
    property_price: float = typer.Argument(..., help="Purchase price of the property."),
    monthly_rent: float = typer.Option(..., help="Current monthly rent for a comparable home."),
    monthly_income: float = typer.Option(..., help="Household monthly income."),
    down_payment_percent: float = typer.Option(
        default_factory=lambda: settings.default_down_payment_percent,
        help="Down payment as a percentage of the price (e.g., 30).",
    ),
    loan_term_years: int = typer.Option(
        default_factory=lambda: settings.default_loan_term_years,
        help="Mortgage term in years.",
    ),
    interest_rate: float = typer.Option(
        default_factory=lambda: settings.default_interest_rate_percent,
        help="Annual mortgage interest rate in percent (e.g., 8.5).",
    ),
    appreciation_rate: float = typer.Option(
        default_factory=lambda: settings.default_appreciation_percent,
        help="Annual property appreciation in percent.",
    ),
    rent_inflation: float = typer.Option(
        default_factory=lambda: settings.default_rent_inflation_percent,
        help="Annual rent increase in percent.",
    ),
    investment_return: float = typer.Option(
        default_factory=lambda: settings.default_investment_return_percent,
        help="Annual return on the renter's investments in percent.",
    ),
    analysis_years: int = typer.Option(
        default_factory=lambda: settings.default_analysis_years,
        help="Comparison horizon in years.",
    ),
    show_timeline: bool = typer.Option(
        False, help="If set, dump the yearly comparison as JSON."
    ),
) -> None:
    """
    Run the buy-versus-rent comparison and print the recommendation.
    """
    setup_logging(settings.log_level, settings.log_json)

    started = time.perf_counter()
    try:
        result = compute_buy_vs_rent(
            LoanTerms(
                property_price=property_price,
                down_payment_percent=down_payment_percent,
                loan_term_years=loan_term_years,
                annual_interest_rate_percent=interest_rate,
            ),
            OwnershipCostAssumptions(property_appreciation_percent=appreciation_rate),
            RentAssumptions(
                monthly_rent=monthly_rent, rent_inflation_percent=rent_inflation
            ),
            InvestmentAssumptions(annual_investment_return_percent=investment_return),
            HouseholdAssumptions(monthly_income=monthly_income),
            AnalysisWindow(analysis_years=analysis_years),
        )
    except InvalidInputError as exc:
        typer.echo(f"Invalid input: {exc}", err=True)
        raise typer.Exit(code=2)
    log_comparison(result, (time.perf_counter() - started) * 1000)

    recommendation = result.recommendation
    typer.echo(f"Loan amount: {result.loan_amount:,.0f}")
    typer.echo(f"Monthly mortgage payment: {result.monthly_mortgage:,.0f}")
    typer.echo(
        f"Debt-to-income: {result.debt_to_income_ratio:.1f}% "
        f"({recommendation.debt_to_income_band})"
    )
    typer.echo(
        f"Price-to-rent: {result.price_to_rent_ratio:.1f}x "
        f"({recommendation.price_to_rent_band})"
    )
    if not recommendation.is_affordable and result.max_affordable_price is not None:
        typer.echo(f"Max affordable price: {result.max_affordable_price:,.0f}")
    typer.echo("")
    typer.echo(f"Total cost of buying: {result.total_buy_cost:,.0f}")
    typer.echo(f"Future property value: {result.future_property_value:,.0f}")
    typer.echo(f"Net position if buying: {result.net_buy_position:,.0f}")
    typer.echo(f"Total rent paid: {result.total_rent_cost:,.0f}")
    typer.echo(f"Investment portfolio: {result.total_investment_value:,.0f}")
    typer.echo(f"Net position if renting: {result.net_rent_position:,.0f}")
    typer.echo("")
    typer.echo(f"Better outcome: {result.better_option}")
    if result.break_even_year > 0:
        typer.echo(f"Break-even year: {result.break_even_year}")
    else:
        typer.echo(f"Break-even year: none within {len(result.yearly_comparison)} years")
    typer.echo(
        f"Recommendation: {recommendation.verdict.value} ({recommendation.reason.value})"
    )

    if show_timeline:
        payload = [
            {
                "year": row.year,
                "property_value": row.property_value,
                "investment_value": row.investment_value,
                "buy_net_position": row.buy_net_position,
                "rent_net_position": row.rent_net_position,
            }
            for row in result.yearly_comparison
        ]
        typer.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    app()
