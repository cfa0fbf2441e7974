from __future__ import annotations

import math
from typing import Optional

DTI_LIMIT_PERCENT = 40.0


def monthly_rate(annual_rate_pct: float) -> float:
    return annual_rate_pct / 100.0 / 12.0


def compound_growth(rate: float, periods: int) -> float:
    """(1+rate)^periods - 1, accurate even when rate is tiny."""
    return math.expm1(periods * math.log1p(rate))


def monthly_payment(
    loan_amount: float, annual_rate_pct: float, term_years: int
) -> float:
    """
    Fixed monthly payment that amortizes the loan over the term:
      M = P * r(1+r)^n / ((1+r)^n - 1)
    with r = annual/12 and n = years*12. A zero rate repays linearly.
    """
    n = term_years * 12
    r = monthly_rate(annual_rate_pct)
    growth = compound_growth(r, n)
    if growth == 0:
        return loan_amount / n
    return loan_amount * r * (growth + 1) / growth


def remaining_balance(
    loan_amount: float,
    rate: float,
    term_months: int,
    payments_elapsed: int,
    payment: float,
) -> float:
    """Outstanding principal after ``payments_elapsed`` scheduled payments."""
    if payments_elapsed >= term_months:
        return 0.0
    if rate == 0:
        return max(loan_amount - payment * payments_elapsed, 0.0)
    growth = compound_growth(rate, payments_elapsed)
    return loan_amount * (growth + 1) - payment * growth / rate


def total_interest(loan_amount: float, payment: float, term_months: int) -> float:
    return payment * term_months - loan_amount


def max_affordable_price(
    monthly_income: float,
    annual_rate_pct: float,
    term_years: int,
    down_payment_percent: float,
    dti_limit_pct: float = DTI_LIMIT_PERCENT,
) -> Optional[float]:
    """
    Highest property price whose full-term payment stays within the DTI limit.

    Returns None when the down payment covers the whole price, since no loan
    is taken and income places no ceiling on it.
    """
    financed_share = 1 - down_payment_percent / 100
    if financed_share <= 0:
        return None
    max_payment = monthly_income * dti_limit_pct / 100
    n = term_years * 12
    r = monthly_rate(annual_rate_pct)
    discount = -compound_growth(r, -n)
    if discount == 0:
        max_loan = max_payment * n
    else:
        max_loan = max_payment / r * discount
    return max_loan / financed_share
