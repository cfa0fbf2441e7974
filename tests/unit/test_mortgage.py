"""Unit tests for mortgage payment and balance math"""

import pytest
from buy_vs_rent.mortgage import (
    compound_growth,
    max_affordable_price,
    monthly_payment,
    monthly_rate,
    remaining_balance,
    total_interest,
)


def test_monthly_payment_default_loan():
    """2.1 billion over 20 years at 8.5% costs about 18.23 million a month"""
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    assert payment == pytest.approx(18_230_000, rel=0.01)


def test_monthly_payment_zero_rate_is_linear():
    """No interest: the loan is split evenly across the payments"""
    assert monthly_payment(1_200_000, 0, 10) == 1_200_000 / 120
    assert monthly_payment(2_100_000_000, 0, 20) == 2_100_000_000 / 240


def test_monthly_payment_increases_with_rate():
    """Higher rate strictly raises the payment"""
    payments = [monthly_payment(2_100_000_000, rate, 20) for rate in (0, 1, 5, 8.5, 12, 20)]
    assert all(a < b for a, b in zip(payments, payments[1:]))


def test_monthly_payment_zero_loan():
    assert monthly_payment(0, 8.5, 20) == 0
    assert monthly_payment(0, 0, 20) == 0


def test_remaining_balance_zero_after_last_payment():
    """Balance is exactly zero once the term is complete"""
    rate = monthly_rate(8.5)
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    assert remaining_balance(2_100_000_000, rate, 240, 240, payment) == 0
    assert remaining_balance(2_100_000_000, rate, 240, 300, payment) == 0


def test_remaining_balance_formula_closes_at_term():
    """The closed-form balance itself reaches zero after n payments (within 1 VND)"""
    rate = monthly_rate(8.5)
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    # A longer nominal term bypasses the early return, exercising the formula.
    assert remaining_balance(2_100_000_000, rate, 241, 240, payment) == pytest.approx(0, abs=1)


def test_remaining_balance_one_payment_left():
    """With one payment left, the balance is that payment discounted one month"""
    rate = monthly_rate(8.5)
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    balance = remaining_balance(2_100_000_000, rate, 240, 239, payment)
    assert balance == pytest.approx(payment / (1 + rate), rel=1e-6)


def test_remaining_balance_decreases_over_time():
    rate = monthly_rate(8.5)
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    balances = [
        remaining_balance(2_100_000_000, rate, 240, k, payment) for k in range(0, 241, 12)
    ]
    assert balances[0] == pytest.approx(2_100_000_000)
    assert all(a > b for a, b in zip(balances, balances[1:]))


def test_remaining_balance_zero_rate():
    """Zero rate balance falls linearly and never goes negative"""
    assert remaining_balance(1_200_000, 0, 120, 60, 10_000) == 600_000
    assert remaining_balance(1_000, 0, 120, 119, 10) == 0


def test_total_interest():
    assert total_interest(1_200_000, 10_000, 120) == 0
    payment = monthly_payment(2_100_000_000, 8.5, 20)
    assert total_interest(2_100_000_000, payment, 240) == pytest.approx(payment * 240 - 2_100_000_000)


def test_max_affordable_price_matches_dti_limit():
    """At the ceiling price, the payment is exactly 40% of income"""
    price = max_affordable_price(50_000_000, 8.5, 20, 30)
    payment = monthly_payment(price * 0.7, 8.5, 20)
    assert payment == pytest.approx(20_000_000)


def test_max_affordable_price_zero_rate():
    # 40% of 100 = 40/month for 120 months = 4800 loan, 80% financed
    assert max_affordable_price(100, 0, 10, 20) == pytest.approx(6000)


def test_max_affordable_price_cash_purchase():
    """Without a loan, income puts no ceiling on price"""
    assert max_affordable_price(50_000_000, 8.5, 20, 100) is None


def test_compound_growth_matches_power_form():
    assert compound_growth(0.01, 12) == pytest.approx(1.01**12 - 1)
    assert compound_growth(0, 240) == 0


def test_monthly_payment_near_zero_rate_is_linear():
    """A rate too small to move (1+r)^n still repays linearly instead of dividing by zero"""
    payment = monthly_payment(2_100_000_000, 1e-14, 20)
    assert payment == pytest.approx(2_100_000_000 / 240)


def test_remaining_balance_near_zero_rate():
    rate = monthly_rate(1e-14)
    payment = monthly_payment(1_200_000, 1e-14, 10)
    assert remaining_balance(1_200_000, rate, 120, 60, payment) == pytest.approx(600_000)


def test_max_affordable_price_near_zero_rate():
    assert max_affordable_price(100, 1e-14, 10, 20) == pytest.approx(
        max_affordable_price(100, 0, 10, 20)
    )
