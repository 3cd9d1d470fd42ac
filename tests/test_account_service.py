from datetime import date, timedelta

import pytest

from models.cash_flow import Account, CashFlow, Frequency
from services.account_service import balance_at, flows_at, net_flow_at, payments


def test_month_start_balances(monthly_account):
    assert balance_at(monthly_account, date(2020, 1, 1)) == 100.0
    assert balance_at(monthly_account, date(2020, 1, 31)) == 100.0
    assert balance_at(monthly_account, date(2020, 2, 1)) == 200.0
    assert balance_at(monthly_account, date(2020, 2, 29)) == 200.0
    assert balance_at(monthly_account, date(2020, 3, 1)) == 300.0


def test_balance_before_start_is_opening_balance(mixed_account):
    assert balance_at(mixed_account, date(2020, 12, 31)) == 1000.0
    assert balance_at(mixed_account, date(1990, 1, 1)) == 1000.0


def test_balance_extrapolates_past_end(monthly_account):
    assert balance_at(monthly_account, date(2021, 1, 1)) == 1300.0


def test_balance_differences_equal_flows_between(mixed_account):
    d1, d2 = date(2021, 2, 10), date(2021, 7, 4)
    expected = 0.0
    day = d1 + timedelta(days=1)
    while day <= d2:
        expected += sum(p.amount for p in flows_at(mixed_account, day))
        day += timedelta(days=1)

    assert balance_at(mixed_account, d2) - balance_at(mixed_account, d1) == pytest.approx(expected)


def test_flows_at_includes_tax(mixed_account):
    flows = flows_at(mixed_account, date(2021, 3, 15))
    assert [(p.cash_flow_name, p.amount) for p in flows] == [
        ("Salary", 2000.0),
        ("Salary Tax", pytest.approx(-500.0)),
    ]


def test_flows_at_keeps_flow_order_on_shared_day(mixed_account):
    flows = flows_at(mixed_account, date(2021, 1, 31))
    assert [p.cash_flow_name for p in flows] == ["Salary", "Salary Tax", "Card"]


def test_flows_at_quiet_day(mixed_account):
    assert flows_at(mixed_account, date(2021, 1, 2)) == []
    assert net_flow_at(mixed_account, date(2021, 1, 2)) == 0


def test_payments_sorted_by_date(mixed_account):
    found = payments(mixed_account, date(2021, 3, 1), date(2021, 3, 31))
    dates = [p.date for p in found]
    assert dates == sorted(dates)
    assert [p.cash_flow_name for p in found] == [
        "Rent", "Bonus", "Bonus Tax", "Salary", "Salary Tax", "Salary", "Salary Tax", "Card",
    ]


def test_account_identity_is_name():
    common = dict(start_date=date(2020, 1, 1), end_date=date(2020, 12, 31))
    first = Account(name="Test Account", balance=0.0, **common)
    richer = Account(name="Test Account", balance=500.0,
                     cash_flows=[CashFlow(name="x", amount=1.0)], **common)
    other = Account(name="Test Account 2", balance=0.0, **common)

    assert first.identity == richer.identity
    assert hash(first.identity) == hash(richer.identity)
    assert first.identity != other.identity


def test_with_cash_flow_returns_new_account(monthly_account):
    extra = CashFlow(name="Extra", amount=5.0, frequency=Frequency.MONTH_END)
    updated = monthly_account.with_cash_flow(extra)

    assert len(updated.cash_flows) == 2
    assert len(monthly_account.cash_flows) == 1
    assert updated.identity == monthly_account.identity
