from datetime import date
from typing import List

from models.cash_flow import Account
from models.simulation_dto import Payment
from services.payment_service import all_payments


def payments(account: Account, start_date: date, end_date: date) -> List[Payment]:
    """Every principal and tax payment of every flow in the window, by date.

    The sort is stable, so payments on the same day keep flow order, with a
    flow's principal ahead of its tax.
    """
    found: List[Payment] = []
    for cash_flow in account.cash_flows:
        found.extend(all_payments(cash_flow, start_date, end_date))
    found.sort(key=lambda p: p.date)
    return found


def balance_at(account: Account, on_date: date) -> float:
    """Opening balance plus all payments from the account start to ``on_date``.

    Dates before the account start return the opening balance. Dates past the
    account end are not clamped.
    """
    balance = account.balance
    for cash_flow in account.cash_flows:
        for payment in all_payments(cash_flow, account.start_date, on_date):
            balance += payment.amount
    return balance


def flows_at(account: Account, on_date: date) -> List[Payment]:
    """Payments occurring exactly on ``on_date``."""
    return payments(account, on_date, on_date)


def net_flow_at(account: Account, on_date: date) -> float:
    return sum(p.amount for p in flows_at(account, on_date))
