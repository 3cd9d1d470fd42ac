### Payment service expands a cash flow template into dated payments.
from datetime import date
from typing import List

from models.cash_flow import CashFlow
from models.errors import ConfigurationError
from models.simulation_dto import Payment
from services.frequency_rules import fires_on
from utils.dates import iter_days


def tax_label(cash_flow: CashFlow) -> str:
    if not cash_flow.name:
        raise ConfigurationError(
            "Cash flow with a tax rate must have a name to label its tax payments"
        )
    return f"{cash_flow.name} Tax"


def principal_payment(cash_flow: CashFlow, day: date) -> Payment:
    return Payment(
        date=day,
        amount=cash_flow.amount,
        cash_flow=cash_flow,
        label=cash_flow.name,
    )


def tax_payment(cash_flow: CashFlow, day: date) -> Payment:
    """Withholding for one occurrence: opposite sign, scaled by the tax rate."""
    return Payment(
        date=day,
        amount=-(cash_flow.amount * cash_flow.tax_rate),
        cash_flow=cash_flow,
        label=tax_label(cash_flow),
    )


def enumerate_payments(cash_flow: CashFlow, window_start: date, window_end: date,
                       tax: bool = False) -> List[Payment]:
    """Return the flow's payments in ``[window_start, window_end]``, by date.

    With ``tax=True`` the tax-shadow payments are returned instead of the
    principal ones; a flow with a zero tax rate has none. Callers wanting
    both make two calls.
    """
    payments: List[Payment] = []

    if tax and cash_flow.tax_rate == 0:
        return payments

    # days outside the flow's own bounds can never fire
    scan_start = window_start
    if cash_flow.start_date is not None and cash_flow.start_date > scan_start:
        scan_start = cash_flow.start_date
    scan_end = window_end
    if cash_flow.end_date is not None and cash_flow.end_date < scan_end:
        scan_end = cash_flow.end_date

    build = tax_payment if tax else principal_payment
    for day in iter_days(scan_start, scan_end):
        if fires_on(day, cash_flow.frequency, cash_flow.start_date, cash_flow.end_date):
            payments.append(build(cash_flow, day))

    return payments


def all_payments(cash_flow: CashFlow, window_start: date, window_end: date) -> List[Payment]:
    """Principal payments followed by tax payments for the same window."""
    return (
        enumerate_payments(cash_flow, window_start, window_end)
        + enumerate_payments(cash_flow, window_start, window_end, tax=True)
    )
