"""
Frequency Rules — Deterministic Date Matching for Cash Flows

Pure functions deciding whether a cash flow fires on a calendar date.
No state; no side effects.
"""
from datetime import date
from typing import Optional

from models.cash_flow import Frequency
from models.errors import ConfigurationError

# Days in each month, January first. February is always 28: the 29th of a
# leap year is never treated as the end of the month.
DAYS_IN_MONTH = (
    31,  # January
    28,  # February
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)


def last_day_of_month(day: date) -> int:
    return DAYS_IN_MONTH[day.month - 1]


def within_bounds(day: date, start_date: Optional[date] = None,
                  end_date: Optional[date] = None) -> bool:
    """Both bounds are inclusive; a missing bound does not restrict."""
    if start_date is not None and day < start_date:
        return False
    if end_date is not None and day > end_date:
        return False
    return True


def fires_on(day: date, frequency: Frequency, start_date: Optional[date] = None,
             end_date: Optional[date] = None) -> bool:
    """
    Decide whether a flow with the given frequency and bounds pays on ``day``.

    Args:
        day: Candidate calendar date.
        frequency: The flow's recurrence rule.
        start_date: Optional inclusive start bound; also the anchor for
                    ``Once`` and ``Annually``.
        end_date: Optional inclusive end bound.

    Returns:
        True if the flow fires on ``day``.

    Raises:
        ConfigurationError: ``Annually`` without a start date.

    A ``Once`` flow without a start date fires on every day in bounds.
    """
    if not within_bounds(day, start_date, end_date):
        return False

    if frequency == Frequency.ONCE:
        return start_date is None or day == start_date

    if frequency == Frequency.MONTH_START:
        return day.day == 1

    if frequency == Frequency.MONTH_END:
        return day.day == last_day_of_month(day)

    if frequency == Frequency.SEMI_MONTHLY:
        return day.day == 15 or day.day == last_day_of_month(day)

    if frequency == Frequency.ANNUALLY:
        if start_date is None:
            raise ConfigurationError("Annually cash flow requires a start_date")
        return day.month == start_date.month and day.day == start_date.day

    raise ConfigurationError(f"Unsupported frequency: {frequency!r}")
