from datetime import date

import pytest

from models.cash_flow import Frequency
from models.errors import ConfigurationError
from services.frequency_rules import DAYS_IN_MONTH, fires_on, last_day_of_month, within_bounds


def test_days_in_month_table_is_fixed_non_leap():
    assert len(DAYS_IN_MONTH) == 12
    assert sum(DAYS_IN_MONTH) == 365
    assert last_day_of_month(date(2020, 2, 10)) == 28


def test_bounds_are_inclusive():
    start, end = date(2021, 1, 10), date(2021, 1, 20)
    assert within_bounds(date(2021, 1, 10), start, end)
    assert within_bounds(date(2021, 1, 20), start, end)
    assert not within_bounds(date(2021, 1, 9), start, end)
    assert not within_bounds(date(2021, 1, 21), start, end)
    assert within_bounds(date(1999, 1, 1))


def test_bounds_apply_before_frequency():
    assert not fires_on(date(2021, 2, 1), Frequency.MONTH_START, start_date=date(2021, 2, 2))
    assert not fires_on(date(2021, 3, 1), Frequency.MONTH_START, end_date=date(2021, 2, 28))
    assert fires_on(date(2021, 3, 1), Frequency.MONTH_START, end_date=date(2021, 3, 1))


def test_once_fires_only_on_start_date():
    start = date(2021, 6, 1)
    assert fires_on(start, Frequency.ONCE, start_date=start)
    assert not fires_on(date(2021, 6, 2), Frequency.ONCE, start_date=start)


def test_once_without_start_date_fires_every_day():
    assert fires_on(date(2021, 6, 1), Frequency.ONCE)
    assert fires_on(date(2021, 6, 2), Frequency.ONCE)
    assert fires_on(date(2021, 6, 3), Frequency.ONCE, end_date=date(2021, 6, 3))
    assert not fires_on(date(2021, 6, 4), Frequency.ONCE, end_date=date(2021, 6, 3))


def test_month_start():
    assert fires_on(date(2021, 7, 1), Frequency.MONTH_START)
    assert not fires_on(date(2021, 7, 2), Frequency.MONTH_START)


@pytest.mark.parametrize("day", [date(2021, 1, 31), date(2021, 4, 30), date(2021, 2, 28), date(2020, 2, 28)])
def test_month_end(day):
    assert fires_on(day, Frequency.MONTH_END)


def test_month_end_ignores_leap_day():
    assert not fires_on(date(2020, 2, 29), Frequency.MONTH_END)
    assert not fires_on(date(2020, 2, 29), Frequency.SEMI_MONTHLY)


def test_semi_monthly():
    assert fires_on(date(2021, 1, 15), Frequency.SEMI_MONTHLY)
    assert fires_on(date(2021, 1, 31), Frequency.SEMI_MONTHLY)
    assert fires_on(date(2020, 2, 28), Frequency.SEMI_MONTHLY)
    assert not fires_on(date(2021, 1, 30), Frequency.SEMI_MONTHLY)
    assert not fires_on(date(2021, 1, 1), Frequency.SEMI_MONTHLY)


def test_annually_matches_month_and_day():
    start = date(2019, 3, 10)
    assert fires_on(date(2019, 3, 10), Frequency.ANNUALLY, start_date=start)
    assert fires_on(date(2025, 3, 10), Frequency.ANNUALLY, start_date=start)
    assert not fires_on(date(2025, 3, 11), Frequency.ANNUALLY, start_date=start)
    assert not fires_on(date(2018, 3, 10), Frequency.ANNUALLY, start_date=start)


def test_annually_without_start_date_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        fires_on(date(2021, 3, 10), Frequency.ANNUALLY)
