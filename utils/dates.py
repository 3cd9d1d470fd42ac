from datetime import date, timedelta
from typing import Iterator

ONE_DAY = timedelta(days=1)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from ``start`` to ``end`` inclusive.

    Nothing is yielded when ``start`` is after ``end``.
    """
    day = start
    while day <= end:
        yield day
        if day == end:
            break
        day += ONE_DAY
