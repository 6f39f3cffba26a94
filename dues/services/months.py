"""Month range generation with an injectable clock."""

from datetime import date
from typing import Protocol

from dateutil.relativedelta import relativedelta

from dues.services.parsers import MonthLike, first_of_month, parse_month


class Clock(Protocol):
    """Source of the current date."""

    def today(self) -> date: ...


class SystemClock:
    """Clock backed by the local wall clock."""

    def today(self) -> date:
        return date.today()


class FixedClock:
    """Clock frozen at a given date (tests, replays)."""

    def __init__(self, today: date):
        self._today = today

    def today(self) -> date:
        return self._today


def current_month(clock: Clock | None = None) -> date:
    """First day of the current month according to clock."""
    clock = clock or SystemClock()
    return first_of_month(clock.today())


def generate_months(
    start_month: MonthLike,
    end_month: MonthLike | None = None,
    clock: Clock | None = None,
) -> list[date]:
    """
    List every first-of-month date from start_month to end_month inclusive.

    Args:
        start_month: First month of the range ('YYYY-MM', 'YYYY-MM-DD' or date)
        end_month: Last month of the range; defaults to the current month
        clock: Source of "today" for the default end month

    Returns:
        Ascending first-of-month dates; empty when start_month is after end_month

    Examples:
        >>> generate_months("2023-11", "2024-02")
        [datetime.date(2023, 11, 1), datetime.date(2023, 12, 1), datetime.date(2024, 1, 1), datetime.date(2024, 2, 1)]
    """
    start = parse_month(start_month)
    end = current_month(clock) if end_month is None else parse_month(end_month)

    months = []
    month = start
    while month <= end:
        months.append(month)
        month += relativedelta(months=1)
    return months


__all__ = ["Clock", "SystemClock", "FixedClock", "current_month", "generate_months"]
