"""Parsing utilities for month and amount values.

Months are accepted at month granularity only; any day component is dropped.

Example:
    >>> parse_month("2023-11")
    datetime.date(2023, 11, 1)

    >>> parse_month("2023-11-15")
    datetime.date(2023, 11, 1)

    >>> parse_amount("500.00")
    Decimal('500.00')
"""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Union

MONTH_FMT = "%Y-%m"
DATE_FMT = "%Y-%m-%d"

MonthLike = Union[str, date, datetime]


def first_of_month(value: date) -> date:
    """Return the first day of the month containing value."""
    return value.replace(day=1)


def parse_month(value: MonthLike) -> date:
    """
    Normalize a month-like value to the first day of its month.

    Args:
        value: date, datetime, or string in 'YYYY-MM' or 'YYYY-MM-DD' format

    Returns:
        First-of-month date

    Raises:
        ValueError: If a string matches neither supported format
        TypeError: If value is not a date, datetime or string

    Examples:
        >>> parse_month(date(2024, 2, 29))
        datetime.date(2024, 2, 1)
        >>> parse_month("2024-02")
        datetime.date(2024, 2, 1)
    """
    # datetime is a date subclass, check it first
    if isinstance(value, datetime):
        return first_of_month(value.date())
    if isinstance(value, date):
        return first_of_month(value)
    if isinstance(value, str):
        text = value.strip()
        for fmt in (MONTH_FMT, DATE_FMT):
            try:
                return first_of_month(datetime.strptime(text, fmt).date())
            except ValueError:
                continue
        raise ValueError(f"Cannot parse month '{value}': expected YYYY-MM or YYYY-MM-DD")
    raise TypeError(f"Unsupported type for month: {type(value).__name__}")


def parse_amount(value: Union[str, int, Decimal]) -> Decimal:
    """
    Parse a non-negative monetary amount to Decimal.

    Floats are rejected to avoid binary rounding in stored amounts.

    Raises:
        ValueError: If value is not a valid non-negative number
    """
    if isinstance(value, bool) or isinstance(value, float):
        raise ValueError(f"Cannot parse amount {value!r}: use str, int or Decimal")
    try:
        amount = Decimal(value.strip()) if isinstance(value, str) else Decimal(value)
    except (ValueError, TypeError, InvalidOperation) as e:
        raise ValueError(f"Cannot parse amount '{value}': {e}") from e

    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got '{value}'")
    if amount < 0:
        raise ValueError(f"Amount must not be negative, got '{value}'")
    return amount


__all__ = ["MonthLike", "first_of_month", "parse_month", "parse_amount"]
