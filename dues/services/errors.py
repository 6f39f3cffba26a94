"""Domain errors raised by payment validation and due schedules."""

from datetime import date
from decimal import Decimal
from typing import Any


class PaymentError(Exception):
    """Base class for rejected payments."""


class UserAlreadyPaidError(PaymentError):
    """The requested due range is already settled for the user."""

    def __init__(self, user: Any = None, from_due: date | None = None, to_due: date | None = None):
        super().__init__("User Already Paid")
        self.user = user
        self.from_due = from_due
        self.to_due = to_due


class InsufficientAmountError(PaymentError):
    """The offered amount is less than what is owed for the range."""

    def __init__(
        self,
        amount_owed: Decimal | None = None,
        amount_offered: Decimal | None = None,
        from_due: date | None = None,
        to_due: date | None = None,
    ):
        super().__init__("Insufficient Amount")
        self.amount_owed = amount_owed
        self.amount_offered = amount_offered
        self.from_due = from_due
        self.to_due = to_due


class DueScheduleError(Exception):
    """The due schedule cannot answer a query (e.g., no rates configured)."""


__all__ = [
    "PaymentError",
    "UserAlreadyPaidError",
    "InsufficientAmountError",
    "DueScheduleError",
]
