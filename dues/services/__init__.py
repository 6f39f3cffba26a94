"""Dues services: month ranges, collaborator contracts and the payment manager."""

from dues.services.contracts import DueOracle, PaymentLedger, PaymentRequest
from dues.services.errors import (
    DueScheduleError,
    InsufficientAmountError,
    PaymentError,
    UserAlreadyPaidError,
)
from dues.services.months import FixedClock, SystemClock, generate_months
from dues.services.payment_manager import DueSummary, PaymentManager

__all__ = [
    "DueOracle",
    "PaymentLedger",
    "PaymentRequest",
    "PaymentError",
    "UserAlreadyPaidError",
    "InsufficientAmountError",
    "DueScheduleError",
    "FixedClock",
    "SystemClock",
    "generate_months",
    "DueSummary",
    "PaymentManager",
]
