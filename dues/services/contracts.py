"""Collaborator contracts consumed by the payment manager.

Any backend satisfying these interfaces can be wired into PaymentManager.
User identities are opaque here: they are handed to the collaborators as-is.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any


@dataclass(frozen=True)
class PaymentRequest:
    """Proposed payment for an inclusive range of due months."""

    amount: Decimal
    from_due: date
    to_due: date


class DueOracle(ABC):
    """Source of truth for owed amounts and the dues tracking start."""

    @abstractmethod
    def amount_owed(self, from_due: date, to_due: date) -> Decimal:
        """Total due for the inclusive range from_due..to_due."""

    @abstractmethod
    def initial_tracking_date(self) -> date:
        """Earliest date from which dues accrue."""


class PaymentLedger(ABC):
    """Record of which due ranges a user has settled.

    Implementations own duplicate prevention across concurrent callers
    (e.g. a uniqueness constraint); record() after is_paid() must be at
    least read-your-writes consistent for a single caller.
    """

    @abstractmethod
    def is_paid(self, user: Any, from_due: date, to_due: date) -> bool:
        """Whether the range from_due..to_due is fully settled for user."""

    @abstractmethod
    def record(self, payment: PaymentRequest, user: Any) -> Any:
        """Durably apply payment to user."""


__all__ = ["PaymentRequest", "DueOracle", "PaymentLedger"]
