"""Payment manager: validates payments and reconstructs due history.

Combines a DueOracle (what is owed) with a PaymentLedger (what is settled).
The manager is stateless; every call is a sequence of collaborator calls
and collaborator errors propagate unchanged.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Any, Iterator, NamedTuple

from dues.services.contracts import DueOracle, PaymentLedger, PaymentRequest
from dues.services.errors import InsufficientAmountError, UserAlreadyPaidError
from dues.services.months import Clock, SystemClock, generate_months

logger = logging.getLogger(__name__)


class DueSummary(NamedTuple):
    """Amount owed for a single due month."""

    month: date
    amount: Decimal


class PaymentManager:
    """Handles payment processing and due management."""

    def __init__(self, ledger: PaymentLedger, due_oracle: DueOracle, clock: Clock | None = None):
        """Initialize with collaborators.

        Args:
            ledger: Payment ledger checked and written by pay()
            due_oracle: Source of owed amounts and the tracking start date
            clock: Source of the current month for due summaries
        """
        self.ledger = ledger
        self.due_oracle = due_oracle
        self.clock = clock or SystemClock()

    def pay(self, payment: PaymentRequest, user: Any) -> None:
        """Validate payment and record it in the ledger.

        Args:
            payment: Amount and due range being paid
            user: Identity passed through to the collaborators

        Raises:
            UserAlreadyPaidError: If the range is already settled for user
            InsufficientAmountError: If the amount owed exceeds payment.amount
        """
        self._validate_payment(payment, user)
        self.ledger.record(payment, user)
        logger.debug(
            "Recorded payment: amount=%s, from=%s, to=%s",
            payment.amount,
            payment.from_due,
            payment.to_due,
        )

    def get_unpaid_dues(self, user: Any) -> list[DueSummary]:
        """Months from the tracking start to now that user has not paid.

        Returns:
            DueSummary entries in ascending month order
        """
        return [self._price_month(month) for month, paid in self._classify_months(user) if not paid]

    def get_paid_dues(self, user: Any) -> list[DueSummary]:
        """Months from the tracking start to now that user has paid.

        Returns:
            DueSummary entries in ascending month order
        """
        return [self._price_month(month) for month, paid in self._classify_months(user) if paid]

    def get_due_summary(self, user: Any) -> tuple[list[DueSummary], list[DueSummary]]:
        """Split the tracked months into (paid, unpaid) in a single pass."""
        paid, unpaid = [], []
        for month, is_paid in self._classify_months(user):
            (paid if is_paid else unpaid).append(self._price_month(month))
        return paid, unpaid

    def get_total_unpaid(self, user: Any) -> Decimal:
        """Sum of all unpaid dues for user."""
        return sum((entry.amount for entry in self.get_unpaid_dues(user)), Decimal("0"))

    def _classify_months(self, user: Any) -> Iterator[tuple[date, bool]]:
        """Yield (month, paid) for each month of the tracking horizon.

        Months are priced by the caller only when they are emitted.
        """
        start_month = self.due_oracle.initial_tracking_date()
        months = generate_months(start_month, clock=self.clock)
        logger.debug("Classifying %d due months starting %s", len(months), start_month)

        for month in months:
            yield month, self.ledger.is_paid(user, month, month)

    def _price_month(self, month: date) -> DueSummary:
        return DueSummary(month=month, amount=self.due_oracle.amount_owed(month, month))

    def _validate_payment(self, payment: PaymentRequest, user: Any) -> None:
        """Reject duplicate or insufficient payments.

        The already-paid check runs before the oracle is consulted, so a
        settled range never reports an insufficient amount.
        """
        from_due = payment.from_due
        to_due = payment.to_due

        if self.ledger.is_paid(user, from_due, to_due):
            raise UserAlreadyPaidError(user=user, from_due=from_due, to_due=to_due)

        amount_owed = self.due_oracle.amount_owed(from_due, to_due)
        if amount_owed > payment.amount:
            raise InsufficientAmountError(
                amount_owed=amount_owed,
                amount_offered=payment.amount,
                from_due=from_due,
                to_due=to_due,
            )


__all__ = ["PaymentManager", "DueSummary"]
