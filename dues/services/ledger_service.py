"""SQL payment ledger backed by the due_payments table."""

import logging
from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dues.models.due_payment import DuePayment
from dues.models.user import User
from dues.services.contracts import PaymentLedger, PaymentRequest
from dues.services.months import generate_months
from dues.services.parsers import parse_month

logger = logging.getLogger(__name__)


class SqlPaymentLedger(PaymentLedger):
    """Payment ledger storing one DuePayment row per recorded payment.

    A month counts as settled when any recorded payment range of the user
    contains it, so a multi-month payment answers single-month queries.
    """

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def is_paid(self, user: User, from_due: date, to_due: date) -> bool:
        """Check whether every month of from_due..to_due is covered.

        Args:
            user: Owner to check
            from_due: First month of the range
            to_due: Last month of the range

        Returns:
            True if all months are covered by recorded payments, False otherwise
            (including an empty range where from_due is after to_due)
        """
        months = generate_months(from_due, to_due)
        if not months:
            return False

        payments = (
            self.db.query(DuePayment)
            .filter(
                DuePayment.user_id == user.id,
                DuePayment.from_due <= months[-1],
                DuePayment.to_due >= months[0],
            )
            .all()
        )
        return all(
            any(payment.from_due <= month <= payment.to_due for payment in payments)
            for month in months
        )

    def record(self, payment: PaymentRequest, user: User, comment: str | None = None) -> DuePayment:
        """Persist payment for user.

        Args:
            payment: Validated payment request
            user: Owner the payment applies to
            comment: Optional notes

        Returns:
            Created DuePayment object

        Raises:
            ValueError: If the payment range is reversed
            IntegrityError: If the same range is already recorded for user
        """
        from_due = parse_month(payment.from_due)
        to_due = parse_month(payment.to_due)
        if from_due > to_due:
            raise ValueError(f"from_due {from_due} must not be after to_due {to_due}")

        due_payment = DuePayment(
            user_id=user.id,
            amount=payment.amount,
            from_due=from_due,
            to_due=to_due,
            comment=comment,
        )
        self.db.add(due_payment)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

        self.db.refresh(due_payment)
        logger.info(
            "Recorded due payment: user_id=%s, amount=%s, range=%s..%s, id=%s",
            user.id,
            payment.amount,
            from_due,
            to_due,
            due_payment.id,
        )
        return due_payment

    def list_payments(self, user: User) -> list[DuePayment]:
        """List recorded payments for user ordered by from_due."""
        return (
            self.db.query(DuePayment)
            .filter(DuePayment.user_id == user.id)
            .order_by(DuePayment.from_due)
            .all()
        )


__all__ = ["SqlPaymentLedger"]
