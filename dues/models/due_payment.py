"""Due payment ORM model - ledger of settled month ranges."""

from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Index, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from dues.models import Base, BaseModel


class DuePayment(Base, BaseModel):
    """Recorded payment covering an inclusive range of due months.

    Attributes:
        user_id: Owner the payment was applied to
        amount: Amount paid (stored as Numeric for precision)
        from_due: First month covered (first-of-month date)
        to_due: Last month covered (first-of-month date)
        paid_at: When the payment was recorded
        comment: Optional notes
    """

    __tablename__ = "due_payments"

    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=10, scale=2),
        nullable=False,
    )
    from_due: Mapped[date] = mapped_column(Date, nullable=False)
    to_due: Mapped[date] = mapped_column(Date, nullable=False)
    paid_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    comment: Mapped[str | None] = mapped_column(String(255), nullable=True)

    user: Mapped["User"] = relationship("User", back_populates="payments")  # noqa: F821

    # Unique range per user: a racing duplicate insert fails at the store
    __table_args__ = (
        UniqueConstraint("user_id", "from_due", "to_due", name="uq_due_payment_range"),
        Index("idx_due_payment_user_range", "user_id", "from_due", "to_due"),
    )

    def __repr__(self) -> str:
        """Return string representation."""
        return (
            f"<DuePayment(id={self.id}, user_id={self.user_id}, amount={self.amount}, "
            f"from_due={self.from_due}, to_due={self.to_due})>"
        )


__all__ = ["DuePayment"]
