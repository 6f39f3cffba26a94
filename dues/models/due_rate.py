"""Due rate ORM model for the monthly dues schedule."""

from datetime import date
from decimal import Decimal

from sqlalchemy import Date, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from dues.models import Base, BaseModel


class DueRate(Base, BaseModel):
    """Monthly due amount in force from a given month onwards.

    A rate applies to every month from effective_from until the next rate's
    effective_from. The earliest rate marks the start of dues tracking.
    """

    __tablename__ = "due_rates"

    effective_from: Mapped[date] = mapped_column(
        Date,
        nullable=False,
        unique=True,
        index=True,
        comment="First month (first-of-month date) the rate applies to",
    )
    monthly_amount: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Amount owed per month",
    )

    def __repr__(self) -> str:
        return f"<DueRate(id={self.id}, effective_from={self.effective_from}, monthly_amount={self.monthly_amount})>"


__all__ = ["DueRate"]
