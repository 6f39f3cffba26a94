"""Due oracles: flat monthly dues and a database-backed rate schedule."""

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dues.models.due_rate import DueRate
from dues.services.contracts import DueOracle
from dues.services.errors import DueScheduleError
from dues.services.months import generate_months
from dues.services.parsers import MonthLike, parse_amount, parse_month

logger = logging.getLogger(__name__)


class FlatMonthlyDueOracle(DueOracle):
    """Every month from the initial date costs the same amount."""

    def __init__(self, monthly_amount: Decimal, initial_date: MonthLike):
        self.monthly_amount = parse_amount(monthly_amount)
        self.initial_date = parse_month(initial_date)

    def amount_owed(self, from_due: date, to_due: date) -> Decimal:
        # Months before tracking starts never accrued dues
        months = [month for month in generate_months(from_due, to_due) if month >= self.initial_date]
        return self.monthly_amount * len(months)

    def initial_tracking_date(self) -> date:
        return self.initial_date


class SqlDueOracle(DueOracle):
    """Due oracle reading the monthly rate schedule from due_rates.

    Each month costs the rate with the latest effective_from on or before
    it. Months before the first rate cost nothing.
    """

    def __init__(self, db: Session):
        """Initialize with database session."""
        self.db = db

    def _rates(self) -> list[DueRate]:
        return self.db.query(DueRate).order_by(DueRate.effective_from).all()

    def amount_owed(self, from_due: date, to_due: date) -> Decimal:
        """Sum the monthly rates for the inclusive range from_due..to_due.

        Returns:
            Total owed (Decimal("0") for an empty range)
        """
        rates = self._rates()
        total = Decimal("0")
        for month in generate_months(from_due, to_due):
            applicable = [rate for rate in rates if rate.effective_from <= month]
            if applicable:
                total += applicable[-1].monthly_amount
        return total

    def initial_tracking_date(self) -> date:
        """Earliest effective_from in the schedule.

        Raises:
            DueScheduleError: If no rates are configured
        """
        first_rate = self.db.query(DueRate).order_by(DueRate.effective_from).first()
        if first_rate is None:
            raise DueScheduleError("No due rates configured; cannot determine tracking start")
        return first_rate.effective_from

    def set_rate(self, effective_from: MonthLike, monthly_amount: Decimal) -> DueRate:
        """Create or update the rate in force from effective_from.

        Args:
            effective_from: Month the rate starts applying
            monthly_amount: Amount owed per month (non-negative)

        Returns:
            Created or updated DueRate object
        """
        month = parse_month(effective_from)
        amount = parse_amount(monthly_amount)

        rate = self.db.query(DueRate).filter(DueRate.effective_from == month).first()
        if rate:
            rate.monthly_amount = amount
        else:
            rate = DueRate(effective_from=month, monthly_amount=amount)
            self.db.add(rate)
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(rate)

        logger.info("Set due rate: effective_from=%s, monthly_amount=%s", month, amount)
        return rate


__all__ = ["FlatMonthlyDueOracle", "SqlDueOracle"]
