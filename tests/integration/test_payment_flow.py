"""Integration tests for paying dues through the SQL ledger and schedule."""

from datetime import date
from decimal import Decimal

import pytest

from dues.models import DuePayment
from dues.services.contracts import PaymentRequest
from dues.services.due_service import FlatMonthlyDueOracle, SqlDueOracle
from dues.services.errors import DueScheduleError, InsufficientAmountError, UserAlreadyPaidError
from dues.services.ledger_service import SqlPaymentLedger
from dues.services.payment_manager import DueSummary, PaymentManager


@pytest.fixture
def rate_schedule(db_session):
    """100 per month from July 2023, 120 from September 2023."""
    oracle = SqlDueOracle(db_session)
    oracle.set_rate("2023-07", Decimal("100"))
    oracle.set_rate("2023-09", Decimal("120"))
    return oracle


@pytest.fixture
def manager(db_session, rate_schedule, september_clock):
    """Manager wired to the SQL ledger and rate schedule."""
    return PaymentManager(SqlPaymentLedger(db_session), rate_schedule, clock=september_clock)


class TestPaymentFlow:
    """End-to-end payment and summary scenarios."""

    def test_paid_and_unpaid_summary(self, manager, homeowner):
        """Test July and August paid, September outstanding."""
        manager.pay(PaymentRequest(Decimal("100"), date(2023, 7, 1), date(2023, 7, 1)), homeowner)
        manager.pay(PaymentRequest(Decimal("100"), date(2023, 8, 1), date(2023, 8, 1)), homeowner)

        assert manager.get_paid_dues(homeowner) == [
            DueSummary(month=date(2023, 7, 1), amount=Decimal("100")),
            DueSummary(month=date(2023, 8, 1), amount=Decimal("100")),
        ]
        assert manager.get_unpaid_dues(homeowner) == [
            DueSummary(month=date(2023, 9, 1), amount=Decimal("120")),
        ]

    def test_multi_month_payment(self, manager, homeowner):
        """Test one payment can settle several months at their scheduled rates."""
        with pytest.raises(InsufficientAmountError):
            manager.pay(PaymentRequest(Decimal("319.99"), date(2023, 7, 1), date(2023, 9, 1)), homeowner)

        manager.pay(PaymentRequest(Decimal("320"), date(2023, 7, 1), date(2023, 9, 1)), homeowner)

        assert manager.get_unpaid_dues(homeowner) == []
        assert manager.get_total_unpaid(homeowner) == Decimal("0")

    def test_duplicate_payment_rejected(self, manager, homeowner):
        """Test paying the same month twice raises UserAlreadyPaidError."""
        payment = PaymentRequest(Decimal("100"), date(2023, 7, 1), date(2023, 7, 1))
        manager.pay(payment, homeowner)

        with pytest.raises(UserAlreadyPaidError):
            manager.pay(payment, homeowner)

    def test_month_covered_by_earlier_range_rejected(self, manager, homeowner):
        """Test a month inside an already paid range cannot be paid again."""
        manager.pay(PaymentRequest(Decimal("200"), date(2023, 7, 1), date(2023, 8, 1)), homeowner)

        with pytest.raises(UserAlreadyPaidError):
            manager.pay(PaymentRequest(Decimal("0"), date(2023, 8, 1), date(2023, 8, 1)), homeowner)

    def test_owners_tracked_independently(self, manager, homeowner, neighbor):
        """Test one owner's payments do not affect another's summary."""
        manager.pay(PaymentRequest(Decimal("100"), date(2023, 7, 1), date(2023, 7, 1)), homeowner)

        paid, unpaid = manager.get_due_summary(neighbor)

        assert paid == []
        assert [entry.month for entry in unpaid] == [date(2023, 7, 1), date(2023, 8, 1), date(2023, 9, 1)]
        assert manager.get_total_unpaid(neighbor) == Decimal("320")

    def test_flat_oracle_with_sql_ledger(self, db_session, homeowner, september_clock):
        """Test the flat schedule works with the same ledger."""
        manager = PaymentManager(
            SqlPaymentLedger(db_session),
            FlatMonthlyDueOracle(Decimal("500"), "2023-08"),
            clock=september_clock,
        )

        manager.pay(PaymentRequest(Decimal("501"), date(2023, 8, 1), date(2023, 8, 1)), homeowner)

        assert manager.get_unpaid_dues(homeowner) == [
            DueSummary(month=date(2023, 9, 1), amount=Decimal("500")),
        ]

    def test_reversed_range_is_not_recorded(self, manager, db_session, homeowner):
        """Test a payment whose range ends before it starts leaves no ledger row."""
        reversed_payment = PaymentRequest(Decimal("0"), date(2023, 9, 1), date(2023, 7, 1))

        with pytest.raises(ValueError, match="must not be after"):
            manager.pay(reversed_payment, homeowner)

        assert db_session.query(DuePayment).count() == 0

    def test_empty_schedule_error_propagates(self, db_session, homeowner, september_clock):
        """Test DueScheduleError reaches the caller unwrapped from summaries."""
        manager = PaymentManager(SqlPaymentLedger(db_session), SqlDueOracle(db_session), clock=september_clock)

        with pytest.raises(DueScheduleError, match="No due rates configured"):
            manager.get_unpaid_dues(homeowner)
