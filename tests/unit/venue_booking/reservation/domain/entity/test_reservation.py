from datetime import timedelta
from decimal import Decimal

import pytest

from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.value_object import RefundQuote
from venue_booking.shared.domain import Money
from venue_booking.shared.domain.exception import BusinessRuleViolationException


class TestReservation:
    """Reservation エンティティのテスト"""

    def test_record_cancellation_sets_details(self, create_reservation, now):
        reservation = create_reservation()
        reservation.record_status(ReservationStatus.CANCELLED, now)
        quote = RefundQuote(Money.mxn(Decimal("500.00")), RefundStatus.PENDING)

        reservation.record_cancellation(quote, "Change of plans", now)

        assert reservation.cancelled_at == now
        assert reservation.cancel_reason == "Change of plans"
        assert reservation.refund_amount == Money.mxn(Decimal("500.00"))
        assert reservation.refund_status == RefundStatus.PENDING
        reservation.assert_consistent()

    def test_record_cancellation_requires_cancelled_status(self, create_reservation, now):
        reservation = create_reservation()
        quote = RefundQuote(Money.mxn(Decimal("0")), RefundStatus.COMPLETED)

        with pytest.raises(BusinessRuleViolationException):
            reservation.record_cancellation(quote, "reason", now)

    def test_cancellation_is_recorded_only_once(self, create_reservation, now):
        reservation = create_reservation(status=ReservationStatus.CANCELLED)
        quote = RefundQuote(Money.mxn(Decimal("0")), RefundStatus.COMPLETED)

        with pytest.raises(BusinessRuleViolationException, match="already recorded"):
            reservation.record_cancellation(quote, "again", now)

    def test_refund_cannot_exceed_total(self, create_reservation, now):
        reservation = create_reservation(total_amount=Decimal("100.00"))
        reservation.record_status(ReservationStatus.CANCELLED, now)
        quote = RefundQuote(Money.mxn(Decimal("100.01")), RefundStatus.PENDING)

        with pytest.raises(BusinessRuleViolationException, match="exceed"):
            reservation.record_cancellation(quote, "reason", now)

    def test_cancelled_status_without_cancelled_at_is_inconsistent(
        self, create_reservation, now
    ):
        reservation = create_reservation()
        reservation.record_status(ReservationStatus.CANCELLED, now)

        with pytest.raises(BusinessRuleViolationException, match="cancelled_at"):
            reservation.assert_consistent()

    def test_constructing_inconsistent_reservation_raises(self, create_reservation, now):
        with pytest.raises(BusinessRuleViolationException):
            create_reservation(
                status=ReservationStatus.CONFIRMED, cancelled_at=now - timedelta(hours=1)
            )

    @pytest.mark.parametrize(
        "start, target",
        [
            (RefundStatus.PENDING, RefundStatus.PROCESSING),
            (RefundStatus.PENDING, RefundStatus.FAILED),
            (RefundStatus.PROCESSING, RefundStatus.COMPLETED),
            (RefundStatus.PROCESSING, RefundStatus.FAILED),
        ],
    )
    def test_advance_refund(self, create_reservation, start, target):
        reservation = create_reservation(
            status=ReservationStatus.CANCELLED, refund_status=start
        )
        reservation.advance_refund(target)
        assert reservation.refund_status == target

    def test_advance_refund_rejects_backwards_move(self, create_reservation):
        reservation = create_reservation(
            status=ReservationStatus.CANCELLED, refund_status=RefundStatus.COMPLETED
        )
        with pytest.raises(BusinessRuleViolationException):
            reservation.advance_refund(RefundStatus.PENDING)

    def test_advance_refund_without_refund_raises(self, create_reservation):
        with pytest.raises(BusinessRuleViolationException, match="no refund"):
            create_reservation().advance_refund(RefundStatus.PROCESSING)
