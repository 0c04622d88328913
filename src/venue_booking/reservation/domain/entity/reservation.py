from __future__ import annotations

from datetime import datetime

from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.event import ReservationStatusChanged
from venue_booking.reservation.domain.value_object import (
    ConfirmationCode,
    Guest,
    RefundQuote,
    ReservationId,
    StayPeriod,
)
from venue_booking.shared.domain import AggregateRoot, Money
from venue_booking.shared.domain.exception import BusinessRuleViolationException
from venue_booking.shared.utils.clock import as_utc

_REFUND_TRANSITIONS: dict[RefundStatus, frozenset[RefundStatus]] = {
    RefundStatus.PENDING: frozenset({RefundStatus.PROCESSING, RefundStatus.FAILED}),
    RefundStatus.PROCESSING: frozenset({RefundStatus.COMPLETED, RefundStatus.FAILED}),
    RefundStatus.COMPLETED: frozenset(),
    RefundStatus.FAILED: frozenset(),
}


class Reservation(AggregateRoot[ReservationId]):
    """予約エンティティ

    ステータスの遷移可否は ReservationStateMachine が判断する。
    このクラスは遷移結果の記録とキャンセル情報の整合性だけを守る。
    """

    def __init__(
        self,
        id: ReservationId,
        confirmation_code: ConfirmationCode,
        guest: Guest,
        service_name: str,
        venue_name: str,
        stay_period: StayPeriod,
        total: Money,
        status: ReservationStatus = ReservationStatus.PENDING,
        refund_amount: Money | None = None,
        refund_status: RefundStatus | None = None,
        cancel_reason: str | None = None,
        cancelled_at: datetime | None = None,
        completed_payments: int = 0,
    ) -> None:
        super().__init__(id)
        self._confirmation_code = confirmation_code
        self._guest = guest
        self._service_name = service_name
        self._venue_name = venue_name
        self._stay_period = stay_period
        self._total = total
        self._status = status
        self._refund_amount = refund_amount
        self._refund_status = refund_status
        self._cancel_reason = cancel_reason
        self._cancelled_at = as_utc(cancelled_at) if cancelled_at else None
        self._completed_payments = completed_payments

        self.assert_consistent()

    @property
    def confirmation_code(self) -> ConfirmationCode:
        return self._confirmation_code

    @property
    def guest(self) -> Guest:
        return self._guest

    @property
    def service_name(self) -> str:
        return self._service_name

    @property
    def venue_name(self) -> str:
        return self._venue_name

    @property
    def stay_period(self) -> StayPeriod:
        return self._stay_period

    @property
    def total(self) -> Money:
        return self._total

    @property
    def status(self) -> ReservationStatus:
        return self._status

    @property
    def refund_amount(self) -> Money | None:
        return self._refund_amount

    @property
    def refund_status(self) -> RefundStatus | None:
        return self._refund_status

    @property
    def cancel_reason(self) -> str | None:
        return self._cancel_reason

    @property
    def cancelled_at(self) -> datetime | None:
        return self._cancelled_at

    @property
    def completed_payments(self) -> int:
        return self._completed_payments

    @property
    def has_completed_payment(self) -> bool:
        return self._completed_payments > 0

    def record_status(self, status: ReservationStatus, occurred_at: datetime) -> None:
        """遷移済みのステータスを記録する

        ReservationStateMachine.apply_transition から呼ばれる想定。
        """
        previous = self._status
        self._status = status
        self.add_domain_event(
            ReservationStatusChanged(
                reservation_id=self.id,
                from_status=previous,
                to_status=status,
                occurred_at=as_utc(occurred_at),
            )
        )

    def record_cancellation(
        self, quote: RefundQuote, reason: str, cancelled_at: datetime
    ) -> None:
        """キャンセル情報（理由・日時・返金額）を記録する"""
        if self._status != ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException(
                "Cancellation details require CANCELLED status"
            )
        if self._cancelled_at is not None:
            raise BusinessRuleViolationException("Cancellation is already recorded")
        if quote.refund_amount.exceeds(self._total):
            raise BusinessRuleViolationException("Refund cannot exceed total amount")

        self._cancel_reason = reason
        self._cancelled_at = as_utc(cancelled_at)
        self._refund_amount = quote.refund_amount
        self._refund_status = quote.proposed_status

    def advance_refund(self, status: RefundStatus) -> None:
        """返金ステータスを進める"""
        if self._refund_status is None:
            raise BusinessRuleViolationException("Reservation has no refund to advance")
        if status == self._refund_status:
            return
        if status not in _REFUND_TRANSITIONS[self._refund_status]:
            raise BusinessRuleViolationException(
                f"Cannot move refund from {self._refund_status.value} to {status.value}"
            )
        self._refund_status = status

    def assert_consistent(self) -> None:
        """キャンセル情報の不変条件を検証する

        - cancelled_at は CANCELLED のときだけ存在する
        - refund_amount は cancelled_at があるときだけ存在する
        - refund_amount は total を超えない
        """
        is_cancelled = self._status == ReservationStatus.CANCELLED
        if is_cancelled != (self._cancelled_at is not None):
            raise BusinessRuleViolationException(
                "cancelled_at must be set if and only if status is CANCELLED"
            )
        if (self._refund_amount is not None) != (self._cancelled_at is not None):
            raise BusinessRuleViolationException(
                "refund_amount must be set if and only if cancelled_at is set"
            )
        if self._refund_amount is not None and self._refund_amount.exceeds(self._total):
            raise BusinessRuleViolationException("Refund cannot exceed total amount")
        if self._completed_payments < 0:
            raise BusinessRuleViolationException("completed_payments cannot be negative")
