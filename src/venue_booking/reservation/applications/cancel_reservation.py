from venue_booking.reservation.applications._loader import load_reservation
from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.reservation.domain.policy import RefundPolicy
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.service import ReservationStateMachine
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.shared.domain import Actor
from venue_booking.shared.domain.exception import (
    AlreadyCancelledException,
    OptimisticLockException,
)
from venue_booking.shared.utils.clock import Clock, utc_now
from venue_booking.shared.utils.logger import get_logger

DEFAULT_CANCEL_REASON = "Cancellation requested by the user"

logger = get_logger("reservation")


class CancelReservationService:
    """予約キャンセルのユースケース

    ステータス遷移・返金額の算出・キャンセル情報の記録を 1 回の条件付き更新で確定する。
    既にキャンセル済みなら AlreadyCancelledException（適用済みの予約を保持）を送出し、
    返金計算や通知を再実行させない。
    """

    def __init__(
        self,
        repository: ReservationRepository,
        refund_policy: RefundPolicy | None = None,
        state_machine: ReservationStateMachine | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._refund_policy = refund_policy or RefundPolicy()
        self._state_machine = state_machine or ReservationStateMachine(clock=clock)
        self._clock = clock

    def cancel(
        self,
        reservation_id: ReservationId,
        reason: str | None = None,
        actor: Actor | None = None,
    ) -> Reservation:
        """予約をキャンセルする"""
        reservation = load_reservation(self._repository, reservation_id, actor)
        expected_status = reservation.status
        now = self._clock()

        self._state_machine.apply_transition(
            reservation, ReservationStatus.CANCELLED, occurred_at=now
        )
        quote = self._refund_policy.compute_refund(
            reservation.total, reservation.stay_period.check_in, now
        )
        reservation.record_cancellation(
            quote, (reason or "").strip() or DEFAULT_CANCEL_REASON, now
        )
        reservation.assert_consistent()

        try:
            self._repository.update(reservation, expected_status=expected_status)
        except OptimisticLockException:
            latest = self._repository.find_by_id(reservation_id)
            if latest is not None and latest.status == ReservationStatus.CANCELLED:
                raise AlreadyCancelledException(latest)
            raise

        logger.info(
            "Reservation cancelled",
            extra={
                "reservation_id": str(reservation.id),
                "refund_amount": str(quote.refund_amount.amount),
                "refund_status": quote.proposed_status.value,
            },
        )
        return reservation
