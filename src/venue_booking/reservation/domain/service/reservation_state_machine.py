from datetime import datetime

from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.shared.domain.exception import (
    AlreadyCancelledException,
    CannotCancelCompletedException,
    InvalidTransitionException,
)
from venue_booking.shared.utils.clock import Clock, utc_now

_ALLOWED_TRANSITIONS: dict[ReservationStatus, frozenset[ReservationStatus]] = {
    ReservationStatus.PENDING: frozenset(
        {ReservationStatus.CONFIRMED, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CONFIRMED: frozenset(
        {ReservationStatus.CHECKED_IN, ReservationStatus.CANCELLED}
    ),
    ReservationStatus.CHECKED_IN: frozenset(
        {ReservationStatus.CHECKED_OUT, ReservationStatus.NO_SHOW}
    ),
    ReservationStatus.CHECKED_OUT: frozenset(),
    ReservationStatus.CANCELLED: frozenset(),
    ReservationStatus.NO_SHOW: frozenset(),
}


class ReservationStateMachine:
    """予約ステータスの遷移を検証して適用する

    返金計算やキャンセル情報の記録は行わない（呼び出し側の責務）。
    """

    def __init__(self, clock: Clock = utc_now) -> None:
        self._clock = clock

    def allowed_targets(self, current: ReservationStatus) -> frozenset[ReservationStatus]:
        return _ALLOWED_TRANSITIONS[current]

    def can_transition(
        self, current: ReservationStatus, target: ReservationStatus
    ) -> bool:
        return target in _ALLOWED_TRANSITIONS[current]

    def is_terminal(self, status: ReservationStatus) -> bool:
        return not _ALLOWED_TRANSITIONS[status]

    def validate_transition(
        self, reservation: Reservation, target: ReservationStatus
    ) -> None:
        """遷移できない場合は InvalidTransitionException 系の例外を送出する"""
        current = reservation.status
        if target == ReservationStatus.CANCELLED:
            if current == ReservationStatus.CANCELLED:
                raise AlreadyCancelledException(reservation)
            if current == ReservationStatus.CHECKED_OUT:
                raise CannotCancelCompletedException()
        if not self.can_transition(current, target):
            raise InvalidTransitionException(current, target)

    def apply_transition(
        self,
        reservation: Reservation,
        target: ReservationStatus,
        occurred_at: datetime | None = None,
    ) -> Reservation:
        """遷移を検証し、ステータスを記録した予約を返す"""
        self.validate_transition(reservation, target)
        reservation.record_status(target, occurred_at or self._clock())
        return reservation
