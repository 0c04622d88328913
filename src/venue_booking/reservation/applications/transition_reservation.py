from venue_booking.reservation.applications._loader import load_reservation
from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.service import ReservationStateMachine
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.shared.domain import Actor
from venue_booking.shared.domain.exception import BusinessRuleViolationException
from venue_booking.shared.utils.clock import Clock, utc_now


class TransitionReservationService:
    """キャンセル以外のステータス遷移（確定・チェックイン・チェックアウト・ノーショー）"""

    def __init__(
        self,
        repository: ReservationRepository,
        state_machine: ReservationStateMachine | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._repository = repository
        self._state_machine = state_machine or ReservationStateMachine(clock=clock)
        self._clock = clock

    def transition(
        self,
        reservation_id: ReservationId,
        target: ReservationStatus,
        actor: Actor | None = None,
    ) -> Reservation:
        """予約ステータスを target に進める"""
        if target == ReservationStatus.CANCELLED:
            raise BusinessRuleViolationException(
                "Use CancelReservationService to cancel a reservation"
            )
        reservation = load_reservation(self._repository, reservation_id, actor)
        expected_status = reservation.status

        self._state_machine.apply_transition(reservation, target, self._clock())
        self._repository.update(reservation, expected_status=expected_status)
        return reservation
