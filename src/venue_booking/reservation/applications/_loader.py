from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.shared.domain import Actor
from venue_booking.shared.domain.exception import ResourceNotFoundException


def load_reservation(
    repository: ReservationRepository,
    reservation_id: ReservationId,
    actor: Actor | None = None,
) -> Reservation:
    """予約を取得する

    actor が所有者でも管理者でもない場合は存在しないものとして扱う。
    """
    reservation = repository.find_by_id(reservation_id)
    if reservation is None or (
        actor is not None and not actor.can_access(reservation.guest.user_id)
    ):
        raise ResourceNotFoundException(f"Reservation not found: {reservation_id}")
    return reservation
