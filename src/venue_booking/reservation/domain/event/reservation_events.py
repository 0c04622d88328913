from dataclasses import dataclass
from datetime import datetime

from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.reservation.domain.value_object import ReservationId


@dataclass(frozen=True)
class ReservationStatusChanged:
    """予約ステータスが変わった"""

    reservation_id: ReservationId
    from_status: ReservationStatus
    to_status: ReservationStatus
    occurred_at: datetime
