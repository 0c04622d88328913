from .refund_status import RefundStatus
from .reservation_status import ReservationStatus

__all__ = ["RefundStatus", "ReservationStatus"]
