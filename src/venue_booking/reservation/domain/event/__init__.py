from .reservation_events import ReservationStatusChanged

__all__ = ["ReservationStatusChanged"]
