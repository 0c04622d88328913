from .confirmation_code import ConfirmationCode
from .guest import Guest
from .refund_quote import RefundQuote
from .reservation_id import ReservationId
from .stay_period import StayPeriod

__all__ = ["ConfirmationCode", "Guest", "RefundQuote", "ReservationId", "StayPeriod"]
