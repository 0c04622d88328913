from enum import Enum


class NotificationType(str, Enum):
    """通知種別"""

    RESERVATION_CONFIRMATION = "RESERVATION_CONFIRMATION"
    RESERVATION_CANCELLATION = "RESERVATION_CANCELLATION"
    PAYMENT_CONFIRMATION = "PAYMENT_CONFIRMATION"
    CHECK_IN_REMINDER = "CHECK_IN_REMINDER"
    SYSTEM_ALERT = "SYSTEM_ALERT"
    SYSTEM = "SYSTEM"
    PROMOTION = "PROMOTION"
