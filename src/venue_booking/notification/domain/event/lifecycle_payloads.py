from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.value_object import Recipient
from venue_booking.shared.domain import Money


@dataclass(frozen=True)
class ReservationEventPayload:
    """予約のライフサイクルイベント（確定・キャンセル・チェックインリマインダー）"""

    reservation_id: str
    guest: Recipient
    service_name: str
    venue_name: str
    check_in: datetime
    check_out: datetime
    total: Money
    confirmation_code: str | None = None
    # キャンセル時のみ
    refund_amount: Money | None = None
    cancel_reason: str | None = None


@dataclass(frozen=True)
class PaymentEventPayload:
    """決済完了イベント"""

    reservation_id: str
    guest: Recipient
    amount: Money
    payment_method: str
    transaction_id: str
    payment_date: datetime


@dataclass(frozen=True)
class AdminAlert:
    """管理者向けアラート"""

    subject: str
    message: str
    type: NotificationType = NotificationType.SYSTEM_ALERT
    metadata: dict[str, Any] = field(default_factory=dict)
