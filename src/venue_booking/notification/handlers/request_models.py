from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.event import (
    AdminAlert,
    PaymentEventPayload,
    ReservationEventPayload,
)
from venue_booking.notification.domain.value_object import Recipient
from venue_booking.shared.domain import Currency, Money, UserId
from venue_booking.shared.utils.validators import to_decimal


class RecipientRequest(BaseModel):
    """通知の宛先"""

    user_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3, examples=["guest@example.com"])
    name: str = ""

    def to_recipient(self) -> Recipient:
        return Recipient(user_id=UserId(value=self.user_id), email=self.email, name=self.name)


class ReservationEventRequest(BaseModel):
    """予約イベント（作成・キャンセル・チェックインリマインダー）の入力スキーマ"""

    event_type: Literal["RESERVATION_CREATED", "RESERVATION_CANCELLED", "CHECK_IN_REMINDER"]
    reservation_id: str = Field(..., min_length=1)
    confirmation_code: str | None = None
    guest: RecipientRequest
    service_name: str = Field(..., min_length=1)
    venue_name: str = Field(..., min_length=1)
    check_in: datetime
    check_out: datetime
    total_amount: Decimal = Field(..., ge=0)
    currency: str = Field(default="MXN", pattern="^[A-Za-z]{3}$")
    refund_amount: Decimal | None = Field(default=None, ge=0)
    cancel_reason: str | None = None

    @field_validator("total_amount", "refund_amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        """Decimalに変換する"""
        if v is None:
            return v
        return to_decimal(v)

    def to_payload(self) -> ReservationEventPayload:
        currency = Currency(self.currency)
        return ReservationEventPayload(
            reservation_id=self.reservation_id,
            confirmation_code=self.confirmation_code,
            guest=self.guest.to_recipient(),
            service_name=self.service_name,
            venue_name=self.venue_name,
            check_in=self.check_in,
            check_out=self.check_out,
            total=Money(self.total_amount, currency),
            refund_amount=(
                Money(self.refund_amount, currency)
                if self.refund_amount is not None
                else None
            ),
            cancel_reason=self.cancel_reason,
        )


class PaymentEventRequest(BaseModel):
    """決済完了イベントの入力スキーマ"""

    event_type: Literal["PAYMENT_CONFIRMED"]
    reservation_id: str = Field(..., min_length=1)
    guest: RecipientRequest
    amount: Decimal = Field(..., gt=0)
    currency: str = Field(default="MXN", pattern="^[A-Za-z]{3}$")
    payment_method: str = Field(..., min_length=1, examples=["card"])
    transaction_id: str = Field(..., min_length=1)
    payment_date: datetime

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    def to_payload(self) -> PaymentEventPayload:
        return PaymentEventPayload(
            reservation_id=self.reservation_id,
            guest=self.guest.to_recipient(),
            amount=Money(self.amount, Currency(self.currency)),
            payment_method=self.payment_method,
            transaction_id=self.transaction_id,
            payment_date=self.payment_date,
        )


class UserRegisteredRequest(BaseModel):
    """ユーザー登録イベントの入力スキーマ"""

    event_type: Literal["USER_REGISTERED"]
    user: RecipientRequest


class AdminAlertRequest(BaseModel):
    """管理者アラートの入力スキーマ"""

    event_type: Literal["ADMIN_ALERT"]
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)
    type: NotificationType = NotificationType.SYSTEM_ALERT
    metadata: dict[str, Any] = Field(default_factory=dict)

    def to_alert(self) -> AdminAlert:
        return AdminAlert(
            subject=self.subject,
            message=self.message,
            type=self.type,
            metadata=self.metadata,
        )


class ListNotificationsQuery(BaseModel):
    """通知一覧のクエリパラメータ"""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=20, ge=1)
    type: NotificationType | None = None
    is_read: bool | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None


class MarkReadRequest(BaseModel):
    """既読化リクエスト（ID 指定か全件のどちらか）"""

    notification_ids: list[str] = Field(default_factory=list)
    mark_all_as_read: bool = False


class CreateNotificationRequest(BaseModel):
    """アプリ内通知の作成リクエスト（管理者用）"""

    user_id: str = Field(..., min_length=1)
    type: NotificationType = NotificationType.SYSTEM
    title: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1, max_length=2000)
    metadata: dict[str, Any] = Field(default_factory=dict)


class CleanupRequest(BaseModel):
    """定期削除の入力（EventBridge Scheduler から呼ばれる）"""

    retention_days: int = 90
