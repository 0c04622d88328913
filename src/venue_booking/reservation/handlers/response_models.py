from __future__ import annotations

from pydantic import BaseModel

from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleResult,
)
from venue_booking.reservation.domain.entity import Reservation


class NotificationSummary(BaseModel):
    guest_notified: bool
    admin_notified: bool


class ReservationData(BaseModel):
    """予約データのレスポンスモデル"""

    reservation_id: str
    confirmation_id: str
    status: str
    check_in: str
    check_out: str
    total_amount: str
    currency: str
    refund_status: str | None = None
    notification: NotificationSummary | None = None


class CancellationData(BaseModel):
    """キャンセル結果のレスポンスモデル"""

    reservation_id: str
    confirmation_id: str
    status: str
    cancelled_at: str
    refund_amount: str
    refund_currency: str
    refund_status: str
    cancel_reason: str
    # 既にキャンセル済みだった（今回は何も実行していない）
    replayed: bool = False
    notification: NotificationSummary | None = None


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: CancellationData | ReservationData


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str


def _summary(result: LifecycleResult | None) -> NotificationSummary | None:
    if result is None:
        return None
    return NotificationSummary(
        guest_notified=result.guest_notified,
        admin_notified=result.admin_notified,
    )


def to_cancellation_response(
    reservation: Reservation,
    replayed: bool = False,
    notification: LifecycleResult | None = None,
) -> dict:
    """キャンセル済みの Reservation をレスポンス辞書に変換する"""
    return SuccessResponse(
        data=CancellationData(
            reservation_id=str(reservation.id),
            confirmation_id=str(reservation.confirmation_code),
            status=reservation.status.value,
            cancelled_at=reservation.cancelled_at.isoformat(),
            refund_amount=str(reservation.refund_amount.amount),
            refund_currency=str(reservation.refund_amount.currency),
            refund_status=reservation.refund_status.value,
            cancel_reason=reservation.cancel_reason or "",
            replayed=replayed,
            notification=_summary(notification),
        )
    ).model_dump()


def to_reservation_response(
    reservation: Reservation, notification: LifecycleResult | None = None
) -> dict:
    return SuccessResponse(
        data=ReservationData(
            reservation_id=str(reservation.id),
            confirmation_id=str(reservation.confirmation_code),
            status=reservation.status.value,
            check_in=reservation.stay_period.check_in.isoformat(),
            check_out=reservation.stay_period.check_out.isoformat(),
            total_amount=str(reservation.total.amount),
            currency=str(reservation.total.currency),
            refund_status=(
                reservation.refund_status.value if reservation.refund_status else None
            ),
            notification=_summary(notification),
        )
    ).model_dump()


def to_error_response(error_code: str, message: str) -> dict:
    return ErrorResponse(error_code=error_code, message=message).model_dump()
