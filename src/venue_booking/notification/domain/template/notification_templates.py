"""通知テンプレート

イベント種別ごとに NotificationContent（タイトル・本文・件名・テンプレート名・メタデータ）を組み立てる。
メタデータは DynamoDB / JSON にそのまま保存できるよう文字列と真偽値だけで構成する。
"""

from datetime import datetime

from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.event import (
    AdminAlert,
    PaymentEventPayload,
    ReservationEventPayload,
)
from venue_booking.notification.domain.value_object import (
    NotificationContent,
    Recipient,
)
from venue_booking.shared.domain import Money

ADMIN_SUBJECT_PREFIX = "[Admin]"


def format_money(money: Money) -> str:
    """例: MXN 1,250.00 / JPY 5,000"""
    places = -money.currency.quantum.as_tuple().exponent
    return f"{money.currency} {money.amount:,.{places}f}"


def format_date(value: datetime) -> str:
    return value.strftime("%Y-%m-%d")


def _reference(payload: ReservationEventPayload) -> str:
    return payload.confirmation_code or payload.reservation_id


def _reservation_metadata(payload: ReservationEventPayload) -> dict:
    return {
        "reservation_id": payload.reservation_id,
        "confirmation_code": payload.confirmation_code,
        "service_name": payload.service_name,
        "venue_name": payload.venue_name,
        "check_in": payload.check_in.isoformat(),
        "check_out": payload.check_out.isoformat(),
        "total_amount": str(payload.total.amount),
        "currency": str(payload.total.currency),
    }


def reservation_confirmed(payload: ReservationEventPayload) -> NotificationContent:
    return NotificationContent(
        type=NotificationType.RESERVATION_CONFIRMATION,
        title="Reservation confirmed",
        message=(
            f"Your reservation for {payload.service_name} at {payload.venue_name} "
            f"on {format_date(payload.check_in)} is confirmed. "
            f"Confirmation code: {_reference(payload)}."
        ),
        subject=f"Reservation confirmed - {_reference(payload)}",
        template_name="reservation-confirmation",
        metadata=_reservation_metadata(payload),
    )


def reservation_cancelled(payload: ReservationEventPayload) -> NotificationContent:
    """キャンセル通知（返金額が未確定のときは 0 として扱う）"""
    refund = payload.refund_amount or Money.zero(payload.total.currency)
    if refund.is_zero():
        refund_text = "No refund applies to this cancellation."
    else:
        refund_text = f"A refund of {format_money(refund)} will be processed."

    metadata = _reservation_metadata(payload)
    metadata["refund_amount"] = str(refund.amount)
    metadata["cancel_reason"] = payload.cancel_reason or ""

    return NotificationContent(
        type=NotificationType.RESERVATION_CANCELLATION,
        title="Reservation cancelled",
        message=(
            f"Your reservation for {payload.service_name} at {payload.venue_name} "
            f"on {format_date(payload.check_in)} has been cancelled. {refund_text}"
        ),
        subject=f"Reservation cancelled - {_reference(payload)}",
        template_name="reservation-cancellation",
        metadata=metadata,
    )


def payment_confirmed(payload: PaymentEventPayload) -> NotificationContent:
    return NotificationContent(
        type=NotificationType.PAYMENT_CONFIRMATION,
        title="Payment received",
        message=(
            f"Your payment of {format_money(payload.amount)} "
            f"via {payload.payment_method} has been processed successfully."
        ),
        subject=f"Payment confirmation - {payload.transaction_id}",
        template_name="payment-confirmation",
        metadata={
            "reservation_id": payload.reservation_id,
            "amount": str(payload.amount.amount),
            "currency": str(payload.amount.currency),
            "payment_method": payload.payment_method,
            "transaction_id": payload.transaction_id,
            "payment_date": payload.payment_date.isoformat(),
        },
    )


def check_in_reminder(payload: ReservationEventPayload) -> NotificationContent:
    return NotificationContent(
        type=NotificationType.CHECK_IN_REMINDER,
        title="Upcoming reservation",
        message=(
            f"Reminder: your reservation for {payload.service_name} at "
            f"{payload.venue_name} starts on {format_date(payload.check_in)}. "
            f"Confirmation code: {_reference(payload)}."
        ),
        subject=f"Check-in reminder - {_reference(payload)}",
        template_name="check-in-reminder",
        metadata=_reservation_metadata(payload),
    )


def admin_alert(alert: AdminAlert) -> NotificationContent:
    return NotificationContent(
        type=alert.type,
        title=alert.subject,
        message=alert.message,
        subject=f"{ADMIN_SUBJECT_PREFIX} {alert.subject}",
        template_name="admin-alert",
        metadata=dict(alert.metadata),
    )


def welcome(recipient: Recipient) -> NotificationContent:
    return NotificationContent(
        type=NotificationType.SYSTEM,
        title="Welcome",
        message=f"Welcome, {recipient.display_name}! Your account is ready.",
        subject="Welcome to Venue Booking",
        template_name="welcome",
        metadata={"email": recipient.email},
    )


# 管理者向けアラートの組み立て


def reservation_created_alert(payload: ReservationEventPayload) -> AdminAlert:
    return AdminAlert(
        subject="New reservation",
        message=(
            f"{payload.guest.display_name} booked {payload.service_name} at "
            f"{payload.venue_name} on {format_date(payload.check_in)} "
            f"({format_money(payload.total)})."
        ),
        type=NotificationType.SYSTEM_ALERT,
        metadata=_reservation_metadata(payload),
    )


def reservation_cancelled_alert(payload: ReservationEventPayload) -> AdminAlert:
    refund = payload.refund_amount or Money.zero(payload.total.currency)
    metadata = _reservation_metadata(payload)
    metadata["refund_amount"] = str(refund.amount)
    return AdminAlert(
        subject="Reservation cancelled",
        message=(
            f"{payload.guest.display_name} cancelled reservation "
            f"{_reference(payload)}. Refund: {format_money(refund)}."
        ),
        type=NotificationType.SYSTEM_ALERT,
        metadata=metadata,
    )


def payment_confirmed_alert(payload: PaymentEventPayload) -> AdminAlert:
    return AdminAlert(
        subject="Payment received",
        message=(
            f"{payload.guest.display_name} paid {format_money(payload.amount)} "
            f"for reservation {payload.reservation_id} "
            f"(transaction {payload.transaction_id})."
        ),
        type=NotificationType.SYSTEM_ALERT,
        metadata={
            "reservation_id": payload.reservation_id,
            "transaction_id": payload.transaction_id,
            "amount": str(payload.amount.amount),
            "currency": str(payload.amount.currency),
        },
    )
