from pydantic import ValidationError

from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleEventCoordinator,
)
from venue_booking.notification.domain.value_object import Recipient
from venue_booking.notification.handlers.request_models import (
    AdminAlertRequest,
    PaymentEventRequest,
    ReservationEventRequest,
    UserRegisteredRequest,
)
from venue_booking.notification.handlers.response_models import (
    ErrorResponse,
    LifecycleData,
    SuccessResponse,
    to_admin_alert_data,
    to_lifecycle_data,
)
from venue_booking.shared.utils.logger import get_logger

RESERVATION_EVENTS = ("RESERVATION_CREATED", "RESERVATION_CANCELLED", "CHECK_IN_REMINDER")

logger = get_logger("notification")


def route_lifecycle_event(
    payload: dict,
    coordinator: LifecycleEventCoordinator,
    admin: Recipient | None = None,
) -> dict:
    """event_type に応じてコーディネーターの操作を呼び分け、レスポンスを返す

    入力の不備は VALIDATION_ERROR、管理者の宛先が未設定のまま ADMIN_ALERT を
    受けた場合は CONFIGURATION_ERROR を返す。通知の失敗は例外にしない。
    """
    event_type = payload.get("event_type")
    try:
        data = _route(event_type, payload, coordinator, admin)
    except (ValidationError, ValueError) as e:
        logger.warning("Invalid lifecycle event", extra={"error": str(e)})
        return ErrorResponse(error_code="VALIDATION_ERROR", message=str(e)).model_dump()

    if data is None:
        return ErrorResponse(
            error_code="CONFIGURATION_ERROR",
            message="Admin recipient is not configured",
        ).model_dump()
    return SuccessResponse(data=data.model_dump()).model_dump()


def _route(
    event_type: str | None,
    payload: dict,
    coordinator: LifecycleEventCoordinator,
    admin: Recipient | None,
) -> LifecycleData | None:
    if event_type in RESERVATION_EVENTS:
        reservation = ReservationEventRequest.model_validate(payload).to_payload()
        if event_type == "RESERVATION_CREATED":
            result = coordinator.on_reservation_created(reservation, admin=admin)
        elif event_type == "RESERVATION_CANCELLED":
            result = coordinator.on_reservation_cancelled(reservation, admin=admin)
        else:
            result = coordinator.send_check_in_reminder(reservation)
        return to_lifecycle_data(event_type, result)

    if event_type == "PAYMENT_CONFIRMED":
        payment = PaymentEventRequest.model_validate(payload).to_payload()
        result = coordinator.on_payment_confirmed(payment, admin=admin)
        return to_lifecycle_data(event_type, result)

    if event_type == "USER_REGISTERED":
        user = UserRegisteredRequest.model_validate(payload).user.to_recipient()
        return to_lifecycle_data(event_type, coordinator.on_user_registered(user))

    if event_type == "ADMIN_ALERT":
        alert = AdminAlertRequest.model_validate(payload).to_alert()
        if admin is None:
            logger.warning("Admin alert dropped, no admin recipient configured")
            return None
        return to_admin_alert_data(coordinator.send_admin_alert(admin, alert))

    raise ValueError(f"Unsupported event_type: {event_type}")
