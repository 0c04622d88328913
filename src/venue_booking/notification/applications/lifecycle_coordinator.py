from dataclasses import dataclass
from typing import Callable

from venue_booking.notification.applications.dispatch_notification import (
    NotificationDispatcher,
    describe_error,
)
from venue_booking.notification.domain.event import (
    AdminAlert,
    PaymentEventPayload,
    ReservationEventPayload,
)
from venue_booking.notification.domain.template import notification_templates
from venue_booking.notification.domain.value_object import (
    DispatchResult,
    NotificationContent,
    Recipient,
)
from venue_booking.shared.utils.logger import get_logger

logger = get_logger("notification")


@dataclass(frozen=True)
class LifecycleResult:
    """ライフサイクルイベント 1 件分の通知結果"""

    guest: DispatchResult
    admin: DispatchResult | None = None

    @property
    def guest_notified(self) -> bool:
        return self.guest.overall_success

    @property
    def admin_notified(self) -> bool:
        return self.admin is not None and self.admin.overall_success

    @property
    def success(self) -> bool:
        return self.guest_notified

    def to_dict(self) -> dict:
        return {
            "success": self.success,
            "guest_notified": self.guest_notified,
            "admin_notified": self.admin_notified,
            "guest": self.guest.to_dict(),
            "admin": self.admin.to_dict() if self.admin is not None else None,
        }


class LifecycleEventCoordinator:
    """予約・決済のライフサイクルイベントを通知に変換する

    予約の状態は変更しない。送信失敗は LifecycleResult として返し、例外にはしない。
    """

    def __init__(self, dispatcher: NotificationDispatcher) -> None:
        self._dispatcher = dispatcher

    def on_reservation_created(
        self, payload: ReservationEventPayload, admin: Recipient | None = None
    ) -> LifecycleResult:
        guest = self._dispatch(
            payload.guest, lambda: notification_templates.reservation_confirmed(payload)
        )
        admin_result = self._dispatch_admin(
            admin, lambda: notification_templates.reservation_created_alert(payload)
        )
        return self._finish("RESERVATION_CREATED", payload.reservation_id, guest, admin_result)

    def on_reservation_cancelled(
        self, payload: ReservationEventPayload, admin: Recipient | None = None
    ) -> LifecycleResult:
        guest = self._dispatch(
            payload.guest, lambda: notification_templates.reservation_cancelled(payload)
        )
        admin_result = self._dispatch_admin(
            admin, lambda: notification_templates.reservation_cancelled_alert(payload)
        )
        return self._finish(
            "RESERVATION_CANCELLED", payload.reservation_id, guest, admin_result
        )

    def on_payment_confirmed(
        self, payload: PaymentEventPayload, admin: Recipient | None = None
    ) -> LifecycleResult:
        guest = self._dispatch(
            payload.guest, lambda: notification_templates.payment_confirmed(payload)
        )
        admin_result = self._dispatch_admin(
            admin, lambda: notification_templates.payment_confirmed_alert(payload)
        )
        return self._finish("PAYMENT_CONFIRMED", payload.reservation_id, guest, admin_result)

    def send_check_in_reminder(self, payload: ReservationEventPayload) -> LifecycleResult:
        guest = self._dispatch(
            payload.guest, lambda: notification_templates.check_in_reminder(payload)
        )
        return self._finish("CHECK_IN_REMINDER", payload.reservation_id, guest, None)

    def on_user_registered(self, recipient: Recipient) -> LifecycleResult:
        guest = self._dispatch(
            recipient, lambda: notification_templates.welcome(recipient)
        )
        return self._finish("USER_REGISTERED", str(recipient.user_id), guest, None)

    def send_admin_alert(self, admin: Recipient, alert: AdminAlert) -> DispatchResult:
        return self._dispatch(admin, lambda: notification_templates.admin_alert(alert))

    def _dispatch_admin(
        self, admin: Recipient | None, build_alert: Callable[[], AdminAlert]
    ) -> DispatchResult | None:
        if admin is None:
            return None
        return self._dispatch(
            admin, lambda: notification_templates.admin_alert(build_alert())
        )

    def _dispatch(
        self, recipient: Recipient, build_content: Callable[[], NotificationContent]
    ) -> DispatchResult:
        try:
            return self._dispatcher.dispatch(recipient, build_content())
        except Exception as e:
            logger.exception(
                "Unexpected error while dispatching notification",
                extra={"user_id": str(recipient.user_id)},
            )
            return DispatchResult.failed(describe_error(e))

    def _finish(
        self,
        event_type: str,
        reference: str,
        guest: DispatchResult,
        admin: DispatchResult | None,
    ) -> LifecycleResult:
        result = LifecycleResult(guest=guest, admin=admin)
        logger.info(
            "Lifecycle event notified",
            extra={
                "event_type": event_type,
                "reference": reference,
                "guest_notified": result.guest_notified,
                "admin_notified": result.admin_notified,
            },
        )
        return result
