from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleEventCoordinator,
    LifecycleResult,
)
from venue_booking.notification.domain.event import ReservationEventPayload
from venue_booking.notification.domain.value_object import Recipient
from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import ReservationStatus
from venue_booking.reservation.domain.event import ReservationStatusChanged


def to_event_payload(reservation: Reservation) -> ReservationEventPayload:
    """予約を通知用のイベントペイロードに変換する"""
    guest = reservation.guest
    return ReservationEventPayload(
        reservation_id=str(reservation.id),
        confirmation_code=str(reservation.confirmation_code),
        guest=Recipient(user_id=guest.user_id, email=guest.email, name=guest.name),
        service_name=reservation.service_name,
        venue_name=reservation.venue_name,
        check_in=reservation.stay_period.check_in,
        check_out=reservation.stay_period.check_out,
        total=reservation.total,
        refund_amount=reservation.refund_amount,
        cancel_reason=reservation.cancel_reason,
    )


class ReservationLifecycleNotifier:
    """コミット済みの予約のステータス変更を通知に変換する

    永続化が成功した後に呼ぶこと。予約自体は変更しない。
    """

    def __init__(
        self,
        coordinator: LifecycleEventCoordinator,
        admin: Recipient | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._admin = admin

    def notify(self, reservation: Reservation) -> LifecycleResult | None:
        """保留中のドメインイベントを取り出して通知する

        通知対象のイベントがなければ None を返す。
        """
        result = None
        for event in reservation.flush_domain_events():
            if not isinstance(event, ReservationStatusChanged):
                continue
            if event.to_status == ReservationStatus.CONFIRMED:
                result = self._coordinator.on_reservation_created(
                    to_event_payload(reservation), admin=self._admin
                )
            elif event.to_status == ReservationStatus.CANCELLED:
                result = self._coordinator.on_reservation_cancelled(
                    to_event_payload(reservation), admin=self._admin
                )
        return result
