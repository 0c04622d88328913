from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from venue_booking.notification.applications.dispatch_notification import (
    NotificationDispatcher,
)
from venue_booking.notification.applications.lifecycle_coordinator import (
    LifecycleEventCoordinator,
)
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.infrastructure.basic_template_renderer import (
    BasicTemplateRenderer,
)
from venue_booking.reservation.applications.cancel_reservation import (
    CancelReservationService,
)
from venue_booking.reservation.applications.notify_lifecycle import (
    ReservationLifecycleNotifier,
)
from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.shared.domain.exception import AlreadyCancelledException

RESERVATION_ID = ReservationId(value="res-001")


@pytest.fixture
def message_sender():
    sender = MagicMock()
    sender.send.return_value = "ses-1"
    return sender


@pytest.fixture
def notifier(message_sender, notification_repository, admin_recipient, clock):
    dispatcher = NotificationDispatcher(
        message_sender=message_sender,
        notification_repository=notification_repository,
        template_renderer=BasicTemplateRenderer(),
        clock=clock,
    )
    return ReservationLifecycleNotifier(
        LifecycleEventCoordinator(dispatcher), admin=admin_recipient
    )


@pytest.fixture
def cancel_service(reservation_repository, clock):
    return CancelReservationService(repository=reservation_repository, clock=clock)


class TestCancellationFlow:
    """キャンセル確定から通知までの一連の流れ"""

    def test_cancel_then_notify_guest_and_admin(
        self,
        cancel_service,
        notifier,
        reservation_repository,
        notification_repository,
        create_reservation,
        now,
    ):
        reservation_repository.save(create_reservation(check_in=now + timedelta(hours=36)))

        reservation = cancel_service.cancel(RESERVATION_ID, reason="Change of plans")
        result = notifier.notify(reservation)

        assert reservation.refund_amount.amount == Decimal("500.00")
        assert result.guest_notified
        assert result.admin_notified
        guest_notification = next(
            n
            for n in notification_repository.items.values()
            if n.type == NotificationType.RESERVATION_CANCELLATION
        )
        assert guest_notification.metadata["refund_amount"] == "500.00"

    def test_failing_message_channel_never_rolls_back_cancellation(
        self,
        cancel_service,
        notifier,
        message_sender,
        reservation_repository,
        notification_repository,
        create_reservation,
        now,
    ):
        message_sender.send.side_effect = ConnectionError("mail provider unreachable")
        reservation_repository.save(create_reservation(check_in=now + timedelta(hours=72)))

        reservation = cancel_service.cancel(RESERVATION_ID)
        result = notifier.notify(reservation)

        assert not result.guest_notified
        assert not result.admin_notified
        assert not result.success
        stored = reservation_repository.find_by_id(RESERVATION_ID)
        assert stored.status == ReservationStatus.CANCELLED
        assert stored.refund_amount.amount == Decimal("1000.00")
        assert stored.refund_status == RefundStatus.PENDING
        assert len(notification_repository.items) == 2

    def test_repeated_cancel_does_not_notify_again(
        self,
        cancel_service,
        notifier,
        message_sender,
        reservation_repository,
        create_reservation,
    ):
        reservation_repository.save(create_reservation())
        notifier.notify(cancel_service.cancel(RESERVATION_ID))
        sent = message_sender.send.call_count

        with pytest.raises(AlreadyCancelledException) as exc_info:
            cancel_service.cancel(RESERVATION_ID)

        assert exc_info.value.reservation.status == ReservationStatus.CANCELLED
        assert message_sender.send.call_count == sent
