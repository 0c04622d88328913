from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from venue_booking.notification.applications.dispatch_notification import (
    NotificationDispatcher,
)
from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.event import (
    PaymentEventPayload,
    ReservationEventPayload,
)
from venue_booking.notification.domain.value_object import (
    NotificationContent,
    NotificationId,
    RenderedDocument,
)
from venue_booking.shared.domain import Money, UserId


@pytest.fixture
def message_sender():
    sender = MagicMock()
    sender.send.return_value = "ses-message-1"
    return sender


@pytest.fixture
def template_renderer():
    renderer = MagicMock()
    renderer.render.return_value = RenderedDocument(html="<p>hi</p>", text="hi")
    return renderer


@pytest.fixture
def dispatcher(message_sender, notification_repository, template_renderer, clock):
    return NotificationDispatcher(
        message_sender=message_sender,
        notification_repository=notification_repository,
        template_renderer=template_renderer,
        clock=clock,
    )


@pytest.fixture
def content():
    return NotificationContent(
        type=NotificationType.RESERVATION_CONFIRMATION,
        title="Reservation confirmed",
        message="Your reservation is confirmed.",
        subject="Reservation confirmed - K7QX2M9P",
        template_name="reservation-confirmation",
        metadata={"reservation_id": "res-001"},
    )


@pytest.fixture
def reservation_payload(recipient, now):
    return ReservationEventPayload(
        reservation_id="res-001",
        confirmation_code="K7QX2M9P",
        guest=recipient,
        service_name="Deluxe Room",
        venue_name="Hotel Sol",
        check_in=now + timedelta(days=3),
        check_out=now + timedelta(days=5),
        total=Money.mxn(Decimal("1250.00")),
    )


@pytest.fixture
def payment_payload(recipient, now):
    return PaymentEventPayload(
        reservation_id="res-001",
        guest=recipient,
        amount=Money.mxn(Decimal("1250.00")),
        payment_method="card",
        transaction_id="txn-42",
        payment_date=now,
    )


@pytest.fixture
def create_notification(now):
    """Notification を生成する Factory fixture"""

    def _factory(
        notification_id: str = "n-1",
        user_id: str = "user-1",
        type: NotificationType = NotificationType.SYSTEM,
        is_read: bool = False,
        age: timedelta = timedelta(0),
    ) -> Notification:
        return Notification(
            id=NotificationId(value=notification_id),
            user_id=UserId(value=user_id),
            type=type,
            title="Title",
            message="Message",
            created_at=now - age,
            is_read=is_read,
        )

    return _factory
