import copy
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.repository import (
    NotificationFilter,
    NotificationPage,
    NotificationRepository,
)
from venue_booking.notification.domain.value_object import NotificationId, Recipient
from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.value_object import (
    ConfirmationCode,
    Guest,
    ReservationId,
    StayPeriod,
)
from venue_booking.shared.domain import Currency, Money, UserId
from venue_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)

NOW = datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


class InMemoryReservationRepository(ReservationRepository):
    """テスト用の ReservationRepository（保存時にスナップショットを取る）"""

    def __init__(self) -> None:
        self.items: dict[str, Reservation] = {}
        self.update_count = 0

    def save(self, reservation: Reservation) -> None:
        if str(reservation.id) in self.items:
            raise DuplicateResourceException(f"Reservation already exists: {reservation.id}")
        self.items[str(reservation.id)] = self._snapshot(reservation)

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        stored = self.items.get(str(reservation_id))
        return copy.deepcopy(stored) if stored is not None else None

    def update(
        self, reservation, expected_status=None, expected_refund_status=None
    ) -> None:
        stored = self.items[str(reservation.id)]
        if expected_status is not None and stored.status != expected_status:
            raise OptimisticLockException("status conflict")
        if (
            expected_refund_status is not None
            and stored.refund_status != expected_refund_status
        ):
            raise OptimisticLockException("refund status conflict")
        self.items[str(reservation.id)] = self._snapshot(reservation)
        self.update_count += 1

    def _snapshot(self, reservation: Reservation) -> Reservation:
        snapshot = copy.deepcopy(reservation)
        snapshot.flush_domain_events()
        return snapshot


class InMemoryNotificationRepository(NotificationRepository):
    """テスト用の Notification Store"""

    def __init__(self) -> None:
        self.items: dict[str, Notification] = {}

    def save(self, notification: Notification) -> None:
        self.items[str(notification.id)] = notification

    def find_by_id(self, notification_id: NotificationId) -> Notification | None:
        """テスト検証用（所有者を問わない）"""
        return self.items.get(str(notification_id))

    def find_for_user(self, notification_id, user_id):
        notification = self.items.get(str(notification_id))
        if notification is None or not notification.is_owned_by(user_id):
            return None
        return notification

    def list_for_user(
        self,
        user_id: UserId,
        notification_filter: NotificationFilter,
        page: int,
        limit: int,
    ) -> NotificationPage:
        matched = sorted(
            (
                n
                for n in self.items.values()
                if n.is_owned_by(user_id) and notification_filter.matches(n)
            ),
            key=lambda n: n.created_at,
            reverse=True,
        )
        start = (page - 1) * limit
        return NotificationPage(
            items=matched[start : start + limit],
            total=len(matched),
            page=page,
            limit=limit,
        )

    def count_unread(self, user_id: UserId) -> int:
        return sum(
            1 for n in self.items.values() if n.is_owned_by(user_id) and not n.is_read
        )

    def update(self, notification: Notification) -> None:
        self.items[str(notification.id)] = notification

    def delete(self, notification_id, user_id) -> bool:
        if self.find_for_user(notification_id, user_id) is None:
            return False
        del self.items[str(notification_id)]
        return True

    def delete_created_before(self, cutoff: datetime) -> int:
        old = [key for key, n in self.items.items() if n.created_at < cutoff]
        for key in old:
            del self.items[key]
        return len(old)


@pytest.fixture
def now():
    """全テスト共通の固定時刻"""
    return NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def reservation_repository():
    return InMemoryReservationRepository()


@pytest.fixture
def notification_repository():
    return InMemoryNotificationRepository()


@pytest.fixture
def recipient():
    return Recipient(
        user_id=UserId(value="user-1"), email="guest@example.com", name="Ana Lopez"
    )


@pytest.fixture
def admin_recipient():
    return Recipient(
        user_id=UserId(value="admin-1"), email="admin@example.com", name="Admin"
    )


@pytest.fixture
def create_reservation():
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: ReservationStatus = ReservationStatus.CONFIRMED,
        reservation_id: str = "res-001",
        user_id: str = "user-1",
        check_in: datetime = NOW + timedelta(hours=72),
        total_amount: Decimal = Decimal("1000.00"),
        currency: str = "MXN",
        refund_amount: Decimal | None = None,
        refund_status: RefundStatus | None = None,
        cancelled_at: datetime | None = None,
        cancel_reason: str | None = None,
        completed_payments: int = 1,
    ) -> Reservation:
        if status == ReservationStatus.CANCELLED and cancelled_at is None:
            cancelled_at = NOW - timedelta(hours=1)
            refund_amount = total_amount if refund_amount is None else refund_amount
            refund_status = refund_status or RefundStatus.PENDING
            cancel_reason = cancel_reason or "Change of plans"
        return Reservation(
            id=ReservationId(value=reservation_id),
            confirmation_code=ConfirmationCode("K7QX2M9P"),
            guest=Guest(
                user_id=UserId(value=user_id), name="Ana Lopez", email="guest@example.com"
            ),
            service_name="Deluxe Room",
            venue_name="Hotel Sol",
            stay_period=StayPeriod(
                check_in=check_in, check_out=check_in + timedelta(days=2)
            ),
            total=Money(amount=total_amount, currency=Currency(currency)),
            status=status,
            refund_amount=(
                Money(amount=refund_amount, currency=Currency(currency))
                if refund_amount is not None
                else None
            ),
            refund_status=refund_status,
            cancel_reason=cancel_reason,
            cancelled_at=cancelled_at,
            completed_payments=completed_payments,
        )

    return _factory
