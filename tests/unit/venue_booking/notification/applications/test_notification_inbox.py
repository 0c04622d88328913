from datetime import timedelta

import pytest

from venue_booking.notification.applications.notification_inbox import (
    MAX_PAGE_SIZE,
    NotificationInboxService,
)
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.repository import NotificationFilter
from venue_booking.notification.domain.value_object import NotificationId
from venue_booking.shared.domain import UserId
from venue_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)

USER = UserId(value="user-1")
OTHER = UserId(value="user-2")


@pytest.fixture
def service(notification_repository, clock):
    return NotificationInboxService(repository=notification_repository, clock=clock)


@pytest.fixture
def seeded(notification_repository, create_notification):
    for i in range(5):
        notification_repository.save(
            create_notification(notification_id=f"n-{i}", age=timedelta(hours=i))
        )
    notification_repository.save(
        create_notification(
            notification_id="n-read",
            is_read=True,
            type=NotificationType.PROMOTION,
            age=timedelta(days=1),
        )
    )
    notification_repository.save(create_notification(notification_id="n-other", user_id="user-2"))
    return notification_repository


class TestNotificationInboxService:
    def test_list_is_newest_first_and_paginated(self, service, seeded):
        page = service.list_notifications(USER, page=1, limit=4)

        assert [str(n.id) for n in page.items] == ["n-0", "n-1", "n-2", "n-3"]
        assert page.total == 6
        assert page.has_more

        last = service.list_notifications(USER, page=2, limit=4)
        assert [str(n.id) for n in last.items] == ["n-4", "n-read"]
        assert not last.has_more

    def test_list_filters(self, service, seeded):
        unread = service.list_notifications(USER, NotificationFilter(is_read=False))
        promotions = service.list_notifications(USER, NotificationFilter(type=NotificationType.PROMOTION))

        assert unread.total == 5
        assert [str(n.id) for n in promotions.items] == ["n-read"]

    def test_limit_is_capped(self, service, seeded):
        assert service.list_notifications(USER, limit=1000).limit == MAX_PAGE_SIZE

    def test_invalid_page_is_rejected(self, service):
        with pytest.raises(BusinessRuleViolationException):
            service.list_notifications(USER, page=0)

    def test_unread_count(self, service, seeded):
        assert service.unread_count(USER) == 5
        assert service.unread_count(OTHER) == 1

    def test_other_users_notification_is_not_found(self, service, seeded):
        with pytest.raises(ResourceNotFoundException):
            service.get(USER, NotificationId(value="n-other"))

    def test_mark_as_read_skips_unknown_and_foreign_ids(self, service, seeded, now):
        updated = service.mark_as_read(
            USER,
            [
                NotificationId(value="n-0"),
                NotificationId(value="n-read"),
                NotificationId(value="n-other"),
                NotificationId(value="missing"),
            ],
        )

        assert updated == 1
        marked = service.get(USER, NotificationId(value="n-0"))
        assert marked.is_read
        assert marked.updated_at == now
        assert not seeded.find_by_id(NotificationId(value="n-other")).is_read

    def test_mark_all_as_read(self, service, seeded):
        assert service.mark_all_as_read(USER) == 5
        assert service.unread_count(USER) == 0
        assert service.unread_count(OTHER) == 1

    def test_delete(self, service, seeded):
        service.delete(USER, NotificationId(value="n-0"))

        with pytest.raises(ResourceNotFoundException):
            service.get(USER, NotificationId(value="n-0"))

    def test_delete_other_users_notification_is_not_found(self, service, seeded):
        with pytest.raises(ResourceNotFoundException):
            service.delete(USER, NotificationId(value="n-other"))
        assert seeded.find_by_id(NotificationId(value="n-other")) is not None

    def test_create_custom(self, service, notification_repository):
        notification = service.create_custom(
            USER, NotificationType.PROMOTION, "Summer sale", "20% off", {"code": "SUN20"}
        )

        assert notification_repository.find_by_id(notification.id) is notification
        assert notification.metadata == {"code": "SUN20"}
        assert not notification.is_read
