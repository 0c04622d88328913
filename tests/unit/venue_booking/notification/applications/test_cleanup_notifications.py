from datetime import timedelta

import pytest

from venue_booking.notification.applications.cleanup_notifications import (
    CleanupNotificationsService,
)
from venue_booking.shared.domain.exception import BusinessRuleViolationException


@pytest.fixture
def service(notification_repository, clock):
    return CleanupNotificationsService(repository=notification_repository, clock=clock)


class TestCleanupNotificationsService:
    def test_deletes_notifications_older_than_retention(
        self, service, notification_repository, create_notification
    ):
        notification_repository.save(create_notification("fresh", age=timedelta(days=89)))
        notification_repository.save(create_notification("old", age=timedelta(days=91)))

        deleted = service.cleanup()

        assert deleted == 1
        assert list(notification_repository.items) == ["fresh"]

    @pytest.mark.parametrize("retention_days", [6, 366, 0])
    def test_retention_out_of_range_is_rejected(self, service, retention_days):
        with pytest.raises(BusinessRuleViolationException):
            service.cleanup(retention_days)

    @pytest.mark.parametrize("retention_days", [7, 365])
    def test_retention_bounds_are_accepted(self, service, retention_days):
        assert service.cleanup(retention_days) == 0
