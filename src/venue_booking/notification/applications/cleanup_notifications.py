from datetime import timedelta

from venue_booking.notification.domain.repository import NotificationRepository
from venue_booking.shared.domain.exception import BusinessRuleViolationException
from venue_booking.shared.utils.clock import Clock, utc_now
from venue_booking.shared.utils.logger import get_logger

DEFAULT_RETENTION_DAYS = 90
MIN_RETENTION_DAYS = 7
MAX_RETENTION_DAYS = 365

logger = get_logger("notification")


class CleanupNotificationsService:
    """保持期間を過ぎた通知を削除する"""

    def __init__(
        self, repository: NotificationRepository, clock: Clock = utc_now
    ) -> None:
        self._repository = repository
        self._clock = clock

    def cleanup(self, retention_days: int = DEFAULT_RETENTION_DAYS) -> int:
        if not MIN_RETENTION_DAYS <= retention_days <= MAX_RETENTION_DAYS:
            raise BusinessRuleViolationException(
                f"retention_days must be between {MIN_RETENTION_DAYS} "
                f"and {MAX_RETENTION_DAYS}: {retention_days}"
            )
        cutoff = self._clock() - timedelta(days=retention_days)
        deleted = self._repository.delete_created_before(cutoff)
        logger.info(
            "Old notifications deleted",
            extra={
                "retention_days": retention_days,
                "cutoff": cutoff.isoformat(),
                "deleted": deleted,
            },
        )
        return deleted
