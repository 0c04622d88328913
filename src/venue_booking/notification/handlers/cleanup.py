from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from venue_booking.notification.applications.cleanup_notifications import (
    CleanupNotificationsService,
)
from venue_booking.notification.handlers.request_models import CleanupRequest
from venue_booking.notification.handlers.response_models import (
    ErrorResponse,
    SuccessResponse,
)
from venue_booking.notification.infrastructure.dynamodb_notification_repository import (
    DynamoDBNotificationRepository,
)
from venue_booking.shared.domain.exception import BusinessRuleViolationException

logger = Logger()

repository = DynamoDBNotificationRepository()
service = CleanupNotificationsService(repository=repository)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """古い通知の定期削除 Lambda Handler"""
    logger.info("Received notification cleanup request")

    payload = event.get("Payload", event) or {}
    request = CleanupRequest.model_validate(payload)
    try:
        deleted = service.cleanup(request.retention_days)
    except BusinessRuleViolationException as e:
        return ErrorResponse(error_code=e.code, message=str(e)).model_dump()

    return SuccessResponse(
        data={"deleted": deleted, "retention_days": request.retention_days}
    ).model_dump()
