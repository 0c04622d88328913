from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from venue_booking.notification.applications.notification_inbox import (
    NotificationInboxService,
)
from venue_booking.notification.domain.repository import NotificationFilter
from venue_booking.notification.domain.value_object import NotificationId
from venue_booking.notification.handlers.request_models import (
    CreateNotificationRequest,
    ListNotificationsQuery,
    MarkReadRequest,
)
from venue_booking.notification.handlers.response_models import (
    ErrorResponse,
    SuccessResponse,
    to_list_data,
    to_notification_data,
)
from venue_booking.notification.infrastructure.dynamodb_notification_repository import (
    DynamoDBNotificationRepository,
)
from venue_booking.shared.domain import Actor, UserId
from venue_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    ResourceNotFoundException,
)
from venue_booking.shared.utils import api_response
from venue_booking.shared.utils.auth import actor_from_claims

logger = Logger()

repository = DynamoDBNotificationRepository()
service = NotificationInboxService(repository=repository)


def _error(status_code: int, error_code: str, message: str) -> dict:
    return api_response(status_code, ErrorResponse(error_code=error_code, message=message))


def _ok(data, status_code: int = 200) -> dict:
    return api_response(status_code, SuccessResponse(data=data))


def _list(actor: Actor, query_params: dict) -> dict:
    query = ListNotificationsQuery.model_validate(query_params)
    page = service.list_notifications(
        actor.user_id,
        NotificationFilter(
            type=query.type,
            is_read=query.is_read,
            created_from=query.created_from,
            created_to=query.created_to,
        ),
        page=query.page,
        limit=query.limit,
    )
    return _ok(to_list_data(page, service.unread_count(actor.user_id)).model_dump())


def _get(actor: Actor, notification_id: str) -> dict:
    notification = service.get(actor.user_id, NotificationId(value=notification_id))
    return _ok(to_notification_data(notification).model_dump())


def _mark_read(actor: Actor, body: dict) -> dict:
    request = MarkReadRequest.model_validate(body)
    if request.mark_all_as_read:
        updated = service.mark_all_as_read(actor.user_id)
    elif request.notification_ids:
        updated = service.mark_as_read(
            actor.user_id, [NotificationId(value=i) for i in request.notification_ids]
        )
    else:
        return _error(
            400,
            "VALIDATION_ERROR",
            "Either notification_ids or mark_all_as_read is required",
        )
    return _ok({"updated": updated})


def _delete(actor: Actor, notification_id: str) -> dict:
    service.delete(actor.user_id, NotificationId(value=notification_id))
    return _ok({"deleted": notification_id})


def _create(actor: Actor, body: dict) -> dict:
    if not actor.is_admin:
        return _error(403, "FORBIDDEN", "Only administrators can create notifications")
    request = CreateNotificationRequest.model_validate(body)
    notification = service.create_custom(
        UserId(value=request.user_id),
        request.type,
        request.title,
        request.message,
        request.metadata,
    )
    return _ok(to_notification_data(notification).model_dump(), status_code=201)


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """アプリ内通知 API Lambda Handler

    GET    /notifications                    一覧
    GET    /notifications/{notification_id}  1 件取得
    PATCH  /notifications/read               既読化（ID 指定または全件）
    DELETE /notifications/{notification_id}  削除
    POST   /notifications                    作成（管理者のみ）
    """
    authorizer = event.request_context.authorizer
    actor = actor_from_claims(authorizer.jwt_claim if authorizer else None)
    if actor is None:
        return _error(401, "UNAUTHORIZED", "Authentication required")

    method = event.request_context.http.method
    notification_id = (event.path_parameters or {}).get("notification_id")
    logger.info(
        "Received notification request",
        extra={"method": method, "user_id": str(actor.user_id)},
    )

    try:
        if method == "GET" and notification_id:
            return _get(actor, notification_id)
        if method == "GET":
            return _list(actor, event.query_string_parameters or {})
        if method == "PATCH":
            return _mark_read(actor, event.json_body or {})
        if method == "DELETE" and notification_id:
            return _delete(actor, notification_id)
        if method == "POST":
            return _create(actor, event.json_body or {})
        return _error(405, "METHOD_NOT_ALLOWED", f"Unsupported method: {method}")
    except (ValidationError, ValueError) as e:
        return _error(400, "VALIDATION_ERROR", str(e))
    except ResourceNotFoundException as e:
        return _error(404, e.code, str(e))
    except BusinessRuleViolationException as e:
        return _error(400, e.code, str(e))
    except Exception:
        logger.exception("Failed to handle notification request")
        return _error(500, "INTERNAL_ERROR", "Internal server error")
