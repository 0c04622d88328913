from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from venue_booking.notification.handlers.composition import (
    admin_recipient_from_env,
    build_coordinator,
)
from venue_booking.reservation.applications.notify_lifecycle import (
    ReservationLifecycleNotifier,
)
from venue_booking.reservation.applications.transition_reservation import (
    TransitionReservationService,
)
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    unauthorized_response,
    validation_error_response,
)
from venue_booking.reservation.handlers.inbound import UnauthenticatedError, read_command
from venue_booking.reservation.handlers.request_models import (
    TransitionReservationRequest,
)
from venue_booking.reservation.handlers.response_models import to_reservation_response
from venue_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from venue_booking.shared.domain.exception import DomainException
from venue_booking.shared.utils import api_response

logger = Logger()

repository = DynamoDBReservationRepository()
service = TransitionReservationService(repository=repository)
notifier = ReservationLifecycleNotifier(
    coordinator=build_coordinator(), admin=admin_recipient_from_env()
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約ステータス遷移 Lambda Handler（確定・チェックイン・チェックアウト・ノーショー）"""
    command = read_command(event)
    try:
        request = TransitionReservationRequest.model_validate(command.payload)
        reservation_id = ReservationId(value=request.reservation_id)
        actor = command.resolve_actor(request.actor)
    except UnauthenticatedError:
        return unauthorized_response()
    except (ValidationError, ValueError) as e:
        return validation_error_response(str(e))

    logger.info(
        "Received transition request",
        extra={
            "reservation_id": str(reservation_id),
            "target_status": request.target_status.value,
        },
    )

    try:
        reservation = service.transition(
            reservation_id, request.target_status, actor=actor
        )
    except DomainException as e:
        return domain_error_response(e)
    except Exception:
        logger.exception(
            "Failed to transition reservation",
            extra={"reservation_id": str(reservation_id)},
        )
        return internal_error_response()

    notification = notifier.notify(reservation)
    return api_response(200, to_reservation_response(reservation, notification))
