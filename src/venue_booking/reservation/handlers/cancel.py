from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from venue_booking.notification.handlers.composition import (
    admin_recipient_from_env,
    build_coordinator,
)
from venue_booking.reservation.applications.cancel_reservation import (
    CancelReservationService,
)
from venue_booking.reservation.applications.notify_lifecycle import (
    ReservationLifecycleNotifier,
)
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.reservation.handlers.errors import (
    domain_error_response,
    internal_error_response,
    unauthorized_response,
    validation_error_response,
)
from venue_booking.reservation.handlers.inbound import UnauthenticatedError, read_command
from venue_booking.reservation.handlers.request_models import CancelReservationRequest
from venue_booking.reservation.handlers.response_models import (
    to_cancellation_response,
)
from venue_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from venue_booking.shared.domain.exception import (
    AlreadyCancelledException,
    DomainException,
)
from venue_booking.shared.utils import api_response

logger = Logger()

repository = DynamoDBReservationRepository()
service = CancelReservationService(repository=repository)
notifier = ReservationLifecycleNotifier(
    coordinator=build_coordinator(), admin=admin_recipient_from_env()
)


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約キャンセル Lambda Handler

    キャンセルの確定（条件付き更新）が済んでから通知する。
    既にキャンセル済みの予約には、確定済みの内容を replayed=true で返し通知はしない。
    """
    logger.info("Received cancel reservation request")

    command = read_command(event)
    try:
        request = CancelReservationRequest.model_validate(command.payload)
        reservation_id = ReservationId(value=request.reservation_id)
        actor = command.resolve_actor(request.actor)
    except UnauthenticatedError:
        return unauthorized_response()
    except (ValidationError, ValueError) as e:
        return validation_error_response(str(e))

    try:
        reservation = service.cancel(reservation_id, reason=request.reason, actor=actor)
    except AlreadyCancelledException as e:
        if e.reservation is None:
            return domain_error_response(e)
        logger.info(
            "Reservation was already cancelled, replaying result",
            extra={"reservation_id": str(reservation_id)},
        )
        return api_response(200, to_cancellation_response(e.reservation, replayed=True))
    except DomainException as e:
        logger.warning(
            "Cancellation rejected",
            extra={"reservation_id": str(reservation_id), "error_code": e.code},
        )
        return domain_error_response(e)
    except Exception:
        logger.exception(
            "Failed to cancel reservation",
            extra={"reservation_id": str(reservation_id)},
        )
        return internal_error_response()

    notification = notifier.notify(reservation)
    return api_response(200, to_cancellation_response(reservation, notification=notification))
