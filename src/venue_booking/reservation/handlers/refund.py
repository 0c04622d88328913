from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from venue_booking.reservation.applications.refund_reservation import (
    RefundReservationService,
)
from venue_booking.reservation.domain.value_object import ReservationId
from venue_booking.reservation.handlers.request_models import RefundReservationRequest
from venue_booking.reservation.handlers.response_models import to_reservation_response
from venue_booking.reservation.infrastructure.dynamodb_reservation_repository import (
    DynamoDBReservationRepository,
)
from venue_booking.reservation.infrastructure.lambda_refund_gateway import (
    LambdaRefundGateway,
)

logger = Logger()

repository = DynamoDBReservationRepository()
service = RefundReservationService(repository=repository, gateway=LambdaRefundGateway())


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """キャンセル後の返金ワークフロー Lambda Handler"""
    payload = event.get("Payload", event)
    request = RefundReservationRequest.model_validate(payload)
    reservation_id = ReservationId(value=request.reservation_id)
    logger.info(
        "Received refund request",
        extra={"reservation_id": str(reservation_id), "action": request.action},
    )

    if request.action == "resolve":
        if request.succeeded is None:
            raise ValueError("succeeded is required to resolve a refund")
        reservation = service.resolve(reservation_id, request.succeeded)
    else:
        reservation = service.start(reservation_id)

    return to_reservation_response(reservation)
