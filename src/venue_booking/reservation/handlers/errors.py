from venue_booking.reservation.handlers.response_models import to_error_response
from venue_booking.shared.domain.exception import (
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from venue_booking.shared.utils import api_response


def status_code_for(error: DomainException) -> int:
    """ドメイン例外を HTTP ステータスコードに対応付ける"""
    if isinstance(error, ResourceNotFoundException):
        return 404
    if isinstance(
        error,
        (
            BusinessRuleViolationException,
            OptimisticLockException,
            DuplicateResourceException,
        ),
    ):
        return 409
    return 500


def domain_error_response(error: DomainException) -> dict:
    return api_response(status_code_for(error), to_error_response(error.code, str(error)))


def validation_error_response(message: str) -> dict:
    return api_response(400, to_error_response("VALIDATION_ERROR", message))


def internal_error_response() -> dict:
    return api_response(500, to_error_response("INTERNAL_ERROR", "Internal server error"))


def unauthorized_response() -> dict:
    return api_response(401, to_error_response("UNAUTHORIZED", "Authentication required"))
