import json

import pytest

from venue_booking.reservation.handlers.inbound import (
    UnauthenticatedError,
    read_command,
)
from venue_booking.reservation.handlers.request_models import (
    ActorRequest,
    CancelReservationRequest,
)
from venue_booking.shared.domain import Role, UserId


@pytest.fixture
def create_api_event():
    """API Gateway HTTP API (v2) のイベントを生成する"""

    def _create_api_event(body: dict | None = None, claims: dict | None = None) -> dict:
        request_context = {"http": {"method": "POST", "path": "/reservations/res-001/cancel"}}
        if claims is not None:
            request_context["authorizer"] = {"jwt": {"claims": claims, "scopes": []}}
        return {
            "version": "2.0",
            "routeKey": "POST /reservations/{reservation_id}/cancel",
            "rawPath": "/reservations/res-001/cancel",
            "pathParameters": {"reservation_id": "res-001"},
            "requestContext": request_context,
            "body": json.dumps(body) if body is not None else None,
            "isBase64Encoded": False,
        }

    return _create_api_event


class TestReadCommand:
    def test_direct_invocation_uses_payload_actor(self):
        command = read_command(
            {
                "Payload": {
                    "reservation_id": "res-001",
                    "actor": {"user_id": "admin-1", "role": "ADMIN"},
                }
            }
        )
        request = CancelReservationRequest.model_validate(command.payload)

        actor = command.resolve_actor(request.actor)

        assert not command.via_api
        assert actor.user_id == UserId(value="admin-1")
        assert actor.role == Role.ADMIN

    def test_direct_invocation_without_actor_is_rejected(self):
        command = read_command({"reservation_id": "res-001"})
        request = CancelReservationRequest.model_validate(command.payload)

        with pytest.raises(ValueError):
            command.resolve_actor(request.actor)

    def test_api_request_ignores_role_claimed_in_body(self, create_api_event):
        event = create_api_event(
            body={
                "reason": "Change of plans",
                "actor": {"user_id": "user-1", "role": "ADMIN"},
            },
            claims={"sub": "user-1", "custom:role": "USER"},
        )

        command = read_command(event)
        request = CancelReservationRequest.model_validate(command.payload)
        actor = command.resolve_actor(request.actor)

        assert command.via_api
        assert request.reservation_id == "res-001"
        assert request.reason == "Change of plans"
        assert request.actor is None
        assert actor.role == Role.USER
        assert not actor.is_admin

    def test_api_request_uses_admin_role_from_claims(self, create_api_event):
        event = create_api_event(claims={"sub": "admin-1", "custom:role": "admin"})

        command = read_command(event)

        assert command.payload == {"reservation_id": "res-001"}
        assert command.resolve_actor(None).role == Role.ADMIN

    def test_api_request_without_claims_is_unauthenticated(self, create_api_event):
        command = read_command(create_api_event(body={"reason": "x"}))

        with pytest.raises(UnauthenticatedError):
            command.resolve_actor(ActorRequest(user_id="user-1", role=Role.ADMIN))
