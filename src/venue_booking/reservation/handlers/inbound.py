from dataclasses import dataclass

from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2

from venue_booking.reservation.handlers.request_models import ActorRequest
from venue_booking.shared.domain import Actor
from venue_booking.shared.utils.auth import actor_from_claims


class UnauthenticatedError(Exception):
    """API Gateway 経由で認証済みの操作者が得られない"""


@dataclass(frozen=True)
class InboundCommand:
    """Lambda イベントから取り出したコマンド入力"""

    payload: dict
    claims_actor: Actor | None = None
    via_api: bool = False

    def resolve_actor(self, requested: ActorRequest | None) -> Actor:
        """操作者を決める

        API Gateway 経由では JWT クレームだけを信用し、ペイロードの actor は無視する。
        Step Functions などからの直接呼び出しではペイロードの actor を使う。
        """
        if self.via_api:
            if self.claims_actor is None:
                raise UnauthenticatedError("Authentication required")
            return self.claims_actor
        if requested is None:
            raise ValueError("actor is required")
        return requested.to_actor()


def read_command(event: dict) -> InboundCommand:
    """API Gateway HTTP API (v2) と直接呼び出しの両方からコマンド入力を取り出す

    API Gateway 経由ではボディとパスパラメータをまとめてペイロードにする。
    """
    if "requestContext" not in event:
        return InboundCommand(payload=event.get("Payload", event))

    api_event = APIGatewayProxyEventV2(event)
    authorizer = api_event.request_context.authorizer
    payload = dict(api_event.json_body or {}) if api_event.body else {}
    payload.pop("actor", None)
    payload.update(api_event.path_parameters or {})
    return InboundCommand(
        payload=payload,
        claims_actor=actor_from_claims(authorizer.jwt_claim if authorizer else None),
        via_api=True,
    )
