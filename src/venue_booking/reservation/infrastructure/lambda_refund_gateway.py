import json
import os

import boto3

from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.gateway import RefundGateway
from venue_booking.shared.domain import Money
from venue_booking.shared.utils.config import boto_client_config


class RefundRequestFailedError(Exception):
    """決済 Lambda が返金を受け付けなかった"""


class LambdaRefundGateway(RefundGateway):
    """決済サービスの返金 Lambda を同期呼び出しする RefundGateway の具象実装"""

    def __init__(self, function_name: str | None = None, client=None) -> None:
        self.function_name = function_name or os.getenv("REFUND_FUNCTION_NAME")
        self.client = client or boto3.client("lambda", config=boto_client_config())

    def request_refund(self, reservation: Reservation, amount: Money) -> str:
        response = self.client.invoke(
            FunctionName=self.function_name,
            InvocationType="RequestResponse",
            Payload=json.dumps(
                {
                    "reservation_id": str(reservation.id),
                    "user_id": str(reservation.guest.user_id),
                    "amount": str(amount.amount),
                    "currency": str(amount.currency),
                }
            ).encode("utf-8"),
        )
        body = json.loads(response["Payload"].read() or b"{}")
        if response.get("FunctionError") or body.get("status") != "success":
            raise RefundRequestFailedError(
                f"Refund was rejected for reservation {reservation.id}: {body}"
            )
        return body["data"]["refund_id"]
