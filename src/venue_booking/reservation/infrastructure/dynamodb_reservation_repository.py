import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr
from botocore.exceptions import ClientError

from venue_booking.reservation.domain.entity import Reservation
from venue_booking.reservation.domain.enum import RefundStatus, ReservationStatus
from venue_booking.reservation.domain.repository import ReservationRepository
from venue_booking.reservation.domain.value_object import (
    ConfirmationCode,
    Guest,
    ReservationId,
    StayPeriod,
)
from venue_booking.shared.domain import Currency, Money, UserId
from venue_booking.shared.domain.exception import (
    DuplicateResourceException,
    OptimisticLockException,
)
from venue_booking.shared.utils.config import boto_client_config

# update で書き換える属性（それ以外は作成時から不変）
_MUTABLE_ATTRIBUTES = (
    "status",
    "refund_amount",
    "refund_status",
    "cancel_reason",
    "cancelled_at",
    "completed_payments",
)


class DynamoDBReservationRepository(ReservationRepository):
    """DynamoDBを使用したReservationRepository の具象実装"""

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = table_name or os.getenv("TABLE_NAME")
        self.dynamodb = boto3.resource("dynamodb", config=boto_client_config())
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, reservation: Reservation) -> None:
        """予約をDBに保存する"""
        item = {
            "PK": f"RESERVATION#{reservation.id}",
            "SK": "RESERVATION",
            "entity_type": "RESERVATION",
            "reservation_id": str(reservation.id),
            "confirmation_code": str(reservation.confirmation_code),
            "guest_user_id": str(reservation.guest.user_id),
            "guest_name": reservation.guest.name,
            "guest_email": reservation.guest.email,
            "service_name": reservation.service_name,
            "venue_name": reservation.venue_name,
            "check_in": reservation.stay_period.check_in.isoformat(),
            "check_out": reservation.stay_period.check_out.isoformat(),
            "total_amount": str(reservation.total.amount),
            "currency": str(reservation.total.currency),
            "GSI1PK": f"USER#{reservation.guest.user_id}",
            "GSI1SK": f"RESERVATION#{reservation.stay_period.check_in.isoformat()}",
            **{k: v for k, v in self._mutable_values(reservation).items() if v is not None},
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Reservation already exists: {reservation.id}"
                )
            raise

    def find_by_id(self, reservation_id: ReservationId) -> Reservation | None:
        """予約IDで検索"""
        response = self.table.get_item(
            Key={"PK": f"RESERVATION#{reservation_id}", "SK": "RESERVATION"},
            ConsistentRead=True,
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def update(
        self,
        reservation: Reservation,
        expected_status: ReservationStatus | None = None,
        expected_refund_status: RefundStatus | None = None,
    ) -> None:
        """予約の可変属性を更新する（expected_* 指定時は条件付き）"""
        values = self._mutable_values(reservation)
        to_set = [name for name in _MUTABLE_ATTRIBUTES if values[name] is not None]
        to_remove = [name for name in _MUTABLE_ATTRIBUTES if values[name] is None]

        expression = "SET " + ", ".join(f"#{name} = :{name}" for name in to_set)
        if to_remove:
            expression += " REMOVE " + ", ".join(f"#{name}" for name in to_remove)

        kwargs: dict = {
            "Key": {"PK": f"RESERVATION#{reservation.id}", "SK": "RESERVATION"},
            "UpdateExpression": expression,
            "ExpressionAttributeNames": {
                f"#{name}": name for name in _MUTABLE_ATTRIBUTES
            },
            "ExpressionAttributeValues": {f":{name}": values[name] for name in to_set},
        }

        condition = Attr("PK").exists()
        if expected_status is not None:
            condition = condition & Attr("status").eq(expected_status.value)
        if expected_refund_status is not None:
            condition = condition & Attr("refund_status").eq(expected_refund_status.value)
        kwargs["ConditionExpression"] = condition

        try:
            self.table.update_item(**kwargs)
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise OptimisticLockException(
                    f"Reservation status conflict: "
                    f"expected status={expected_status}, "
                    f"refund_status={expected_refund_status}, "
                    f"reservation_id={reservation.id}"
                )
            raise

    def _mutable_values(self, reservation: Reservation) -> dict:
        return {
            "status": reservation.status.value,
            "refund_amount": (
                str(reservation.refund_amount.amount)
                if reservation.refund_amount is not None
                else None
            ),
            "refund_status": (
                reservation.refund_status.value if reservation.refund_status else None
            ),
            "cancel_reason": reservation.cancel_reason,
            "cancelled_at": (
                reservation.cancelled_at.isoformat() if reservation.cancelled_at else None
            ),
            "completed_payments": reservation.completed_payments,
        }

    def _to_entity(self, item: dict) -> Reservation:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        currency = Currency(item["currency"])
        refund_amount = item.get("refund_amount")
        refund_status = item.get("refund_status")
        cancelled_at = item.get("cancelled_at")
        return Reservation(
            id=ReservationId(value=item["reservation_id"]),
            confirmation_code=ConfirmationCode(item["confirmation_code"]),
            guest=Guest(
                user_id=UserId(value=item["guest_user_id"]),
                name=item["guest_name"],
                email=item["guest_email"],
            ),
            service_name=item["service_name"],
            venue_name=item["venue_name"],
            stay_period=StayPeriod(
                check_in=datetime.fromisoformat(item["check_in"]),
                check_out=datetime.fromisoformat(item["check_out"]),
            ),
            total=Money(amount=Decimal(item["total_amount"]), currency=currency),
            status=ReservationStatus(item["status"]),
            refund_amount=(
                Money(amount=Decimal(refund_amount), currency=currency)
                if refund_amount is not None
                else None
            ),
            refund_status=RefundStatus(refund_status) if refund_status else None,
            cancel_reason=item.get("cancel_reason"),
            cancelled_at=datetime.fromisoformat(cancelled_at) if cancelled_at else None,
            completed_payments=int(item.get("completed_payments", 0)),
        )
