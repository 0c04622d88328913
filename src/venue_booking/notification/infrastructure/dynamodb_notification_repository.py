import json
import os
from datetime import datetime
from decimal import Decimal

import boto3
from boto3.dynamodb.conditions import Attr, Key
from botocore.exceptions import ClientError

from venue_booking.notification.domain.entity import Notification
from venue_booking.notification.domain.enum import NotificationType
from venue_booking.notification.domain.repository import (
    NotificationFilter,
    NotificationPage,
    NotificationRepository,
)
from venue_booking.notification.domain.value_object import NotificationId
from venue_booking.shared.domain import UserId
from venue_booking.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
)
from venue_booking.shared.utils.config import boto_client_config


def _to_dynamodb_map(metadata: dict) -> dict:
    """float を Decimal に変換して DynamoDB に保存できる形にする"""
    return json.loads(json.dumps(metadata, default=str), parse_float=Decimal)


class DynamoDBNotificationRepository(NotificationRepository):
    """DynamoDBを使用したNotificationRepository の具象実装

    PK=USER#{user_id}, SK=NOTIFICATION#{id} でユーザー単位にまとめて保存する。
    通知は常に所有者と ID の組で引く。
    """

    def __init__(self, table_name: str | None = None) -> None:
        self.table_name = (
            table_name or os.getenv("NOTIFICATION_TABLE_NAME") or os.getenv("TABLE_NAME")
        )
        self.dynamodb = boto3.resource("dynamodb", config=boto_client_config())
        self.table = self.dynamodb.Table(self.table_name)

    def save(self, notification: Notification) -> None:
        """通知をDBに保存する"""
        item = {
            "PK": f"USER#{notification.user_id}",
            "SK": f"NOTIFICATION#{notification.id}",
            "entity_type": "NOTIFICATION",
            "notification_id": str(notification.id),
            "user_id": str(notification.user_id),
            "type": notification.type.value,
            "title": notification.title,
            "message": notification.message,
            "metadata": _to_dynamodb_map(notification.metadata),
            "is_read": notification.is_read,
            "created_at": notification.created_at.isoformat(),
            "updated_at": notification.updated_at.isoformat(),
        }
        try:
            self.table.put_item(Item=item, ConditionExpression=Attr("PK").not_exists())
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise DuplicateResourceException(
                    f"Notification already exists: {notification.id}"
                )
            raise

    def find_for_user(
        self, notification_id: NotificationId, user_id: UserId
    ) -> Notification | None:
        response = self.table.get_item(
            Key={"PK": f"USER#{user_id}", "SK": f"NOTIFICATION#{notification_id}"}
        )
        item = response.get("Item")
        if not item:
            return None
        return self._to_entity(item)

    def list_for_user(
        self,
        user_id: UserId,
        notification_filter: NotificationFilter,
        page: int,
        limit: int,
    ) -> NotificationPage:
        notifications = [
            n for n in self._query_user(user_id) if notification_filter.matches(n)
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        start = (page - 1) * limit
        return NotificationPage(
            items=notifications[start : start + limit],
            total=len(notifications),
            page=page,
            limit=limit,
        )

    def count_unread(self, user_id: UserId) -> int:
        return sum(1 for n in self._query_user(user_id) if not n.is_read)

    def update(self, notification: Notification) -> None:
        """既読状態を更新する"""
        try:
            self.table.update_item(
                Key={
                    "PK": f"USER#{notification.user_id}",
                    "SK": f"NOTIFICATION#{notification.id}",
                },
                UpdateExpression="SET is_read = :is_read, updated_at = :updated_at",
                ConditionExpression=Attr("PK").exists(),
                ExpressionAttributeValues={
                    ":is_read": notification.is_read,
                    ":updated_at": notification.updated_at.isoformat(),
                },
            )
        except ClientError as e:
            if e.response["Error"]["Code"] == "ConditionalCheckFailedException":
                raise ResourceNotFoundException(
                    f"Notification not found: {notification.id}"
                )
            raise

    def delete(self, notification_id: NotificationId, user_id: UserId) -> bool:
        response = self.table.delete_item(
            Key={"PK": f"USER#{user_id}", "SK": f"NOTIFICATION#{notification_id}"},
            ReturnValues="ALL_OLD",
        )
        return "Attributes" in response

    def delete_created_before(self, cutoff: datetime) -> int:
        """作成日時が cutoff より前の通知をテーブル全体から削除する"""
        kwargs: dict = {
            "FilterExpression": Attr("entity_type").eq("NOTIFICATION")
            & Attr("created_at").lt(cutoff.isoformat()),
            "ProjectionExpression": "PK, SK",
        }
        deleted = 0
        with self.table.batch_writer() as batch:
            while True:
                response = self.table.scan(**kwargs)
                for item in response.get("Items", []):
                    batch.delete_item(Key={"PK": item["PK"], "SK": item["SK"]})
                    deleted += 1
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                kwargs["ExclusiveStartKey"] = last_key
        return deleted

    def _query_user(self, user_id: UserId) -> list[Notification]:
        kwargs: dict = {
            "KeyConditionExpression": Key("PK").eq(f"USER#{user_id}")
            & Key("SK").begins_with("NOTIFICATION#"),
        }
        notifications: list[Notification] = []
        while True:
            response = self.table.query(**kwargs)
            notifications.extend(self._to_entity(i) for i in response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                return notifications
            kwargs["ExclusiveStartKey"] = last_key

    def _to_entity(self, item: dict) -> Notification:
        """DynamoDB アイテムをドメインエンティティに変換する"""
        return Notification(
            id=NotificationId(value=item["notification_id"]),
            user_id=UserId(value=item["user_id"]),
            type=NotificationType(item["type"]),
            title=item["title"],
            message=item["message"],
            metadata=item.get("metadata", {}),
            is_read=bool(item.get("is_read", False)),
            created_at=datetime.fromisoformat(item["created_at"]),
            updated_at=datetime.fromisoformat(item["updated_at"]),
        )
