from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.typing import LambdaContext

from venue_booking.notification.handlers.composition import (
    admin_recipient_from_env,
    build_coordinator,
)
from venue_booking.notification.handlers.lifecycle_routing import route_lifecycle_event

logger = Logger()

coordinator = build_coordinator()
admin = admin_recipient_from_env()


@logger.inject_lambda_context
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """ライフサイクルイベントの通知 Lambda Handler

    予約（作成・キャンセル・チェックインリマインダー）、決済完了、ユーザー登録、
    管理者アラートを受け付ける。
    通知の失敗は例外にせず、guest_notified / admin_notified として返す。
    """
    payload = event.get("Payload", event)
    logger.info(
        "Received lifecycle event", extra={"event_type": payload.get("event_type")}
    )
    return route_lifecycle_event(payload, coordinator, admin)
