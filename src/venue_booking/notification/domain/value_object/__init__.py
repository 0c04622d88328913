from .dispatch_result import ChannelResult, DispatchResult
from .notification_content import NotificationContent
from .notification_id import NotificationId
from .outbound_message import OutboundMessage, RenderedDocument
from .recipient import Recipient

__all__ = [
    "ChannelResult",
    "DispatchResult",
    "NotificationContent",
    "NotificationId",
    "OutboundMessage",
    "Recipient",
    "RenderedDocument",
]
