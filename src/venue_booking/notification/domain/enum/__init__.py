from .dispatch_channel import DispatchChannel
from .notification_type import NotificationType

__all__ = ["DispatchChannel", "NotificationType"]
