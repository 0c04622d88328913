from .entity import Notification as Notification
from .enum import DispatchChannel as DispatchChannel
from .enum import NotificationType as NotificationType
from .event import AdminAlert as AdminAlert
from .event import PaymentEventPayload as PaymentEventPayload
from .event import ReservationEventPayload as ReservationEventPayload
from .gateway import MessageSender as MessageSender
from .gateway import TemplateRenderer as TemplateRenderer
from .repository import NotificationFilter as NotificationFilter
from .repository import NotificationPage as NotificationPage
from .repository import NotificationRepository as NotificationRepository
from .value_object import ChannelResult as ChannelResult
from .value_object import DispatchResult as DispatchResult
from .value_object import NotificationContent as NotificationContent
from .value_object import NotificationId as NotificationId
from .value_object import OutboundMessage as OutboundMessage
from .value_object import Recipient as Recipient
from .value_object import RenderedDocument as RenderedDocument
