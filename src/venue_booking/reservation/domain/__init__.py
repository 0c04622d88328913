from .entity import Reservation as Reservation
from .enum import RefundStatus as RefundStatus
from .enum import ReservationStatus as ReservationStatus
from .gateway import RefundGateway as RefundGateway
from .policy import RefundPolicy as RefundPolicy
from .repository import ReservationRepository as ReservationRepository
from .service import ReservationStateMachine as ReservationStateMachine
from .value_object import ConfirmationCode as ConfirmationCode
from .value_object import Guest as Guest
from .value_object import RefundQuote as RefundQuote
from .value_object import ReservationId as ReservationId
from .value_object import StayPeriod as StayPeriod
