from .entity import AggregateRoot, Entity
from .exception import (
    AlreadyCancelledException,
    BusinessRuleViolationException,
    CannotCancelCompletedException,
    DomainException,
    DuplicateResourceException,
    InvalidTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)
from .value_object import Actor, Currency, Money, Role, UserId

__all__ = [
    "Entity",
    "AggregateRoot",
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "InvalidTransitionException",
    "AlreadyCancelledException",
    "CannotCancelCompletedException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "Actor",
    "Role",
    "UserId",
    "Currency",
    "Money",
]
