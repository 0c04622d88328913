from .exceptions import (
    AlreadyCancelledException,
    BusinessRuleViolationException,
    CannotCancelCompletedException,
    DomainException,
    DuplicateResourceException,
    InvalidTransitionException,
    OptimisticLockException,
    ResourceNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "InvalidTransitionException",
    "AlreadyCancelledException",
    "CannotCancelCompletedException",
    "DuplicateResourceException",
    "OptimisticLockException",
]
