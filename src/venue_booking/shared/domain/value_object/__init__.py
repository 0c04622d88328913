from .actor import Actor, Role
from .currency import Currency
from .money import Money
from .user_id import UserId

__all__ = ["Actor", "Role", "Currency", "Money", "UserId"]
