from dataclasses import dataclass
from enum import Enum

from .user_id import UserId


class Role(str, Enum):
    """操作者のロール"""

    USER = "USER"
    ADMIN = "ADMIN"
    SUPER_ADMIN = "SUPER_ADMIN"


@dataclass(frozen=True)
class Actor:
    """操作を要求したユーザー

    認証は外部で済んでいる前提。ここでは所有者スコープの判定だけに使う。
    """

    user_id: UserId
    role: Role = Role.USER

    @property
    def is_admin(self) -> bool:
        return self.role in (Role.ADMIN, Role.SUPER_ADMIN)

    def can_access(self, owner_id: UserId) -> bool:
        """owner_id のリソースを操作できるかどうか"""
        return self.is_admin or self.user_id == owner_id
