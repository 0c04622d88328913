from venue_booking.shared.domain import Actor, Role, UserId

ROLE_CLAIM = "custom:role"


def actor_from_claims(claims: dict | None) -> Actor | None:
    """JWT クレームから操作者を組み立てる（sub がなければ None）"""
    if not claims or not claims.get("sub"):
        return None
    try:
        role = Role(str(claims.get(ROLE_CLAIM, Role.USER.value)).upper())
    except ValueError:
        role = Role.USER
    return Actor(user_id=UserId(value=claims["sub"]), role=role)
