from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal:
    """金額入力を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    float は str 経由で変換して二進誤差を持ち込まない。
    変換できない値は ValueError にして ValidationError として扱わせる。
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Invalid amount: {v!r}")
    try:
        return Decimal(str(v).strip())
    except InvalidOperation as e:
        raise ValueError(f"Invalid amount: {v!r}") from e
