from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: MXN, USD, EUR, JPY
    """

    MINOR_UNITS: ClassVar[dict[str, int]] = {
        "MXN": 2,
        "USD": 2,
        "EUR": 2,
        "JPY": 0,
    }

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.MINOR_UNITS:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.MINOR_UNITS))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def quantum(self) -> Decimal:
        """最小通貨単位（MXN なら 0.01、JPY なら 1）"""
        return Decimal(1).scaleb(-self.MINOR_UNITS[self.code])

    @classmethod
    def mxn(cls) -> Currency:
        """メキシコペソ"""
        return cls("MXN")

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")

    @classmethod
    def jpy(cls) -> Currency:
        """日本円"""
        return cls("JPY")
