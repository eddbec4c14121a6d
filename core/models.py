"""
Standard data models for the application.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

# Largest absolute price or change accepted from the API
MAX_MAGNITUDE = Decimal("1e18")


def to_decimal(value) -> Decimal:
    """Convert a JSON number (or numeric string) to a finite Decimal."""
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")

    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise ValueError(f"Not a number: {value!r}") from e

    if not result.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    if abs(result) > MAX_MAGNITUDE:
        raise ValueError(f"Number out of range: {value!r}")
    return result


@dataclass(frozen=True)
class PriceRecord:
    """Price and 24h change of one token at one point in time."""

    token_id: str
    price: Decimal
    change_24h: Decimal

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))
        object.__setattr__(self, "change_24h", to_decimal(self.change_24h))

    @classmethod
    def empty(cls, token_id: str) -> "PriceRecord":
        """Zero-valued record shown until the first fetch completes."""
        return cls(token_id, Decimal(0), Decimal(0))


# Static data shown when a refresh batch fails
PLACEHOLDER_RECORDS = (
    PriceRecord("bitcoin", Decimal("98000"), Decimal("5.3")),
    PriceRecord("ethereum", Decimal("3500"), Decimal("-2.1")),
    PriceRecord("solana", Decimal("150"), Decimal("3.8")),
)
