"""
Maps price records to the text and colours shown on a card.
"""

from dataclasses import dataclass

from core.models import PriceRecord
from core.utils import change_color, display_name, format_change, format_price


@dataclass(frozen=True)
class CardView:
    """Everything a card displays for one token."""

    token_id: str
    name: str
    price_text: str
    change_text: str
    change_color: str


def render_card(record: PriceRecord) -> CardView:
    """Build the card view for a price record. Pure; same record, same view."""
    return CardView(
        token_id=record.token_id,
        name=display_name(record.token_id),
        price_text=f"Price: ${format_price(record.price)}",
        change_text=f"24h Change: {format_change(record.change_24h)}% (24h)",
        change_color=change_color(record.change_24h),
    )
