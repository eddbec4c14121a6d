"""
Crypto card widget for displaying a single token using Fluent Design.
"""

from typing import Optional
from PyQt6.QtWidgets import QVBoxLayout, QLabel, QWidget
from qfluentwidgets import CardWidget

from core.card_renderer import CardView, render_card
from core.models import PriceRecord
from ui.styles.theme import CARD_HEIGHT, COLORS


class CryptoCard(CardWidget):
    """Fluent Design card widget showing name, price and 24h change of one token."""

    def __init__(self, record: PriceRecord, parent: Optional[QWidget] = None):
        super().__init__(parent)
        self._view: Optional[CardView] = None
        self._setup_ui()
        self.show_record(record)

    def _setup_ui(self):
        """Setup the widget UI."""
        self.setBorderRadius(6)
        self.setFixedHeight(CARD_HEIGHT)
        self.setStyleSheet(f"background-color: {COLORS['card_background']};")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(10, 10, 10, 10)
        layout.setSpacing(4)

        self.name_label = QLabel()
        self.name_label.setStyleSheet(
            f"font-family: Arial; font-size: 12pt; font-weight: bold; color: {COLORS['text']};"
        )
        layout.addWidget(self.name_label)

        self.price_label = QLabel()
        self.price_label.setStyleSheet(f"font-family: Arial; font-size: 10pt; color: {COLORS['text']};")
        layout.addWidget(self.price_label)

        self.change_label = QLabel()
        layout.addWidget(self.change_label)

        layout.addStretch()

    def show_record(self, record: PriceRecord):
        """Render a price record onto the card."""
        self.apply_view(render_card(record))

    def apply_view(self, view: CardView):
        """Update labels from a card view."""
        self._view = view
        self.name_label.setText(view.name)
        self.price_label.setText(view.price_text)
        self.change_label.setText(view.change_text)
        self.change_label.setStyleSheet(
            f"font-family: Arial; font-size: 10pt; color: {view.change_color};"
        )

    @property
    def view(self) -> Optional[CardView]:
        return self._view

    @property
    def token_id(self) -> Optional[str]:
        return self._view.token_id if self._view is not None else None
