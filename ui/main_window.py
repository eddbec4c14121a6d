"""
Main application window using Fluent Design.
"""

import logging
from typing import List, Optional, Sequence

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QApplication, QLabel, QMainWindow, QVBoxLayout, QWidget

from core.models import PriceRecord
from core.refresh_cycle import RefreshController, RefreshResult, RefreshState
from ui.styles.theme import (
    CARD_MARGIN,
    CARD_HEIGHT,
    ERROR_BANNER_HEIGHT,
    FORM_WIDTH,
    MENU_HEIGHT,
    PADDING_BOTTOM,
    PADDING_LEFT,
    PADDING_RIGHT,
    PADDING_TOP,
    get_stylesheet,
)
from ui.widgets.crypto_card import CryptoCard

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Ticker window: one card per token, refreshed by a RefreshController."""

    def __init__(self, tokens: Sequence[str], controller: RefreshController):
        super().__init__()

        self._tokens = list(tokens)
        self._controller = controller
        self._cards: List[CryptoCard] = []
        self._showing_placeholders = False
        self._error_text: Optional[str] = None

        self._setup_ui()
        self._connect_signals()
        self._build_cards([PriceRecord.empty(token) for token in self._tokens])

    def _setup_ui(self):
        """Setup the window chrome, menu and cards panel."""
        self.setWindowTitle("Crypto Ticker")
        self.setWindowFlags(Qt.WindowType.Tool)
        self.setStyleSheet(get_stylesheet("main_window"))

        # Settings menu
        menu_bar = self.menuBar()
        menu_bar.setStyleSheet(get_stylesheet("menu_bar"))
        settings_menu = menu_bar.addMenu("Settings")
        self.top_most_action = QAction("Always on Top", self)
        self.top_most_action.setCheckable(True)
        settings_menu.addAction(self.top_most_action)

        # Cards panel
        self.cards_panel = QWidget()
        self.cards_panel.setObjectName("cardsPanel")
        self.setCentralWidget(self.cards_panel)

        self.cards_layout = QVBoxLayout(self.cards_panel)
        self.cards_layout.setContentsMargins(PADDING_LEFT, PADDING_TOP, PADDING_RIGHT, PADDING_BOTTOM)
        self.cards_layout.setSpacing(CARD_MARGIN)
        self.cards_layout.addStretch()

        self.error_label = QLabel(self.cards_panel)
        self.error_label.setObjectName("errorLabel")
        self.error_label.setStyleSheet(get_stylesheet("error_label"))
        self.error_label.setWordWrap(True)
        self.error_label.hide()

        self._move_to_top_right()

    def _connect_signals(self):
        """Connect signals to slots."""
        self.top_most_action.toggled.connect(self._toggle_always_on_top)
        self._controller.prices_updated.connect(self._on_prices_updated)

    def _move_to_top_right(self):
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        area = screen.availableGeometry()
        self.move(area.x() + area.width() - FORM_WIDTH, area.y())

    # Card management
    def _clear_cards(self):
        """Remove all cards and the error banner from the panel."""
        for card in self._cards:
            self.cards_layout.removeWidget(card)
            card.deleteLater()
        self._cards.clear()

        self.cards_layout.removeWidget(self.error_label)
        self.error_label.hide()
        self._error_text = None

    def _build_cards(self, records: Sequence[PriceRecord], placeholders: bool = False):
        """Replace the panel contents with one card per record."""
        logger.debug(f"Building {len(records)} cards (placeholders={placeholders})")
        self._clear_cards()
        for record in records:
            card = CryptoCard(record, self.cards_panel)
            self.cards_layout.insertWidget(self.cards_layout.count() - 1, card)
            self._cards.append(card)

        self._showing_placeholders = placeholders
        self._adjust_height()

    def _show_error(self, message: str):
        self._error_text = message
        self.error_label.setText(message)
        self.cards_layout.insertWidget(self.cards_layout.count() - 1, self.error_label)
        self.error_label.show()
        self._adjust_height()

    def _adjust_height(self):
        """Fit the window height to the number of cards."""
        total_height = len(self._cards) * CARD_HEIGHT + PADDING_TOP + PADDING_BOTTOM + MENU_HEIGHT
        if self._error_text is not None:
            total_height += ERROR_BANNER_HEIGHT

        self.setFixedSize(FORM_WIDTH, total_height)

    def _on_prices_updated(self, result: RefreshResult):
        """Show the outcome of a refresh batch."""
        if result.state is RefreshState.DEGRADED:
            self._build_cards(result.records, placeholders=True)
            self._show_error(result.error_message)
            return

        shown = [card.token_id for card in self._cards]
        fetched = [record.token_id for record in result.records]
        if self._showing_placeholders or shown != fetched:
            self._build_cards(result.records)
            return

        for card, record in zip(self._cards, result.records):
            card.show_record(record)

    def _toggle_always_on_top(self, pinned: bool):
        """Toggle always-on-top mode."""
        was_visible = self.isVisible()

        flags = self.windowFlags()
        if pinned:
            flags |= Qt.WindowType.WindowStaysOnTopHint
        else:
            flags &= ~Qt.WindowType.WindowStaysOnTopHint
        self.setWindowFlags(flags)

        # setWindowFlags hides the window
        if was_visible:
            self.show()

    # Introspection
    def card_names(self) -> List[str]:
        """Names of the displayed cards, top to bottom."""
        return [card.view.name for card in self._cards]

    def cards(self) -> List[CryptoCard]:
        return list(self._cards)

    def error_text(self) -> Optional[str]:
        return self._error_text

    def closeEvent(self, event: QCloseEvent):
        self._controller.stop()
        super().closeEvent(event)
