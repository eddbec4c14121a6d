from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import Qt

from core.card_renderer import render_card
from core.models import PLACEHOLDER_RECORDS, PriceRecord
from core.refresh_cycle import RefreshResult, RefreshState
from core.utils import NEGATIVE_COLOR, POSITIVE_COLOR
from ui.main_window import MainWindow
from ui.styles.theme import (
    CARD_HEIGHT,
    ERROR_BANNER_HEIGHT,
    FORM_WIDTH,
    MENU_HEIGHT,
    PADDING_BOTTOM,
    PADDING_TOP,
)
from ui.widgets.crypto_card import CryptoCard


def normal(*records):
    return RefreshResult(RefreshState.NORMAL, tuple(records))


def degraded(error):
    return RefreshResult(RefreshState.DEGRADED, PLACEHOLDER_RECORDS, error)


class TestCryptoCard:
    def test_shows_record(self, qapp):
        card = CryptoCard(PriceRecord("bitcoin", Decimal("98000.00"), Decimal("5.30")))

        assert card.name_label.text() == "Bitcoin"
        assert card.price_label.text() == "Price: $98000.00"
        assert card.change_label.text() == "24h Change: +5.30% (24h)"
        assert POSITIVE_COLOR in card.change_label.styleSheet()

    def test_update_in_place(self, qapp):
        card = CryptoCard(PriceRecord.empty("ethereum"))

        card.show_record(PriceRecord("ethereum", Decimal("3500"), Decimal("-2.10")))

        assert card.change_label.text() == "24h Change: -2.10% (24h)"
        assert NEGATIVE_COLOR in card.change_label.styleSheet()
        assert card.token_id == "ethereum"
        assert card.view.price_text == "Price: $3500.00"

    def test_apply_view_replaces_view(self, qapp):
        card = CryptoCard(PriceRecord.empty("bitcoin"))
        view = render_card(PriceRecord("cardano", Decimal("0.45"), Decimal("1")))

        card.apply_view(view)

        assert card.view is view
        assert card.token_id == "cardano"
        assert card.name_label.text() == "Cardano"

    def test_render_twice_is_stable(self, qapp):
        record = PriceRecord("solana", Decimal("150"), Decimal("3.8"))
        card = CryptoCard(record)
        first = (card.name_label.text(), card.price_label.text(), card.change_label.text(),
                 card.change_label.styleSheet())

        card.show_record(record)

        assert (card.name_label.text(), card.price_label.text(), card.change_label.text(),
                card.change_label.styleSheet()) == first


class TestMainWindow:
    @pytest.fixture
    def controller(self):
        return MagicMock()

    @pytest.fixture
    def window(self, qapp, controller):
        window = MainWindow(["bitcoin", "dogecoin", "cardano", "polkadot"], controller)
        yield window
        window.deleteLater()

    def test_one_card_per_token(self, window):
        assert window.card_names() == ["Bitcoin", "Dogecoin", "Cardano", "Polkadot"]
        assert window.error_text() is None

    def test_initial_cards_show_zero(self, window):
        card = window.cards()[0]

        assert card.price_label.text() == "Price: $0.00"
        assert card.change_label.text() == "24h Change: +0.00% (24h)"

    def test_subscribes_to_controller(self, window, controller):
        controller.prices_updated.connect.assert_called_once_with(window._on_prices_updated)

    def test_height_follows_card_count(self, window):
        expected = 4 * CARD_HEIGHT + PADDING_TOP + PADDING_BOTTOM + MENU_HEIGHT

        assert window.width() == FORM_WIDTH
        assert window.height() == expected

    def test_normal_result_updates_cards_in_place(self, window):
        cards_before = window.cards()

        window._on_prices_updated(normal(
            PriceRecord("bitcoin", Decimal("98000.00"), Decimal("5.30")),
            PriceRecord("dogecoin", Decimal("0.12"), Decimal("-2.10")),
            PriceRecord("cardano", Decimal("0.45"), Decimal("1")),
            PriceRecord("polkadot", Decimal("6"), Decimal("0")),
        ))

        assert window.cards() == cards_before
        assert cards_before[0].price_label.text() == "Price: $98000.00"
        assert cards_before[0].change_label.text() == "24h Change: +5.30% (24h)"
        assert cards_before[1].change_label.text() == "24h Change: -2.10% (24h)"
        assert NEGATIVE_COLOR in cards_before[1].change_label.styleSheet()

    def test_failure_shows_placeholders_and_error(self, window):
        window._on_prices_updated(degraded("Request for dogecoin failed: timed out"))

        assert window.card_names() == ["Bitcoin", "Ethereum", "Solana"]
        assert [card.price_label.text() for card in window.cards()] == [
            "Price: $98000.00",
            "Price: $3500.00",
            "Price: $150.00",
        ]
        assert [card.change_label.text() for card in window.cards()] == [
            "24h Change: +5.30% (24h)",
            "24h Change: -2.10% (24h)",
            "24h Change: +3.80% (24h)",
        ]
        assert "Request for dogecoin failed: timed out" in window.error_text()
        assert window.error_label.text() == window.error_text()
        assert window.error_label.isHidden() is False

    def test_degraded_height_includes_banner(self, window):
        window._on_prices_updated(degraded("boom"))

        expected = 3 * CARD_HEIGHT + PADDING_TOP + PADDING_BOTTOM + MENU_HEIGHT + ERROR_BANNER_HEIGHT
        assert window.height() == expected

    def test_recovery_rebuilds_live_cards(self, window):
        window._on_prices_updated(degraded("boom"))

        window._on_prices_updated(normal(
            PriceRecord("bitcoin", 1, 1),
            PriceRecord("dogecoin", 2, 2),
            PriceRecord("cardano", 3, 3),
            PriceRecord("polkadot", 4, 4),
        ))

        assert window.card_names() == ["Bitcoin", "Dogecoin", "Cardano", "Polkadot"]
        assert window.error_text() is None
        assert window.error_label.isHidden() is True

    def test_always_on_top_toggle(self, window):
        window.top_most_action.setChecked(True)
        assert window.windowFlags() & Qt.WindowType.WindowStaysOnTopHint

        window.top_most_action.setChecked(False)
        assert not window.windowFlags() & Qt.WindowType.WindowStaysOnTopHint

    def test_close_stops_controller(self, window, controller):
        window.show()
        window.close()

        controller.stop.assert_called_once()
