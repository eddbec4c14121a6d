"""
Colours, sizes and stylesheets for the ticker window.
"""

from core.utils import NEGATIVE_COLOR, POSITIVE_COLOR

COLORS = {
    "window_background": "#1E1E1E",
    "panel_background": "#282828",
    "card_background": "#323232",
    "menu_background": "#323232",
    "text": "#FFFFFF",
    "menu_text": "#D3D3D3",
    "border": "#4A4A4A",
    "positive": POSITIVE_COLOR,
    "negative": NEGATIVE_COLOR,
    "error": "#FF0000",
}

# Layout metrics (pixels)
FORM_WIDTH = 350
CARD_HEIGHT = 90
CARD_MARGIN = 5
PADDING_TOP = 35
PADDING_BOTTOM = 45
PADDING_LEFT = 10
PADDING_RIGHT = 25
MENU_HEIGHT = 30
ERROR_BANNER_HEIGHT = 60

STYLESHEETS = {
    "main_window": f"""
        QMainWindow {{
            background-color: {COLORS['window_background']};
        }}
        QWidget#cardsPanel {{
            background-color: {COLORS['panel_background']};
        }}
    """,

    "menu_bar": f"""
        QMenuBar {{
            background-color: {COLORS['menu_background']};
            color: {COLORS['menu_text']};
        }}
        QMenuBar::item:selected {{
            background-color: {COLORS['border']};
        }}
    """,

    "error_label": f"""
        QLabel#errorLabel {{
            color: {COLORS['error']};
            font-size: 11px;
        }}
    """,
}


def get_stylesheet(name: str) -> str:
    """Get stylesheet by name."""
    return STYLESHEETS.get(name, "")
