"""
Crypto Ticker - PyQt6 Desktop Widget
Main entry point.
"""

import logging
import os
import sys

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QMessageBox
from qfluentwidgets import Theme, setTheme

from config.settings import ConfigError, ConfigLoader
from core.logger import setup_logging
from core.price_fetcher import PriceFetcher
from core.refresh_cycle import RefreshController
from ui.main_window import MainWindow

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    log_level_env = os.environ.get("LOG_LEVEL", "INFO").upper()
    setup_logging(log_level=getattr(logging, log_level_env, logging.INFO))

    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName("Crypto Ticker")

    from core.version import __version__

    app.setApplicationVersion(__version__)
    setTheme(Theme.DARK)

    try:
        config = ConfigLoader().load()
    except ConfigError as e:
        logger.critical(str(e))
        QMessageBox.critical(None, "Crypto Ticker", str(e))
        sys.exit(1)

    fetcher = PriceFetcher()
    controller = RefreshController(config.tokens, fetcher.fetch)

    window = MainWindow(config.tokens, controller)
    window.show()
    controller.start()

    exit_code = app.exec()
    controller.stop()
    fetcher.close()
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
