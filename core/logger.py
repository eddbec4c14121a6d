"""
Logging for Crypto Ticker: one rotating log file under the app directory,
mirrored to stdout.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from config.settings import default_app_dir

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "app.log"
MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 5


def _build_handlers(log_file: Path, log_level: int) -> list[logging.Handler]:
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    handlers: list[logging.Handler] = [
        logging.handlers.RotatingFileHandler(
            log_file, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        ),
        logging.StreamHandler(sys.stdout),
    ]
    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
    return handlers


def setup_logging(log_dir: Path | None = None, log_level: int = logging.INFO) -> Path:
    """
    Route all application logging to the ticker's log file and stdout.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        log_dir: Where app.log lives; defaults to <app dir>/logs.
        log_level: Threshold for the root logger and both handlers.

    Returns:
        Path of the active log file
    """
    log_dir = log_dir or default_app_dir() / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / LOG_FILE_NAME

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    root_logger.setLevel(log_level)
    for handler in _build_handlers(log_file, log_level):
        root_logger.addHandler(handler)

    # requests logs every connection through urllib3
    logging.getLogger("urllib3").setLevel(max(log_level, logging.WARNING))

    logging.info(f"Logging to {log_file}")
    return log_file
