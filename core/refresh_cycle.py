"""
Timer-driven refresh cycle.

`refresh_prices` holds the fetch/fallback policy and knows nothing about Qt.
`RefreshController` schedules it on a worker thread and publishes each result
through the `prices_updated` signal for the UI to observe.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Sequence, Tuple

from PyQt6.QtCore import QObject, QThread, QTimer, pyqtSignal

from core.models import PLACEHOLDER_RECORDS, PriceRecord
from core.price_fetcher import FetchError

logger = logging.getLogger(__name__)


class RefreshState(Enum):
    NORMAL = "normal"
    DEGRADED = "degraded"


@dataclass(frozen=True)
class RefreshResult:
    """Outcome of one refresh batch."""

    state: RefreshState
    records: Tuple[PriceRecord, ...]
    error: Optional[str] = None

    @property
    def error_message(self) -> Optional[str]:
        if self.state is not RefreshState.DEGRADED:
            return None
        return (
            "Error fetching prices\n"
            "Using placeholder data for now.\n"
            f"Error: {self.error}"
        )


def refresh_prices(
    tokens: Sequence[str], fetch: Callable[[str], PriceRecord]
) -> RefreshResult:
    """
    Fetch every token in order and decide the state for this tick.

    The first failure aborts the batch; the result then carries the
    placeholder records instead of any partial data.
    """
    records = []
    try:
        for token in tokens:
            records.append(fetch(token))
    except FetchError as e:
        logger.warning(f"Refresh batch failed: {e}")
        return RefreshResult(RefreshState.DEGRADED, PLACEHOLDER_RECORDS, str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during refresh: {e}")
        return RefreshResult(RefreshState.DEGRADED, PLACEHOLDER_RECORDS, str(e))

    return RefreshResult(RefreshState.NORMAL, tuple(records))


class RefreshWorker(QThread):
    """Runs a single refresh batch off the UI thread."""

    batch_finished = pyqtSignal(object)  # RefreshResult

    def __init__(self, tokens: Sequence[str], fetch: Callable[[str], PriceRecord], parent=None):
        super().__init__(parent)
        self._tokens = list(tokens)
        self._fetch = fetch

    def run(self):
        result = refresh_prices(self._tokens, self._fetch)
        self.batch_finished.emit(result)


class RefreshController(QObject):
    """
    Periodically refreshes prices for the configured tokens.

    Only one batch runs at a time: the next tick is scheduled after the
    current batch has delivered its result.
    """

    REFRESH_INTERVAL_MS = 60 * 1000

    prices_updated = pyqtSignal(object)  # RefreshResult

    def __init__(
        self,
        tokens: Sequence[str],
        fetch: Callable[[str], PriceRecord],
        interval_ms: int = REFRESH_INTERVAL_MS,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)
        self._tokens = list(tokens)
        self._fetch = fetch
        self._state = RefreshState.NORMAL
        self._last_result: Optional[RefreshResult] = None
        self._worker: Optional[RefreshWorker] = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.refresh_now)

    @property
    def state(self) -> RefreshState:
        return self._state

    @property
    def last_result(self) -> Optional[RefreshResult]:
        return self._last_result

    @property
    def tokens(self) -> list[str]:
        return list(self._tokens)

    def is_refreshing(self) -> bool:
        return self._worker is not None

    def start(self):
        """Run the first tick now; later ticks follow on the timer."""
        logger.info(f"Starting refresh cycle for {len(self._tokens)} tokens")
        self.refresh_now()

    def stop(self):
        """Stop scheduling ticks and wait for a running batch."""
        self._timer.stop()
        if self._worker is not None:
            self._worker.batch_finished.disconnect(self._on_batch_finished)
            self._worker.wait()
            self._worker.deleteLater()
            self._worker = None
        logger.info("Refresh cycle stopped")

    def refresh_now(self):
        """Start a refresh batch unless one is already running."""
        if self._worker is not None:
            logger.debug("Refresh already in progress, skipping tick")
            return

        self._timer.stop()
        self._worker = RefreshWorker(self._tokens, self._fetch, self)
        self._worker.batch_finished.connect(self._on_batch_finished)
        self._worker.start()

    def _on_batch_finished(self, result: RefreshResult):
        """Publish a batch result and schedule the next tick."""
        worker, self._worker = self._worker, None
        if worker is not None:
            worker.wait()
            worker.deleteLater()

        if result.state is not self._state:
            if result.state is RefreshState.DEGRADED:
                logger.warning(f"Prices unavailable, showing placeholders: {result.error}")
            else:
                logger.info("Prices available again")

        self._state = result.state
        self._last_result = result
        self.prices_updated.emit(result)

        self._timer.start()
