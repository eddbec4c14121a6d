"""
CoinGecko price fetcher.
"""

import logging
from typing import Optional

import requests

from core.models import PriceRecord

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the price of a token cannot be fetched."""

    def __init__(self, token_id: str, message: str):
        super().__init__(message)
        self.token_id = token_id


class PriceFetcher:
    """Fetches USD price and 24h change for a single token."""

    API_URL = "https://api.coingecko.com/api/v3/simple/price"
    TIMEOUT = 10

    def __init__(self, session: Optional[requests.Session] = None, timeout: float = TIMEOUT):
        self._session = session or requests.Session()
        self._timeout = timeout

    def fetch(self, token_id: str) -> PriceRecord:
        """
        Fetch the current price record for a token.

        Args:
            token_id: CoinGecko coin id, e.g. "bitcoin"

        Returns:
            Fresh price record

        Raises:
            FetchError: On any network, HTTP or payload error
        """
        params = {
            "ids": token_id,
            "vs_currencies": "usd",
            "include_24hr_change": "true",
        }

        logger.debug(f"Fetching price for {token_id}")
        try:
            response = self._session.get(self.API_URL, params=params, timeout=self._timeout)
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as e:
            raise FetchError(token_id, f"Request for {token_id} failed: {e}") from e
        except ValueError as e:
            raise FetchError(token_id, f"Invalid JSON for {token_id}: {e}") from e

        return self._parse(token_id, data)

    def _parse(self, token_id: str, data) -> PriceRecord:
        """Project the response payload onto a price record."""
        entry = data.get(token_id) if isinstance(data, dict) else None
        if not isinstance(entry, dict):
            raise FetchError(token_id, f"No price data for {token_id}")

        if "usd" not in entry or "usd_24h_change" not in entry:
            raise FetchError(token_id, f"Incomplete price data for {token_id}")

        try:
            return PriceRecord(token_id, entry["usd"], entry["usd_24h_change"])
        except ValueError as e:
            raise FetchError(token_id, f"Bad price data for {token_id}: {e}") from e

    def close(self):
        """Close the underlying HTTP session."""
        self._session.close()
