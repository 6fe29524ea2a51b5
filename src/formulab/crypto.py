"""
Cryptocurrency price client for the CoinMarketCap API.

This module is thin I/O glue: it fetches the latest listings and converts an
amount between two currency symbols. Each operation performs a single HTTP
GET; nothing is cached and nothing is retried.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from formulab.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, Settings, get_settings
from formulab.core.errors import ConfigError, ResponseShapeError, ValidationError
from formulab.core.validation import require_positive

logger = logging.getLogger(__name__)

API_KEY_HEADER = "X-CMC_PRO_API_KEY"
LISTINGS_PATH = "/v1/cryptocurrency/listings/latest"
PRICE_CONVERSION_PATH = "/v2/tools/price-conversion"


class CryptoPriceClient:
    """
    Minimal CoinMarketCap client.

    Attributes:
        api_key: CoinMarketCap API key sent in the ``X-CMC_PRO_API_KEY`` header
        base_url: API root URL
        timeout: Request timeout in seconds (None waits indefinitely)
        session: requests-compatible session used for GET requests
    """

    def __init__(
        self,
        api_key: str | None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float | None = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: CoinMarketCap API key
            base_url: API root URL
            timeout: Request timeout in seconds
            session: Optional session (a new ``requests.Session`` by default)

        Raises:
            ConfigError: If the API key is missing or blank
        """
        if not api_key or not api_key.strip():
            raise ConfigError(
                "CoinMarketCap API key is missing. Set COINMARKETCAP_API_KEY "
                "in the environment or in a .env file."
            )
        self.api_key = api_key.strip()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(
        cls, settings: Settings | None = None, session: requests.Session | None = None
    ) -> CryptoPriceClient:
        """Create a client from :class:`~formulab.config.Settings` (read from the environment by default)."""
        settings = settings or get_settings()
        return cls(
            settings.coinmarketcap_api_key,
            base_url=settings.coinmarketcap_base_url,
            timeout=settings.http_timeout,
            session=session,
        )

    def close(self) -> None:
        """Close the HTTP session if this client created it; a caller-supplied session is left open."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> CryptoPriceClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        """
        Perform a GET request and decode the JSON body.

        Raises:
            requests.RequestException: On network failure or non-success status,
                unchanged
            ResponseShapeError: If the body is not valid JSON
        """
        url = f"{self.base_url}{path}"
        try:
            response = self.session.get(
                url,
                params=params,
                headers={API_KEY_HEADER: self.api_key, "Accept": "application/json"},
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.RequestException:
            logger.error("Error fetching data from CoinMarketCap: GET %s", url, exc_info=True)
            raise

        try:
            return response.json()
        except ValueError as exc:
            raise ResponseShapeError(
                f"CoinMarketCap returned a non-JSON body for {path}"
            ) from exc

    def latest_listings(self, **params) -> dict:
        """
        Fetch the latest cryptocurrency listings.

        Args:
            **params: Optional query parameters (e.g. ``limit=10``, ``convert="EUR"``)

        Returns:
            Decoded JSON body as returned by the API
        """
        logger.debug("Fetching latest listings with params %s", params)
        return self._get(LISTINGS_PATH, params or None)

    def convert(self, amount, from_symbol: str, to_symbol: str) -> float:
        """
        Convert an amount of one currency into another.

        Args:
            amount: Amount of ``from_symbol`` to convert (must be > 0)
            from_symbol: Source symbol, e.g. "BTC"
            to_symbol: Target symbol, e.g. "USD"

        Returns:
            The converted amount (``data[0].quote[to_symbol].price``)

        Raises:
            ValidationError: On a non-positive amount or a blank symbol
            requests.RequestException: On network or HTTP failure, unchanged
            ResponseShapeError: If the price is missing from the response
        """
        (amount,) = require_positive(amount=amount)
        from_symbol = _require_symbol("from_symbol", from_symbol)
        to_symbol = _require_symbol("to_symbol", to_symbol)

        logger.debug("Converting %s %s to %s", amount, from_symbol, to_symbol)
        payload = self._get(
            PRICE_CONVERSION_PATH,
            {"amount": amount, "symbol": from_symbol, "convert": to_symbol},
        )
        return extract_price(payload, to_symbol)


def _require_symbol(name: str, value) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name.replace('_', ' ')} must be a non-empty symbol")
    return value.strip().upper()


def extract_price(payload: Any, to_symbol: str) -> float:
    """
    Pull ``data[0].quote[to_symbol].price`` out of a price-conversion response.

    A single object under ``data`` is treated like a one-element list.

    Raises:
        ResponseShapeError: If any level of the path is missing or the price
            is not a number
    """
    data = payload.get("data") if isinstance(payload, dict) else None
    if isinstance(data, dict):
        data = [data]
    if not data or not isinstance(data, list):
        raise ResponseShapeError("No conversion data found.", payload)

    quote = data[0].get("quote") if isinstance(data[0], dict) else None
    entry = quote.get(to_symbol) if isinstance(quote, dict) else None
    price = entry.get("price") if isinstance(entry, dict) else None
    if isinstance(price, bool) or not isinstance(price, (int, float)):
        raise ResponseShapeError(
            f"Conversion data for {to_symbol} not found in response.", payload
        )
    return float(price)


def fetch_latest_crypto_prices(**params) -> dict:
    """Fetch the latest listings using a client configured from the environment."""
    with CryptoPriceClient.from_settings() as client:
        return client.latest_listings(**params)


def convert_crypto_currency(amount, from_symbol: str, to_symbol: str) -> float:
    """
    Convert ``amount`` of ``from_symbol`` into ``to_symbol`` using the environment configuration.

    Raises:
        ConfigError: If no API key is configured (before any request is made)
    """
    with CryptoPriceClient.from_settings() as client:
        return client.convert(amount, from_symbol, to_symbol)
