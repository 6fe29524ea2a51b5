"""
Runtime configuration for FormulaLab, read from the process environment.

A ``.env`` file in the working directory is loaded first (via python-dotenv)
without overriding variables that are already set.

Variables:
    COINMARKETCAP_API_KEY: API key for the crypto price client
        (``COIN_MARKET_API_KEY`` is accepted as a fallback)
    COINMARKETCAP_BASE_URL: API root, defaults to the CoinMarketCap pro API
    FORMULAB_HTTP_TIMEOUT: Request timeout in seconds (default 10)
    FORMULAB_LOG_LEVEL: Log level used by the CLI (default WARNING)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from formulab.core.errors import ConfigError

DEFAULT_BASE_URL = "https://pro-api.coinmarketcap.com"
DEFAULT_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "WARNING"

API_KEY_VARS = ("COINMARKETCAP_API_KEY", "COIN_MARKET_API_KEY")


@dataclass(frozen=True)
class Settings:
    """
    Immutable settings snapshot.

    Attributes:
        coinmarketcap_api_key: API key, or None when not configured
        coinmarketcap_base_url: API root URL without trailing slash
        http_timeout: Request timeout in seconds
        log_level: Name of the log level for the CLI
    """

    coinmarketcap_api_key: str | None = None
    coinmarketcap_base_url: str = DEFAULT_BASE_URL
    http_timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, environ=None, dotenv: bool = True) -> Settings:
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (for tests)
            dotenv: Load a ``.env`` file into ``os.environ`` first

        Raises:
            ConfigError: If FORMULAB_HTTP_TIMEOUT is not a positive number
        """
        if dotenv and environ is None:
            load_dotenv()
        env = os.environ if environ is None else environ

        api_key = None
        for var in API_KEY_VARS:
            value = (env.get(var) or "").strip()
            if value:
                api_key = value
                break

        raw_timeout = env.get("FORMULAB_HTTP_TIMEOUT")
        if raw_timeout is None or not raw_timeout.strip():
            timeout = DEFAULT_TIMEOUT
        else:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigError(
                    f"FORMULAB_HTTP_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                ) from exc
            if timeout <= 0:
                raise ConfigError(
                    f"FORMULAB_HTTP_TIMEOUT must be greater than zero, got {raw_timeout!r}"
                )

        base_url = (env.get("COINMARKETCAP_BASE_URL") or DEFAULT_BASE_URL).rstrip("/")
        log_level = (env.get("FORMULAB_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()

        return cls(
            coinmarketcap_api_key=api_key,
            coinmarketcap_base_url=base_url,
            http_timeout=timeout,
            log_level=log_level,
        )


def get_settings() -> Settings:
    """Read a fresh settings snapshot from the environment."""
    return Settings.from_env()
