"""
Configuration management for Cocktail Finder.

This module centralizes environment variable loading from .env file at project root.
It should be imported early in both the API (api/main.py) and the frontend
(streamlit_app/app.py) so .env is loaded before any other code reads the environment.

When .env does not exist, load_dotenv() is a no-op and the process environment is used.

Environment Variables:
- COCKTAILDB_API_KEY: Optional, TheCocktailDB API key (defaults to the public test key "1")
- COCKTAILDB_BASE_URL: Optional, full base URL; overrides the URL built from the API key
- COCKTAILDB_TIMEOUT: Optional, request timeout in seconds (no timeout when unset)
- LOG_LEVEL: Optional, logging level name (defaults to INFO)
"""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_KEY = "1"
BASE_URL_TEMPLATE = "https://www.thecocktaildb.com/api/json/v1/{api_key}/"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Variables already present in the environment
    take precedence over values from .env.
    """
    # api/config.py -> api/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


# Load .env file on module import
load_env_file()


class CocktailDBConfig:
    """Configuration for the TheCocktailDB connector."""

    @staticmethod
    def get_api_key() -> str:
        """
        Get TheCocktailDB API key.

        Returns:
            API key string (default: "1", the public development key)
        """
        return os.getenv("COCKTAILDB_API_KEY") or DEFAULT_API_KEY

    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL, always ending with a slash.

        COCKTAILDB_BASE_URL wins when set; otherwise the URL is built from the API key.
        """
        url = os.getenv("COCKTAILDB_BASE_URL") or BASE_URL_TEMPLATE.format(
            api_key=CocktailDBConfig.get_api_key()
        )
        return url.rstrip("/") + "/"

    @staticmethod
    def get_timeout() -> Optional[float]:
        """
        Get request timeout in seconds.

        Returns:
            Timeout as float, or None (transport default) when unset or invalid
        """
        raw = os.getenv("COCKTAILDB_TIMEOUT")
        if not raw:
            return None
        try:
            timeout = float(raw)
        except ValueError:
            logger.warning("Ignoring invalid COCKTAILDB_TIMEOUT=%r", raw)
            return None
        return timeout if timeout > 0 else None


def get_log_level() -> str:
    """Get the configured log level name (default: INFO)."""
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


def configure_logging() -> None:
    """
    Configure root logging once for the API or Streamlit process.

    Unknown LOG_LEVEL values fall back to INFO.
    """
    level = logging.getLevelName(get_log_level())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
