"""
TheCocktailDB connector.

This connector interfaces with the public TheCocktailDB JSON API
(https://www.thecocktaildb.com/api.php) and exposes its four read-only
endpoints used by the resolver:

- search.php?s=<text>   search drinks by name (full records)
- filter.php?i=<text>   filter drinks by ingredient (partial records)
- random.php            one random drink (full record)
- lookup.php?i=<id>     full record for a drink id

Every endpoint answers with {"drinks": [...]} where "drinks" is null when
nothing matched. The filter endpoint is less consistent: it may answer with an
empty body or with a string instead of a list. All of these are reported as an
empty list. Transport failures, non-2xx statuses and undecodable bodies raise
CocktailDBError instead, so callers never confuse a failure with "no results".

The base URL, API key and timeout come from api.config (COCKTAILDB_* env vars).
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from api.config import CocktailDBConfig

from .base import BaseConnector, CocktailDBError

logger = logging.getLogger(__name__)


class CocktailDBConnector(BaseConnector):
    """
    Connector for TheCocktailDB public API.

    Uses plain GET requests; the API key is part of the URL path, so no
    authentication headers are sent.
    """
    source = "cocktaildb"

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            base_url: API base URL (optional, reads from COCKTAILDB_BASE_URL /
                      COCKTAILDB_API_KEY if not provided)
            timeout: Request timeout in seconds (optional, reads from
                     COCKTAILDB_TIMEOUT; None means no timeout)
        """
        url = base_url or CocktailDBConfig.get_base_url()
        self.base_url = url.rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else CocktailDBConfig.get_timeout()

    def search_by_name(self, query: str) -> List[Dict[str, Any]]:
        return self._get_drinks("search.php", {"s": query})

    def filter_by_ingredient(self, ingredient: str) -> List[Dict[str, Any]]:
        return self._get_drinks("filter.php", {"i": ingredient})

    def random_pick(self) -> List[Dict[str, Any]]:
        return self._get_drinks("random.php")

    def lookup_by_id(self, cocktail_id: str) -> List[Dict[str, Any]]:
        return self._get_drinks("lookup.php", {"i": cocktail_id})

    def _get_drinks(self, endpoint: str, params: Optional[Dict[str, str]] = None) -> List[Dict[str, Any]]:
        """
        GET an endpoint and return its "drinks" list.

        Args:
            endpoint: Endpoint file name relative to the base URL (e.g., "search.php")
            params: Query parameters (URL-encoded by requests)

        Returns:
            List of raw drink dictionaries, empty when the API reports no drinks

        Raises:
            CocktailDBError: On connection errors, timeouts, non-2xx responses,
                             or a body that is not valid JSON.
        """
        url = f"{self.base_url}{endpoint}"
        logger.debug("GET %s params=%r", url, params)

        try:
            response = requests.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout as e:
            raise CocktailDBError(f"Request to {endpoint} timed out", endpoint=endpoint) from e
        except requests.exceptions.ConnectionError as e:
            raise CocktailDBError(f"Could not connect to TheCocktailDB ({endpoint}): {e}", endpoint=endpoint) from e
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise CocktailDBError(
                f"TheCocktailDB returned HTTP {status_code} for {endpoint}",
                endpoint=endpoint,
                status_code=status_code,
            ) from e
        except requests.exceptions.RequestException as e:
            raise CocktailDBError(f"Request to {endpoint} failed: {e}", endpoint=endpoint) from e

        # filter.php answers unknown ingredients with an empty 200 body
        if not response.text or not response.text.strip():
            logger.debug("Empty body from %s, treating as no results", endpoint)
            return []

        try:
            payload = response.json()
        except ValueError as e:
            raise CocktailDBError(
                f"Unexpected response format from {endpoint}: body is not JSON",
                endpoint=endpoint,
                status_code=response.status_code,
            ) from e

        drinks = payload.get("drinks") if isinstance(payload, dict) else None
        if not isinstance(drinks, list):
            # null, or strings such as "no data found"
            return []

        items = [drink for drink in drinks if isinstance(drink, dict)]
        logger.debug("%s returned %d drinks", endpoint, len(items))
        return items
