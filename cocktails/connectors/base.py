"""
Base connector abstract class for cocktail data sources.

This module defines the abstract base class that a cocktail data source must
implement. The resolver only talks to this interface, which keeps HTTP details
out of the search logic and makes the resolver easy to test with a mock.

All connectors must:
- Implement the source attribute (e.g., "cocktaildb")
- Return raw drink dictionaries; an empty list means "no results"
- Raise CocktailDBError (or a subclass) on transport or HTTP failures so that
  callers can tell a failure apart from an empty result
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional


class CocktailDBError(RuntimeError):
    """
    Raised when a request to the cocktail API fails.

    Covers connection errors, timeouts, non-success HTTP statuses and bodies
    that cannot be decoded. An empty result is never reported this way.
    """

    def __init__(self, message: str, endpoint: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.endpoint = endpoint
        self.status_code = status_code


class BaseConnector(ABC):
    """
    Abstract base class for cocktail data sources.

    Attributes:
        source: String identifier for the data source (e.g., "cocktaildb")
    """
    source: str

    @abstractmethod
    def search_by_name(self, query: str) -> List[Dict[str, Any]]:
        """
        Search drinks whose name matches the query.

        Args:
            query: Already-trimmed search text (e.g., "margarita")

        Returns:
            List of full drink records (empty list when nothing matches)
        """
        pass

    @abstractmethod
    def filter_by_ingredient(self, ingredient: str) -> List[Dict[str, Any]]:
        """
        List drinks that use the given ingredient.

        Returns:
            List of partial drink records (id, name and thumbnail only)
        """
        pass

    @abstractmethod
    def random_pick(self) -> List[Dict[str, Any]]:
        """Fetch one random drink (a list with at most one full record)."""
        pass

    @abstractmethod
    def lookup_by_id(self, cocktail_id: str) -> List[Dict[str, Any]]:
        """Fetch the full record for a drink id (a list with at most one record)."""
        pass
