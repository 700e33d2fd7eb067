"""
Search resolution over TheCocktailDB.

This module turns user actions into SearchOutcome values:

- resolve_by_text: name search first, ingredient filter as a fallback
- resolve_random: a single random pick
- resolve_details_by_id: full record for a drink chosen from a result list

Every failure becomes a FailedOutcome; nothing raises past the resolver for a
transport problem. A failure is never mistaken for an empty result: when the
name search fails, the ingredient fallback is not attempted.

Search flow: Streamlit / GET /search -> SearchResolver.resolve_by_text()
-> connector.search_by_name() [-> connector.filter_by_ingredient()]
-> Cocktail -> SearchOutcome
"""

import logging
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError

from cocktails.connectors.base import BaseConnector, CocktailDBError
from cocktails.connectors.cocktaildb_connector import CocktailDBConnector
from cocktails.models import (
    Cocktail,
    EmptyOutcome,
    FailedOutcome,
    FailureReason,
    IngredientLine,
    ManyOutcome,
    SearchOutcome,
    SingleOutcome,
    clean_text,
)

logger = logging.getLogger(__name__)


def extract_ingredient_lines(cocktail: Cocktail) -> Iterator[IngredientLine]:
    """
    Yield the displayable ingredient lines of a cocktail in slot order.

    Slots whose ingredient is missing or blank are skipped. The measure is
    trimmed and dropped when blank, in which case the line is just the
    ingredient name.

    Example:
        >>> lines = extract_ingredient_lines(margarita)
        >>> [line.text for line in lines]
        ['1 1/2 oz Tequila', '1/2 oz Triple sec', '1 oz Lime juice', 'Salt']
    """
    for slot in sorted(cocktail.slots, key=lambda s: s.index):
        ingredient = clean_text(slot.ingredient)
        if ingredient is None:
            continue
        yield IngredientLine(index=slot.index, ingredient=ingredient, measure=clean_text(slot.measure))


def _failure_detail(error: CocktailDBError) -> str:
    """
    Describe a failed request without echoing the underlying exception text.

    The exception message can contain the request URL, and with it the API key.
    """
    endpoint = error.endpoint or "TheCocktailDB"
    if error.status_code is not None:
        return f"{endpoint} returned HTTP {error.status_code}"
    return f"{endpoint} request failed"


def _to_cocktails(items: List[Dict[str, Any]], step: str) -> List[Cocktail]:
    """Validate raw drink dicts, logging and skipping any that do not parse."""
    cocktails: List[Cocktail] = []
    for item in items:
        try:
            cocktails.append(Cocktail.model_validate(item))
        except ValidationError as e:
            logger.error("Skipping malformed drink from %s: %s. Item: %s", step, e, str(item)[:200])
    return cocktails


class SearchResolver:
    """
    Resolves search, random and detail requests into SearchOutcome values.

    The resolver holds no state between calls; calling an operation twice
    against unchanged remote data gives equal outcomes.
    """

    def __init__(self, connector: Optional[BaseConnector] = None) -> None:
        self.connector = connector if connector is not None else CocktailDBConnector()

    def resolve_by_text(self, query: Optional[str]) -> SearchOutcome:
        """
        Search by cocktail name, falling back to an ingredient filter.

        Args:
            query: Free text typed by the user (e.g., "margarita", "vodka")

        Returns:
            - FailedOutcome(EMPTY_QUERY) if the trimmed query is empty (no request made)
            - FailedOutcome(NETWORK_ERROR) if either request fails
            - SingleOutcome if exactly one drink matched
            - ManyOutcome if several drinks matched
            - EmptyOutcome if neither step matched, or every returned record was malformed

        The name search wins whenever it returns anything; the two result sets
        are never merged.
        """
        term = (query or "").strip()
        if not term:
            logger.debug("Rejecting empty search query")
            return FailedOutcome(reason=FailureReason.EMPTY_QUERY)

        logger.info("Search request: query=%r", term)

        try:
            # Fallback is decided on the raw response, before validation drops anything
            raw = self.connector.search_by_name(term)
            step = "name"
            if not raw:
                logger.info("No name match for %r, trying ingredient filter", term)
                raw = self.connector.filter_by_ingredient(term)
                step = "ingredient"
        except CocktailDBError as e:
            logger.warning("Search for %r failed: %s", term, e)
            return FailedOutcome(reason=FailureReason.NETWORK_ERROR, detail=_failure_detail(e))

        cocktails = _to_cocktails(raw, f"{step} search")
        logger.info("Search %r resolved by %s step with %d drinks", term, step, len(cocktails))
        return self._outcome_for(cocktails)

    def resolve_random(self) -> SearchOutcome:
        """
        Fetch one random cocktail.

        Returns:
            SingleOutcome with the drink, FailedOutcome(NO_RANDOM_AVAILABLE) when
            the API returned nothing, or FailedOutcome(NETWORK_ERROR).
        """
        try:
            cocktails = _to_cocktails(self.connector.random_pick(), "random_pick")
        except CocktailDBError as e:
            logger.warning("Random pick failed: %s", e)
            return FailedOutcome(reason=FailureReason.NETWORK_ERROR, detail=_failure_detail(e))

        if not cocktails:
            logger.info("Random pick returned no drink")
            return FailedOutcome(reason=FailureReason.NO_RANDOM_AVAILABLE)

        logger.info("Random pick: %s (%s)", cocktails[0].name, cocktails[0].id)
        return SingleOutcome(cocktail=cocktails[0])

    def resolve_details_by_id(self, cocktail_id: Optional[str]) -> SearchOutcome:
        """
        Fetch the full record for a drink id.

        Used when the user picks one card out of a result list; filter results
        lack ingredients and instructions, so the record is always re-fetched.

        Returns:
            SingleOutcome with the full record, FailedOutcome(DETAILS_NOT_FOUND)
            for unknown or blank ids, or FailedOutcome(NETWORK_ERROR).
        """
        drink_id = (cocktail_id or "").strip()
        if not drink_id:
            return FailedOutcome(reason=FailureReason.DETAILS_NOT_FOUND)

        try:
            cocktails = _to_cocktails(self.connector.lookup_by_id(drink_id), "lookup_by_id")
        except CocktailDBError as e:
            logger.warning("Lookup of drink %s failed: %s", drink_id, e)
            return FailedOutcome(reason=FailureReason.NETWORK_ERROR, detail=_failure_detail(e))

        if not cocktails:
            logger.info("No details found for drink %s", drink_id)
            return FailedOutcome(reason=FailureReason.DETAILS_NOT_FOUND)

        return SingleOutcome(cocktail=cocktails[0])

    @staticmethod
    def _outcome_for(cocktails: List[Cocktail]) -> SearchOutcome:
        if not cocktails:
            return EmptyOutcome()
        if len(cocktails) == 1:
            return SingleOutcome(cocktail=cocktails[0])
        return ManyOutcome(cocktails=cocktails)
