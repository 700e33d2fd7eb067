"""
View state for the cocktail finder front end.

The page is always in exactly one of these states:

- Idle:           nothing searched yet
- Loading:        a search, random pick or detail lookup is in flight
- ShowingList:    several cocktails, waiting for the user to pick one
- ShowingDetail:  one cocktail's full recipe
- ShowingError:   a user-visible failure (including "no cocktails found")

SearchSession owns the current state. Every user action calls begin(), which
hands out a new request id and drops whatever list or detail was on screen.
The outcome is applied with complete(request_id, outcome) only if that id is
still the newest one; completions of superseded requests are ignored, so the
last action the user triggered always wins.
"""

import logging
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from cocktails.models import (
    Cocktail,
    EmptyOutcome,
    FailedOutcome,
    FailureReason,
    ManyOutcome,
    SearchOutcome,
    SingleOutcome,
)
from cocktails.resolver import SearchResolver

logger = logging.getLogger(__name__)


class Idle(BaseModel):
    status: Literal["idle"] = "idle"


class Loading(BaseModel):
    status: Literal["loading"] = "loading"
    request_id: int


class ShowingList(BaseModel):
    status: Literal["showing_list"] = "showing_list"
    cocktails: List[Cocktail]


class ShowingDetail(BaseModel):
    status: Literal["showing_detail"] = "showing_detail"
    cocktail: Cocktail


class ShowingError(BaseModel):
    status: Literal["showing_error"] = "showing_error"
    reason: FailureReason


ViewState = Annotated[
    Union[Idle, Loading, ShowingList, ShowingDetail, ShowingError],
    Field(discriminator="status"),
]


def state_for_outcome(outcome: SearchOutcome) -> ViewState:
    """Map a resolver outcome to the state the page should show."""
    if isinstance(outcome, SingleOutcome):
        return ShowingDetail(cocktail=outcome.cocktail)
    if isinstance(outcome, ManyOutcome):
        return ShowingList(cocktails=outcome.cocktails)
    if isinstance(outcome, FailedOutcome):
        return ShowingError(reason=outcome.reason)
    if isinstance(outcome, EmptyOutcome):
        return ShowingError(reason=FailureReason.NO_RESULTS_FOUND)
    raise TypeError(f"Unknown outcome type: {type(outcome).__name__}")


class SearchSession:
    """
    Holds the single current ViewState and guards it against stale completions.

    Example:
        >>> session = SearchSession()
        >>> session.search(resolver, "margarita")
        >>> session.state.status
        'showing_list'
    """

    def __init__(self) -> None:
        self._state: ViewState = Idle()
        self._active_request: int = 0

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def active_request(self) -> int:
        return self._active_request

    def begin(self) -> int:
        """Start a new action and return its request id."""
        self._active_request += 1
        self._state = Loading(request_id=self._active_request)
        return self._active_request

    def complete(self, request_id: int, outcome: SearchOutcome) -> bool:
        """
        Apply an outcome if request_id is still the active request.

        Returns:
            True if the state was updated, False if the completion was stale
        """
        if request_id != self._active_request:
            logger.debug(
                "Ignoring stale completion for request %d (active: %d)", request_id, self._active_request
            )
            return False
        self._state = state_for_outcome(outcome)
        return True

    def reset(self) -> None:
        """Return to Idle; any in-flight request becomes stale."""
        self._active_request += 1
        self._state = Idle()

    def search(self, resolver: SearchResolver, query: Optional[str]) -> ViewState:
        """
        Run a text search and show its outcome.

        A single partial record (from the ingredient filter) has no ingredients
        or instructions, so it is hydrated with a detail lookup before display.
        """
        request_id = self.begin()
        outcome = resolver.resolve_by_text(query)
        if isinstance(outcome, SingleOutcome) and outcome.cocktail.is_partial:
            logger.info("Hydrating single partial result %s", outcome.cocktail.id)
            outcome = resolver.resolve_details_by_id(outcome.cocktail.id)
        self.complete(request_id, outcome)
        return self._state

    def random(self, resolver: SearchResolver) -> ViewState:
        request_id = self.begin()
        self.complete(request_id, resolver.resolve_random())
        return self._state

    def select(self, resolver: SearchResolver, cocktail_id: str) -> ViewState:
        """Show full details for a cocktail picked from the list; the list is replaced."""
        request_id = self.begin()
        self.complete(request_id, resolver.resolve_details_by_id(cocktail_id))
        return self._state
