"""
User-facing strings for the cocktail finder.

English only. FAILURE_MESSAGES covers every FailureReason so the front end and
the API can always turn a failed outcome into something readable.
"""

from typing import Dict

from cocktails.models import FailureReason

APP_TITLE = "Cocktail AI"
APP_TAGLINE = "Discover your next favorite drink!"
SEARCH_PLACEHOLDER = "Search for a cocktail or ingredient..."
SEARCH_BUTTON = "Search"
FEELING_LUCKY_BUTTON = "I'm Feeling Lucky"
VIEW_RECIPE_BUTTON = "View recipe"
LOADING_COCKTAILS = "Loading cocktails..."
SEARCH_RESULTS = "Search Results"

# Labels for the detail view
LABEL_CATEGORY = "Category"
LABEL_GLASS = "Glass"
LABEL_TYPE = "Type"
LABEL_INGREDIENTS = "Ingredients"
LABEL_INSTRUCTIONS = "Instructions"

FAILURE_MESSAGES: Dict[FailureReason, str] = {
    FailureReason.EMPTY_QUERY: "Please enter a cocktail name or ingredient to search.",
    FailureReason.NETWORK_ERROR: (
        "Failed to fetch cocktails. Please check your internet connection or try again later."
    ),
    FailureReason.NO_RESULTS_FOUND: (
        "No cocktails found for your search. Try a different name or ingredient."
    ),
    FailureReason.NO_RANDOM_AVAILABLE: "Failed to fetch a random cocktail.",
    FailureReason.DETAILS_NOT_FOUND: "Could not find full details for this cocktail.",
}


def failure_message(reason: FailureReason) -> str:
    """Get the user-facing message for a failure reason."""
    return FAILURE_MESSAGES[reason]
