"""
Search State Management Module.

This module wraps Streamlit's session_state to hold one SearchSession per
browser session. The SearchSession owns the single view state (idle, loading,
list, detail or error) and drops completions of superseded requests.

The resolver has no per-user state, so one instance is shared by all sessions
via st.cache_resource.

# NOTE: session_state only lives as long as the Streamlit session. Refreshing
    the page starts again from the idle state.
"""

import streamlit as st

from cocktails.resolver import SearchResolver
from cocktails.view_state import SearchSession

# Session state key for the search session
SEARCH_SESSION_KEY = "search_session"


@st.cache_resource
def get_resolver() -> SearchResolver:
    """Get the process-wide SearchResolver."""
    return SearchResolver()


def init_search_session() -> None:
    """Ensure a SearchSession exists in session state."""
    if SEARCH_SESSION_KEY not in st.session_state:
        st.session_state[SEARCH_SESSION_KEY] = SearchSession()


def get_search_session() -> SearchSession:
    """
    Get the current SearchSession, creating it on first use.

    Returns:
        The SearchSession stored in st.session_state
    """
    init_search_session()
    return st.session_state[SEARCH_SESSION_KEY]


def select_cocktail(cocktail_id: str) -> None:
    """Button callback: replace the current view with the chosen cocktail's full recipe."""
    get_search_session().select(get_resolver(), cocktail_id)
