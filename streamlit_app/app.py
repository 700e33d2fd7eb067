"""
Cocktail Finder - Streamlit Frontend Main Entry Point.

A single page to search TheCocktailDB by cocktail name or ingredient, pick a
random cocktail, and read the full recipe.

Run with:
    streamlit run streamlit_app/app.py
"""

import sys
from pathlib import Path

# Ensure the streamlit_app directory is in the Python path
# This allows imports to work regardless of how the app is run
streamlit_app_dir = Path(__file__).parent
if str(streamlit_app_dir) not in sys.path:
    sys.path.insert(0, str(streamlit_app_dir))

# Add project root to path so we can import api.config and cocktails
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import api.config  # noqa: F401

import streamlit as st

from api.config import configure_logging
from cocktails import messages
from cocktails.view_state import Idle, Loading, ShowingDetail, ShowingError, ShowingList
from ui.cocktail_view import render_cocktail_detail, render_cocktail_grid
from ui.feedback import show_empty_state, show_failure, working_spinner
from ui.layout import page_header
from ui.styles import load_global_styles
from utils.state import get_resolver, get_search_session, select_cocktail

configure_logging()

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title=messages.APP_TITLE,
    page_icon="🍹",
    layout="centered",
)

# Inject global CSS styling
load_global_styles()

page_header(messages.APP_TITLE, messages.APP_TAGLINE)

session = get_search_session()
resolver = get_resolver()

# Search form: pressing Enter in the text box submits it
with st.form("search_form", clear_on_submit=False, border=False):
    query_col, button_col = st.columns([4, 1], gap="small", vertical_alignment="bottom")
    with query_col:
        query = st.text_input(
            "Cocktail or ingredient",
            placeholder=messages.SEARCH_PLACEHOLDER,
            key="search_query",
            label_visibility="collapsed",
        )
    with button_col:
        submitted = st.form_submit_button(messages.SEARCH_BUTTON, type="primary", use_container_width=True)

feeling_lucky = st.button(f"{messages.FEELING_LUCKY_BUTTON} 🍹", use_container_width=True)

if submitted:
    with working_spinner(messages.LOADING_COCKTAILS):
        session.search(resolver, query)
elif feeling_lucky:
    with working_spinner(messages.LOADING_COCKTAILS):
        session.random(resolver)

st.divider()

state = session.state
if isinstance(state, ShowingList):
    render_cocktail_grid(state.cocktails, on_select=select_cocktail)
elif isinstance(state, ShowingDetail):
    render_cocktail_detail(state.cocktail)
elif isinstance(state, ShowingError):
    show_failure(state.reason)
elif isinstance(state, Loading):
    st.caption(messages.LOADING_COCKTAILS)
elif isinstance(state, Idle):
    show_empty_state(
        "Search for a cocktail by name or ingredient",
        subtitle="Try \"margarita\", \"vodka\" or press I'm Feeling Lucky.",
    )
