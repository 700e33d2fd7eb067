"""
Cocktail rendering components.

- render_cocktail_grid: result cards with a "View recipe" button each
- render_cocktail_detail: image, tags, ingredient lines and instructions
"""

from html import escape
from typing import Callable, List

import streamlit as st

from cocktails import messages
from cocktails.models import Cocktail
from cocktails.resolver import extract_ingredient_lines
from ui.layout import card, pill_tag, section

GRID_COLUMNS = 3


def render_cocktail_grid(cocktails: List[Cocktail], on_select: Callable[[str], None]) -> None:
    """
    Render cocktails as a grid of cards.

    Args:
        cocktails: Cocktails to show, in API order
        on_select: Called with the cocktail id when its button is clicked
    """
    section(messages.SEARCH_RESULTS, caption=f"{len(cocktails)} cocktails")
    for row_start in range(0, len(cocktails), GRID_COLUMNS):
        columns = st.columns(GRID_COLUMNS, gap="medium")
        for offset, (column, cocktail) in enumerate(zip(columns, cocktails[row_start:row_start + GRID_COLUMNS])):
            with column:
                with card(cocktail.name):
                    if cocktail.thumbnail_url:
                        st.image(cocktail.thumbnail_url, use_container_width=True)
                    st.button(
                        messages.VIEW_RECIPE_BUTTON,
                        key=f"view_recipe_{row_start + offset}_{cocktail.id}",
                        on_click=on_select,
                        args=(cocktail.id,),
                        use_container_width=True,
                    )


def render_cocktail_detail(cocktail: Cocktail) -> None:
    """Render the full recipe view for one cocktail."""
    with card():
        image_col, info_col = st.columns([2, 3], gap="large")

        with image_col:
            if cocktail.thumbnail_url:
                st.image(cocktail.thumbnail_url, use_container_width=True)

        with info_col:
            st.markdown(f"## {cocktail.name}")

            tags = [
                (messages.LABEL_CATEGORY, cocktail.category),
                (messages.LABEL_GLASS, cocktail.glass),
                (messages.LABEL_TYPE, cocktail.alcoholic_type),
            ]
            tag_html = "".join(pill_tag(f"{label}: {value}") for label, value in tags if value)
            if tag_html:
                st.markdown(tag_html, unsafe_allow_html=True)

            lines = [line.text for line in extract_ingredient_lines(cocktail)]
            if lines:
                st.markdown(f"### {messages.LABEL_INGREDIENTS}")
                items = "".join(f"<li>{escape(text)}</li>" for text in lines)
                st.markdown(f'<ul class="cf-ingredients">{items}</ul>', unsafe_allow_html=True)

            if cocktail.instructions:
                st.markdown(f"### {messages.LABEL_INSTRUCTIONS}")
                st.write(cocktail.instructions)
