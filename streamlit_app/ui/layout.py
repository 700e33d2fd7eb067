"""
Layout primitives for consistent page structure.

Provides reusable components for the page header, sections, cards and pill tags.
"""

from contextlib import contextmanager
from html import escape
from typing import Optional

import streamlit as st


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render the page header with title and optional subtitle.

    Args:
        title: Main page title (rendered with the gradient style)
        subtitle: Optional tagline below the title
    """
    html = f'<div class="cf-page-header"><h1>{escape(title)}</h1>'
    if subtitle:
        html += f'<div class="subtitle">{escape(subtitle)}</div>'
    html += "</div>"
    st.markdown(html, unsafe_allow_html=True)


def section(title: str, caption: Optional[str] = None) -> None:
    """
    Render a section header with optional caption.

    Args:
        title: Section title
        caption: Optional caption/help text below title
    """
    st.markdown(f"## {title}")
    if caption:
        st.markdown(f'<div class="cf-section-caption">{escape(caption)}</div>', unsafe_allow_html=True)


@contextmanager
def card(title: Optional[str] = None):
    """
    Context manager for a bordered card container.

    Usage:
        with card("Margarita"):
            st.image(url)
    """
    with st.container(border=True):
        if title:
            st.markdown(f'<div class="cf-card-title">{escape(title)}</div>', unsafe_allow_html=True)
        yield


def pill_tag(text: str) -> str:
    """
    Create HTML for a small rounded pill tag (e.g., "Cocktail", "Highball glass").

    Returns:
        HTML string for the pill tag
    """
    return f'<span class="pill-tag">{escape(text)}</span>'
