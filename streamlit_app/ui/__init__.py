"""
UI Styling and Components Module.

This module provides global CSS styling and reusable UI components
for the Cocktail Finder Streamlit app.
"""

from ui.layout import page_header, section, card, pill_tag
from ui.styles import load_global_styles

__all__ = [
    "load_global_styles",
    "page_header",
    "section",
    "card",
    "pill_tag",
]
