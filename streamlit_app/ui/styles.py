"""
Global CSS Styling for Cocktail Finder.

This module provides load_global_styles() to inject consistent styling:
typography, the gradient page title, cocktail cards and ingredient lists.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Cocktail Finder app.

    This function:
    - Imports Google Fonts (Inter) for clean typography
    - Renders the page title with a blue gradient
    - Gives result cards rounded corners and equal-height thumbnails
    - Styles pill tags used for category, glass and type
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700;800&display=swap');

        html, body, [class*="css"] {
            font-family: 'Inter', sans-serif !important;
        }

        .cf-page-header h1 {
            font-weight: 800 !important;
            background-image: linear-gradient(to right, #4299E1, #2B6CB0);
            -webkit-background-clip: text;
            -webkit-text-fill-color: transparent;
            background-clip: text;
            color: transparent;
            display: inline-block;
        }

        .cf-page-header .subtitle {
            color: #4A5568;
            font-size: 1.15rem;
            margin-bottom: 1.5rem;
        }

        .cf-section-caption {
            color: #718096;
            font-size: 0.9rem;
        }

        .cf-card {
            border: 1px solid #E2E8F0;
            border-radius: 0.75rem;
            padding: 0.75rem;
            margin-bottom: 1rem;
            background: #FFFFFF;
        }

        .cf-card img {
            border-radius: 0.5rem;
            aspect-ratio: 1 / 1;
            object-fit: cover;
        }

        .cf-card-title {
            font-weight: 600;
            font-size: 1.05rem;
            margin: 0.5rem 0;
        }

        .pill-tag {
            display: inline-block;
            padding: 0.15rem 0.65rem;
            margin: 0 0.35rem 0.35rem 0;
            border-radius: 999px;
            background: #EBF8FF;
            color: #2B6CB0;
            font-size: 0.85rem;
            font-weight: 500;
        }

        .cf-ingredients li {
            margin-bottom: 0.2rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
