"""
Global CSS Styling for the Recipe Explorer.

This module provides load_global_styles() to inject consistent styling
across all pages.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the Recipe Explorer app.

    This function:
    - Imports Google Fonts (Nunito) for friendly typography
    - Tightens heading spacing
    - Gives bordered containers (recipe cards) rounded corners and a soft hover shadow
    - Styles KPI metrics as white cards
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Nunito:wght@400;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Nunito', 'sans serif' !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.02em !important;
        }

        h3 {
            font-size: 1.15rem !important;
            margin-top: 0.5rem !important;
            margin-bottom: 0.25rem !important;
        }

        .rx-page-header {
            margin-bottom: 1rem;
        }

        /* Recipe cards */
        [data-testid="stVerticalBlockBorderWrapper"] {
            border-radius: 0.75rem !important;
            transition: box-shadow 0.3s ease-in-out;
        }

        [data-testid="stVerticalBlockBorderWrapper"]:hover {
            box-shadow: 0 10px 20px rgba(15, 23, 42, 0.08);
        }

        [data-testid="stVerticalBlockBorderWrapper"] img {
            border-radius: 0.5rem;
            height: 12rem;
            object-fit: cover;
        }

        /* KPI cards */
        [data-testid="stMetric"] {
            background: #ffffff;
            border: 1px solid #e2e8f0;
            border-radius: 0.5rem;
            padding: 1rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
