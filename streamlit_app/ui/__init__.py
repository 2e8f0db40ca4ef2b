"""
UI Styling and Components Module.

This module provides global CSS styling, layout primitives and charts
for the Recipe Explorer Streamlit app.
"""

from ui.styles import load_global_styles
from ui.layout import page_header, kpi_row, recipe_card

__all__ = [
    "load_global_styles",
    "page_header",
    "kpi_row",
    "recipe_card",
]
