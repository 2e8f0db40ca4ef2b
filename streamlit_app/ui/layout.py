"""
Layout primitives for consistent page structure.

Provides page headers, KPI rows and recipe cards.
"""

from typing import Callable, Optional

import streamlit as st

from recipe_engine.models import Recipe


def format_calories(recipe: Recipe) -> str:
    """Calories rounded to a whole number, or 'N/A' when unknown."""
    calories = recipe.calories
    return f"{calories:.0f}" if calories is not None else "N/A"


def format_health_score(recipe: Recipe) -> str:
    """Health score as text, or 'N/A' when unknown."""
    return str(recipe.health_score) if recipe.health_score is not None else "N/A"


def page_header(title: str, subtitle: Optional[str] = None) -> None:
    """
    Render a consistent page header with title and optional subtitle.

    Args:
        title: Main page title
        subtitle: Optional subtitle/description text
    """
    st.markdown('<div class="rx-page-header">', unsafe_allow_html=True)
    st.markdown(f"# {title}")
    if subtitle:
        st.caption(subtitle)
    st.markdown('</div>', unsafe_allow_html=True)


def kpi_row(kpis: list[dict]) -> None:
    """
    Render a row of KPI metrics.

    Args:
        kpis: List of dicts with keys:
            - label: KPI label text
            - value: KPI value (number or string)
            - icon: Optional emoji or icon prefix
    """
    cols = st.columns(len(kpis))
    for col, kpi in zip(cols, kpis):
        with col:
            label = kpi.get("label", "")
            icon = kpi.get("icon", "")
            display_label = f"{icon} {label}" if icon else label
            st.metric(label=display_label, value=kpi.get("value", ""))


def recipe_card(recipe: Recipe, on_view: Callable[[int], None]) -> None:
    """
    Render one recipe card with image, title, calories, health score and a details button.

    Args:
        recipe: Recipe to show
        on_view: Called with the recipe id when "View Details" is clicked
    """
    with st.container(border=True):
        if recipe.image:
            st.image(recipe.image, use_container_width=True)
        st.subheader(recipe.title, anchor=False)
        col_label, col_value = st.columns([2, 1])
        with col_label:
            st.caption("Calories:")
            st.caption("Health Score:")
        with col_value:
            st.caption(format_calories(recipe))
            st.caption(format_health_score(recipe))
        if st.button("View Details", key=f"view_recipe_{recipe.id}", use_container_width=True, type="primary"):
            on_view(recipe.id)
