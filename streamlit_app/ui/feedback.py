"""
Standardized feedback utilities for consistent error, empty, and loading states.
"""

from contextlib import contextmanager
from typing import Callable, Optional
import streamlit as st

from recipe_engine.config import missing_config_hint

NETWORK_HINT = "Check your network connection and Spoonacular quota, then retry."


def show_error(message: str, hint: Optional[str] = None) -> None:
    """
    Display a standardized error message with optional hint.

    Args:
        message: Main error message to display
        hint: Optional hint text to help users resolve the issue
    """
    st.error(f"⚠️ {message}")
    if hint:
        st.caption(f"💡 {hint}")


def show_empty_state(
    title: str,
    subtitle: Optional[str] = None,
    action_label: str = "Back to recipes",
    action_page_path: Optional[str] = None
) -> None:
    """
    Display a standardized empty state with optional action button.

    Args:
        title: Main empty state title
        subtitle: Optional subtitle/description text
        action_label: Label for the action button
        action_page_path: Optional page path to navigate to when button is clicked
    """
    st.info(f"📭 **{title}**")
    if subtitle:
        st.caption(subtitle)

    if action_page_path:
        if st.button(action_label, use_container_width=True, type="primary"):
            st.switch_page(action_page_path)


@contextmanager
def working_spinner(label: str = "Loading…"):
    """
    Show a spinner while the recipe catalog is fetched or refetched.

    The pages wrap ensure_catalog_loaded() in it on first run, and
    show_fetch_failure wraps the Retry fetch.
    """
    with st.spinner(label):
        yield


def show_fetch_failure(message: Optional[str], on_retry: Callable[[], None]) -> None:
    """
    Display the catalog's fetch failure with a Retry button.

    Args:
        message: Failure message stored on the catalog
        on_retry: Called when Retry is clicked; should start a new fetch attempt
    """
    show_error(message or "Failed to fetch Recipes", hint=missing_config_hint() or NETWORK_HINT)
    if st.button("Retry", type="primary"):
        with working_spinner("Fetching recipes…"):
            on_retry()
        st.rerun()
