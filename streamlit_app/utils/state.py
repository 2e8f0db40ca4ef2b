"""
Catalog State Management Module.

This module wraps Streamlit's session_state to hold one recipe Catalog per
browser session. The catalog is fetched once, on the first script run of the
session; every later rerun (typing in the search box, changing a select)
only re-filters the already loaded recipes.

# NOTE: Because the catalog lives in session_state, a page refresh starts a new
    session and therefore a new fetch. There is no automatic retry: a failed
    fetch stays FAILED until the user presses Retry.
"""

from typing import Optional

import streamlit as st

from recipe_engine.catalog import Catalog
from recipe_engine.connectors import SpoonacularConnector
from recipe_engine.loader import load_catalog
from recipe_engine.models import CatalogState

# Session state keys
CATALOG_KEY = "recipe_catalog"
SELECTED_RECIPE_KEY = "selected_recipe_id"


def get_catalog() -> Catalog:
    """
    Get the session's catalog, creating an empty one if needed.

    Returns:
        Catalog stored in session state
    """
    if CATALOG_KEY not in st.session_state:
        st.session_state[CATALOG_KEY] = Catalog()
    return st.session_state[CATALOG_KEY]


def reload_catalog() -> Catalog:
    """Run a fetch attempt for the session's catalog, replacing whatever it held."""
    return load_catalog(get_catalog(), SpoonacularConnector())


def ensure_catalog_loaded() -> Catalog:
    """
    Fetch recipes if this session has not tried yet.

    Returns:
        The session's catalog, in LOADED or FAILED state after the first call
    """
    catalog = get_catalog()
    if catalog.state in (CatalogState.EMPTY, CatalogState.LOADING):
        reload_catalog()
    return catalog


def select_recipe(recipe_id: int) -> None:
    """Remember which recipe the detail page should show."""
    st.session_state[SELECTED_RECIPE_KEY] = recipe_id


def get_selected_recipe_id() -> Optional[int]:
    """
    Get the recipe id for the detail page.

    Prefers an `?id=` query parameter (shareable links), then the id stored
    by select_recipe().

    Returns:
        Recipe id, or None if nothing valid is selected
    """
    raw_id = st.query_params.get("id")
    if raw_id is not None:
        try:
            return int(raw_id)
        except ValueError:
            return None
    return st.session_state.get(SELECTED_RECIPE_KEY)
