"""
Recipe Explorer - Streamlit Frontend Main Entry Point.

This is the recipe list page. It fetches recipes once per session, then lets the
user search by title and filter by cuisine and diet. It shows:
- a bar chart of recipes per cuisine (top 10, over all loaded recipes)
- summary KPIs for the filtered recipes
- a card per filtered recipe linking to the detail page

Note: Multi-page routing is handled automatically by Streamlit via the `pages/` folder.

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

# Add project root to path so we can import recipe_engine
project_root = streamlit_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env file before any other code accesses environment variables
import recipe_engine.config  # noqa: F401

import streamlit as st

from recipe_engine.models import CatalogState
from utils.options import CUISINE_OPTIONS, DIET_OPTIONS
from utils.state import ensure_catalog_loaded, reload_catalog, select_recipe
from ui.charts import build_cuisine_bar_chart
from ui.feedback import show_empty_state, show_fetch_failure, working_spinner
from ui.layout import kpi_row, page_header, recipe_card
from ui.styles import load_global_styles

DETAIL_PAGE = "pages/01_📖_Recipe_Detail.py"
CARDS_PER_ROW = 3

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="Recipe Explorer",
    page_icon="🍲",
    layout="wide",
)

load_global_styles()

page_header("Recipe Explorer", subtitle="Search, filter and compare recipes by cuisine, diet and nutrition.")

with working_spinner("Loading…"):
    catalog = ensure_catalog_loaded()


def open_recipe(recipe_id: int) -> None:
    select_recipe(recipe_id)
    st.switch_page(DETAIL_PAGE)


# Chart section: built from every loaded recipe, not just the filtered ones
with st.container(border=True):
    st.subheader("Recipe Distribution by Cuisine", anchor=False)
    st.altair_chart(build_cuisine_bar_chart(catalog.histogram()), use_container_width=True)

# Filled in after the filters below have been read
stats_area = st.container()

# Search and filters
col_search, col_cuisine, col_diet = st.columns(3)
with col_search:
    search_text = st.text_input("Search recipes", placeholder="Search recipes...", label_visibility="collapsed")
with col_cuisine:
    cuisine_labels = dict(CUISINE_OPTIONS)
    cuisine = st.selectbox(
        "Cuisine",
        options=list(cuisine_labels),
        format_func=cuisine_labels.get,
        label_visibility="collapsed",
    )
with col_diet:
    diet_labels = dict(DIET_OPTIONS)
    diet = st.selectbox(
        "Diet",
        options=list(diet_labels),
        format_func=diet_labels.get,
        label_visibility="collapsed",
    )

catalog.update_query(search_text=search_text, cuisine=cuisine, diet=diet)
filtered = catalog.filtered_view()
stats = catalog.stats()

with stats_area:
    kpi_row([
        {"label": "Total Recipes", "value": stats.total_recipes},
        {"label": "Avg. Calories", "value": f"{stats.average_calories:.0f}"},
        {"label": "Healthy Recipes", "value": stats.healthy_recipes},
    ])

st.divider()

# Recipe cards
if catalog.state == CatalogState.FAILED:
    show_fetch_failure(catalog.error, on_retry=reload_catalog)
elif not filtered:
    show_empty_state("No recipes match your filters", subtitle="Try a different search or clear the cuisine and diet filters.")
else:
    for start in range(0, len(filtered), CARDS_PER_ROW):
        row = filtered[start:start + CARDS_PER_ROW]
        for col, recipe in zip(st.columns(CARDS_PER_ROW), row):
            with col:
                recipe_card(recipe, on_view=open_recipe)
