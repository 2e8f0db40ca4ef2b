"""
Recipe catalog: the per-session store of loaded recipes and the current filter.

The catalog moves through an explicit lifecycle (see CatalogState):

    EMPTY -> LOADING -> LOADED   (fetch succeeded)
    EMPTY -> LOADING -> FAILED   (fetch failed)

LOADED and FAILED are terminal for one fetch attempt; a retry calls
begin_loading() again. A load always replaces the whole collection, and a
failure clears it, so the catalog never shows stale or partial data.

The filtered view is recomputed on every read from the latest query and the
latest loaded collection.
"""

import logging
from typing import Any, Iterable, List, Optional, Tuple

from recipe_engine.filters import filter_recipes
from recipe_engine.models import CatalogState, CuisineCount, FilterQuery, Recipe, RecipeStats
from recipe_engine.normalize import normalize_recipes
from recipe_engine.stats import DEFAULT_HISTOGRAM_SIZE, aggregate, cuisine_histogram

logger = logging.getLogger(__name__)


class Catalog:
    """
    Single-owner store of recipes plus the current FilterQuery.

    Attributes:
        state: Current lifecycle state
        error: Failure message when state is FAILED, otherwise None
        query: Current filter query
    """

    def __init__(self) -> None:
        self._recipes: Tuple[Recipe, ...] = ()
        self.state: CatalogState = CatalogState.EMPTY
        self.error: Optional[str] = None
        self.query: FilterQuery = FilterQuery()

    @property
    def recipes(self) -> Tuple[Recipe, ...]:
        """All loaded recipes in fetch order (unfiltered)."""
        return self._recipes

    def begin_loading(self) -> None:
        """Enter LOADING. Previously loaded recipes are discarded."""
        self._recipes = ()
        self.error = None
        self.state = CatalogState.LOADING

    def load(self, raw_recipes: Iterable[Any]) -> None:
        """
        Replace the collection with the normalized form of `raw_recipes`.

        Invalid records are excluded. The query is kept.

        Args:
            raw_recipes: Raw records from the search API
        """
        self._recipes = tuple(normalize_recipes(raw_recipes))
        self.error = None
        self.state = CatalogState.LOADED
        logger.info("Catalog loaded with %d recipes", len(self._recipes))

    def fail(self, message: str) -> None:
        """Enter FAILED with `message`, dropping any recipes."""
        self._recipes = ()
        self.error = message
        self.state = CatalogState.FAILED
        logger.warning("Catalog load failed: %s", message)

    def set_query(self, query: FilterQuery) -> None:
        """Replace the current filter query."""
        self.query = query

    def update_query(
        self,
        search_text: Optional[str] = None,
        cuisine: Optional[str] = None,
        diet: Optional[str] = None,
    ) -> FilterQuery:
        """
        Change some axes of the current query, keeping the others.

        Returns:
            The new current query
        """
        changes = {}
        if search_text is not None:
            changes["search_text"] = search_text
        if cuisine is not None:
            changes["cuisine"] = cuisine
        if diet is not None:
            changes["diet"] = diet
        self.query = self.query.model_copy(update=changes)
        return self.query

    def filtered_view(self) -> List[Recipe]:
        """Recipes matching the current query, in fetch order."""
        view = filter_recipes(self._recipes, self.query)
        logger.debug("Query %r matched %d of %d recipes", self.query, len(view), len(self._recipes))
        return view

    def stats(self) -> RecipeStats:
        """Summary statistics over the filtered view."""
        return aggregate(self.filtered_view())

    def histogram(self, top_n: int = DEFAULT_HISTOGRAM_SIZE) -> List[CuisineCount]:
        """Cuisine histogram over the full, unfiltered collection."""
        return cuisine_histogram(self._recipes, top_n=top_n)

    def get(self, recipe_id: int) -> Optional[Recipe]:
        """Look up a recipe by id, or None if it is not loaded."""
        for recipe in self._recipes:
            if recipe.id == recipe_id:
                return recipe
        return None

    def __len__(self) -> int:
        return len(self._recipes)
