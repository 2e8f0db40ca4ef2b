"""
Catalog loading from a recipe connector.

Load flow: catalog.begin_loading() -> connector.fetch_recipes() -> catalog.load() or catalog.fail()

Fetch failures never propagate to the caller; they end the attempt in the
catalog's FAILED state, which the front end renders as an error message with a
retry option.
"""

import logging
from typing import Optional

from recipe_engine.catalog import Catalog
from recipe_engine.connectors.base import BaseConnector, RecipeFetchError

logger = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Failed to fetch Recipes"


def load_catalog(catalog: Catalog, connector: BaseConnector, number: Optional[int] = None) -> Catalog:
    """
    Run one fetch attempt and load its result into `catalog`.

    Args:
        catalog: Catalog to populate; any previous collection is replaced
        connector: Source of raw recipes
        number: Number of recipes to request (connector default if None)

    Returns:
        The same catalog, now in LOADED or FAILED state
    """
    catalog.begin_loading()
    logger.info("Loading catalog from %s", getattr(connector, "source", type(connector).__name__))

    try:
        raw_recipes = connector.fetch_recipes(number)
    except RecipeFetchError as e:
        logger.warning("Recipe fetch failed: %s", e)
        catalog.fail(FETCH_FAILED_MESSAGE)
        return catalog
    except Exception as e:
        logger.error("Unexpected error fetching recipes: %s", e, exc_info=True)
        catalog.fail(FETCH_FAILED_MESSAGE)
        return catalog

    catalog.load(raw_recipes)
    return catalog
