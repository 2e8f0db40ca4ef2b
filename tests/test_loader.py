"""
Tests for loading a catalog from a connector.

Connectors are mocked; these tests check the EMPTY -> LOADING -> LOADED / FAILED
transitions driven by load_catalog.
"""

from unittest.mock import Mock

from recipe_engine.catalog import Catalog
from recipe_engine.connectors.base import BaseConnector, RecipeFetchError
from recipe_engine.loader import FETCH_FAILED_MESSAGE, load_catalog
from recipe_engine.models import CatalogState


def make_connector(results=None, error=None):
    connector = Mock(spec=BaseConnector)
    connector.source = "fake"
    if error is not None:
        connector.fetch_recipes.side_effect = error
    else:
        connector.fetch_recipes.return_value = results
    return connector


class TestLoadCatalog:
    """Test cases for load_catalog."""

    def test_successful_load(self):
        """Test that a successful fetch ends LOADED with normalized recipes."""
        connector = make_connector([{"id": 1, "title": "Soup"}, {"id": 2}])

        catalog = load_catalog(Catalog(), connector, number=50)

        assert catalog.state == CatalogState.LOADED
        assert [r.title for r in catalog.recipes] == ["Soup"]
        connector.fetch_recipes.assert_called_once_with(50)

    def test_fetch_error_ends_failed(self):
        """Test that RecipeFetchError ends FAILED with no recipes and does not raise."""
        connector = make_connector(error=RecipeFetchError("HTTP 401"))

        catalog = load_catalog(Catalog(), connector)

        assert catalog.state == CatalogState.FAILED
        assert catalog.error == FETCH_FAILED_MESSAGE
        assert catalog.recipes == ()

    def test_unexpected_error_ends_failed(self):
        """Test that any other connector exception also ends FAILED."""
        connector = make_connector(error=KeyError("results"))

        catalog = load_catalog(Catalog(), connector)

        assert catalog.state == CatalogState.FAILED

    def test_failure_discards_previous_recipes(self):
        """Test that a failed reload does not keep the previous collection."""
        catalog = load_catalog(Catalog(), make_connector([{"id": 1, "title": "Soup"}]))
        assert len(catalog) == 1

        load_catalog(catalog, make_connector(error=RecipeFetchError("timeout")))

        assert catalog.state == CatalogState.FAILED
        assert len(catalog) == 0

    def test_retry_after_failure(self):
        """Test that a retry after FAILED can reach LOADED."""
        catalog = load_catalog(Catalog(), make_connector(error=RecipeFetchError("timeout")))

        load_catalog(catalog, make_connector([{"id": 7, "title": "Stew"}]))

        assert catalog.state == CatalogState.LOADED
        assert catalog.error is None
        assert catalog.get(7).title == "Stew"

    def test_loading_state_visible_during_fetch(self):
        """Test that the catalog is LOADING while the connector runs."""
        catalog = Catalog()
        seen_states = []

        def fetch(number):
            seen_states.append(catalog.state)
            return []

        connector = make_connector()
        connector.fetch_recipes.side_effect = fetch

        load_catalog(catalog, connector)

        assert seen_states == [CatalogState.LOADING]
        assert catalog.state == CatalogState.LOADED
