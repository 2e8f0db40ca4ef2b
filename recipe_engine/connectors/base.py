"""
Base connector abstract class for recipe sources.

All connectors must:
- Implement the `source` attribute (e.g., "spoonacular")
- Provide a fetch_recipes method returning raw recipe records
- Raise RecipeFetchError for any failure to retrieve recipes
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List


class RecipeFetchError(RuntimeError):
    """Raised when recipes cannot be retrieved (network, HTTP status, bad body, missing key)."""


class BaseConnector(ABC):
    """
    Abstract base class for all recipe source connectors.

    Connectors only fetch. They return the raw records untouched; normalization
    happens in recipe_engine.normalize so every source goes through the same rules.

    Attributes:
        source: String identifier for the recipe source
    """
    source: str

    @abstractmethod
    def fetch_recipes(self, number: int) -> List[Dict[str, Any]]:
        """
        Fetch one page of raw recipe records.

        Args:
            number: Number of recipes to request

        Returns:
            List of raw recipe dictionaries, in the order the source returned them

        Raises:
            RecipeFetchError: If the recipes could not be retrieved
        """
        pass
