"""Recipe source connectors."""

from .base import BaseConnector, RecipeFetchError
from .spoonacular_connector import SpoonacularConnector

__all__ = [
    "BaseConnector",
    "RecipeFetchError",
    "SpoonacularConnector",
]
