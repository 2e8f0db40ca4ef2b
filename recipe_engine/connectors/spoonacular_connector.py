"""
Spoonacular connector using the complexSearch endpoint.

This connector retrieves one page of recipes from Spoonacular with recipe
information and nutrition included, so every record carries the title,
cuisines, diets, health score and nutrients the engine needs.

The connector:
- Issues a single GET to {base_url}/recipes/complexSearch
- Requests `number` results with addRecipeInformation, addRecipeNutrition and
  instructionsRequired switched on
- Returns the raw `results` list unchanged
- Raises RecipeFetchError for a missing API key, transport errors, non-2xx
  responses and bodies without a `results` list

There is no pagination and no retry: only the first page is ever loaded.

Requires SPOONACULAR_API_KEY in .env or the environment.
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from recipe_engine.config import SpoonacularConfig

from .base import BaseConnector, RecipeFetchError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/recipes/complexSearch"


class SpoonacularConnector(BaseConnector):
    """
    Connector for the Spoonacular recipe search API.

    The API key is read from configuration when not passed explicitly. A missing
    key is reported when fetching, not when constructing, so the catalog ends in
    its FAILED state like any other fetch failure.
    """
    source = "spoonacular"

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Initialize the connector.

        Args:
            api_key: Spoonacular API key (optional, reads SPOONACULAR_API_KEY if not provided)
            base_url: API base URL (optional, reads SPOONACULAR_BASE_URL or uses the public API)
            timeout: Request timeout in seconds (optional, reads SPOONACULAR_TIMEOUT_SECONDS)
        """
        self.api_key = api_key or SpoonacularConfig.get_api_key()
        self.base_url = (base_url or SpoonacularConfig.get_base_url()).rstrip("/")
        self.timeout = timeout or SpoonacularConfig.get_timeout_seconds()

    def _build_params(self, number: int) -> Dict[str, Any]:
        return {
            "apiKey": self.api_key,
            "number": number,
            "addRecipeInformation": "true",
            "addRecipeNutrition": "true",
            "instructionsRequired": "true",
        }

    def fetch_recipes(self, number: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Fetch one page of recipes from complexSearch.

        Args:
            number: Number of recipes to request (default: SPOONACULAR_RESULT_COUNT or 100)

        Returns:
            Raw recipe dictionaries from the response's `results` field

        Raises:
            RecipeFetchError: If the API key is missing, the request fails, the
                response status is not 2xx, or the body has no `results` list.
        """
        if not self.api_key:
            raise RecipeFetchError(
                "SPOONACULAR_API_KEY is not set. Please add it to your .env file at the project root:\n"
                "SPOONACULAR_API_KEY=your_api_key_here"
            )

        number = number or SpoonacularConfig.get_result_count()
        url = f"{self.base_url}{SEARCH_PATH}"
        logger.info("Fetching %d recipes from %s", number, url)

        try:
            response = requests.get(url, params=self._build_params(number), timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else "unknown"
            raise RecipeFetchError(f"Recipe search returned HTTP {status_code}") from e
        except requests.exceptions.RequestException as e:
            raise RecipeFetchError(f"Recipe search request failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise RecipeFetchError("Recipe search returned a body that is not JSON") from e

        results = data.get("results") if isinstance(data, dict) else None
        if not isinstance(results, list):
            raise RecipeFetchError(
                "Unexpected response format from recipe search: missing 'results' list. "
                "The API may have changed its output format."
            )

        logger.info("Recipe search returned %d raw records", len(results))
        return results
