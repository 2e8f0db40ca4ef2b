"""
Configuration management for the Recipe Explorer.

This module centralizes environment variable loading from the .env file at the
project root. It is imported early by the Streamlit entry point so .env is
loaded before any other code reads the environment.

In hosted deployments .env does not exist; load_dotenv() is safe to call and
will no-op, and platform environment variables are used instead.

Environment Variables:
- SPOONACULAR_API_KEY: Required for fetching recipes
- SPOONACULAR_BASE_URL: Optional, defaults to "https://api.spoonacular.com"
- SPOONACULAR_RESULT_COUNT: Optional, number of recipes to fetch (default: 100)
- SPOONACULAR_TIMEOUT_SECONDS: Optional, HTTP timeout in seconds (default: 10)
"""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://api.spoonacular.com"
DEFAULT_RESULT_COUNT = 100
DEFAULT_TIMEOUT_SECONDS = 10.0


def load_env_file() -> None:
    """
    Load environment variables from .env file at project root.

    Safe to call multiple times. Existing environment variables take precedence
    over values in .env.
    """
    # recipe_engine/config.py -> recipe_engine/ -> project root
    project_root = Path(__file__).resolve().parent.parent
    load_dotenv(project_root / ".env", override=False)


load_env_file()


def _positive_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


class SpoonacularConfig:
    """Configuration for the Spoonacular recipe search connector."""

    @staticmethod
    def get_api_key() -> Optional[str]:
        """
        Get the Spoonacular API key from environment.

        Returns:
            API key string or None if not set

        Note:
            This does not raise an error - the connector reports a missing key
            as a fetch failure.
        """
        key = os.getenv("SPOONACULAR_API_KEY")
        return key.strip() if key and key.strip() else None

    @staticmethod
    def get_base_url() -> str:
        """
        Get the API base URL with any trailing slash removed.

        Returns:
            Base URL string (default: "https://api.spoonacular.com")
        """
        return os.getenv("SPOONACULAR_BASE_URL", DEFAULT_BASE_URL).rstrip("/")

    @staticmethod
    def get_result_count() -> int:
        """
        Get the number of recipes to request.

        Returns:
            Positive integer (default: 100). Invalid values fall back to the default.
        """
        return _positive_number("SPOONACULAR_RESULT_COUNT", DEFAULT_RESULT_COUNT, int)

    @staticmethod
    def get_timeout_seconds() -> float:
        """
        Get the HTTP timeout for the search request.

        Returns:
            Timeout in seconds (default: 10)
        """
        return _positive_number("SPOONACULAR_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float)


def get_required_env_vars() -> dict:
    """
    Get a dictionary of all required environment variables and their status.

    Returns:
        Dictionary with keys:
        - spoonacular_api_key: bool (True if set)
    """
    return {
        "spoonacular_api_key": SpoonacularConfig.get_api_key() is not None,
    }


def missing_config_hint() -> Optional[str]:
    """
    Describe the required environment variables that are not set.

    Returns:
        A message naming each missing variable and where to set it, or None
        when everything required is present
    """
    status = get_required_env_vars()
    missing = []

    if not status["spoonacular_api_key"]:
        missing.append("SPOONACULAR_API_KEY")

    if not missing:
        return None
    return f"{', '.join(missing)} is not set. Add it to the .env file at the project root."
