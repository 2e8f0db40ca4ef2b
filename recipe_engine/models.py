"""
Recipe, query and statistics models for the recipe engine.

This module defines the canonical schemas used throughout the engine.
Raw records from the recipe search API are untrusted dictionaries; they are
mapped into Recipe by recipe_engine.normalize before anything else touches them.

# NOTE: Absent values are kept absent. A recipe without a health score has
    health_score=None, and a missing nutrient is a missing key in `nutrients`.
    Nothing here substitutes a real zero for "unknown".
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional

from pydantic import BaseModel, Field, ConfigDict

# Sentinel used by the UI selects for "no constraint on this axis"
ANY_LABEL = "all"

# Labels treated as "no constraint", compared case-insensitively
ANY_LABELS = frozenset({ANY_LABEL, "any"})

# Recipes with a known health score at or above this are counted as healthy
HEALTHY_SCORE_THRESHOLD = 70

# Nutrient names exactly as the search API reports them
CALORIES = "Calories"
PROTEIN = "Protein"
CARBOHYDRATES = "Carbohydrates"
FAT = "Fat"
TRACKED_NUTRIENTS = (CALORIES, PROTEIN, CARBOHYDRATES, FAT)


class Recipe(BaseModel):
    """
    Normalized recipe entity.

    Built only by normalize_recipe(); a Recipe always has a non-empty title.
    `cuisines` and `diets` hold lower-cased labels for matching, while
    `cuisine_labels` and `diet_labels` keep the original casing in first-seen
    order for display.
    """
    id: int = Field(..., description="Recipe identifier, unique within a catalog")
    title: str = Field(..., min_length=1, description="Recipe title")

    cuisines: FrozenSet[str] = Field(default_factory=frozenset, description="Lower-cased cuisine labels")
    diets: FrozenSet[str] = Field(default_factory=frozenset, description="Lower-cased diet labels")
    cuisine_labels: List[str] = Field(default_factory=list, description="Cuisine labels as reported by the API")
    diet_labels: List[str] = Field(default_factory=list, description="Diet labels as reported by the API")

    health_score: Optional[int] = Field(None, ge=0, le=100, description="Health score 0-100, None when unknown")
    nutrients: Dict[str, float] = Field(default_factory=dict, description="Nutrient name -> amount for the tracked nutrients that were present")

    # Passthrough fields, not used by filtering or aggregation
    image: Optional[str] = Field(None, description="Image URL")
    ready_in_minutes: Optional[int] = Field(None, description="Total preparation time in minutes")
    servings: Optional[int] = Field(None, description="Number of servings")
    summary: Optional[str] = Field(None, description="Untrusted HTML summary from the API")

    model_config = ConfigDict(frozen=True)

    @property
    def calories(self) -> Optional[float]:
        """Calorie amount, or None when the source record had none."""
        return self.nutrients.get(CALORIES)


class FilterQuery(BaseModel):
    """
    Three-axis filter applied to a recipe collection.

    `cuisine` and `diet` set to None, "", "all" or "any" (any casing) place no
    constraint on that axis.
    """
    search_text: str = Field(default="", description="Case-insensitive title substring")
    cuisine: Optional[str] = Field(default=ANY_LABEL, description="Cuisine label, or 'all'/'any'")
    diet: Optional[str] = Field(default=ANY_LABEL, description="Diet label, or 'all'/'any'")

    model_config = ConfigDict(frozen=True)

    @staticmethod
    def is_any(label: Optional[str]) -> bool:
        """Return True when the label places no constraint on its axis."""
        return not label or label.strip().lower() in ANY_LABELS


class RecipeStats(BaseModel):
    """Summary statistics over a (usually filtered) recipe collection."""
    total_recipes: int = Field(0, ge=0, description="Number of recipes")
    average_calories: float = Field(0.0, ge=0, description="Mean calories, absent values counted as 0")
    healthy_recipes: int = Field(0, ge=0, description="Recipes with a known health score >= 70")


class CuisineCount(BaseModel):
    """One bar of the cuisine histogram."""
    name: str = Field(..., description="Cuisine label for display")
    count: int = Field(..., ge=1, description="Number of recipes tagged with this cuisine")


class MacroSlice(BaseModel):
    """One slice of a recipe's macronutrient pie chart."""
    name: str = Field(..., description="Display name (Protein, Carbs, Fat)")
    value: float = Field(..., ge=0, description="Amount in grams")


class CatalogState(str, Enum):
    """Lifecycle of a catalog for one fetch attempt."""
    EMPTY = "empty"
    LOADING = "loading"
    LOADED = "loaded"
    FAILED = "failed"
