"""
Aggregations over recipe collections.

This module computes the numbers and chart data shown by the front end:
- aggregate: total count, average calories and healthy count for a collection
- cuisine_histogram: recipes per cuisine, top N, for the distribution bar chart
- macronutrient_breakdown: protein/carbs/fat slices for a single recipe's pie chart

All functions are pure and accept any iterable of Recipe objects.

# NOTE: The list page builds the histogram from the full catalog while the stats
    are computed over the filtered view. Callers pick the collection; nothing
    here assumes either.
"""

from typing import Dict, Iterable, List

from recipe_engine.models import (
    CARBOHYDRATES,
    FAT,
    HEALTHY_SCORE_THRESHOLD,
    PROTEIN,
    CuisineCount,
    MacroSlice,
    Recipe,
    RecipeStats,
)

DEFAULT_HISTOGRAM_SIZE = 10

# (display name, nutrient name) in chart order
MACRONUTRIENTS = (
    ("Protein", PROTEIN),
    ("Carbs", CARBOHYDRATES),
    ("Fat", FAT),
)


def is_healthy(recipe: Recipe) -> bool:
    """A recipe is healthy when its health score is known and >= 70."""
    return recipe.health_score is not None and recipe.health_score >= HEALTHY_SCORE_THRESHOLD


def aggregate(recipes: Iterable[Recipe]) -> RecipeStats:
    """
    Compute summary statistics for a recipe collection.

    Recipes without a calorie value count as 0 calories in the average.
    Recipes with an unknown health score are neither healthy nor unhealthy.

    Args:
        recipes: Recipes to summarize (typically the filtered view)

    Returns:
        RecipeStats; all fields are 0 for an empty collection

    Examples:
        >>> aggregate([]).average_calories
        0.0
    """
    total = 0
    calories_sum = 0.0
    healthy = 0

    for recipe in recipes:
        total += 1
        calories_sum += recipe.calories or 0.0
        if is_healthy(recipe):
            healthy += 1

    return RecipeStats(
        total_recipes=total,
        average_calories=calories_sum / total if total else 0.0,
        healthy_recipes=healthy,
    )


def cuisine_histogram(recipes: Iterable[Recipe], top_n: int = DEFAULT_HISTOGRAM_SIZE) -> List[CuisineCount]:
    """
    Count recipes per cuisine and return the most common ones.

    A recipe with several cuisines adds one to each of them. Labels are counted
    case-insensitively and reported with the casing they were first seen with.
    Ties keep first-encountered order.

    Args:
        recipes: Recipes to count (the list page passes the full catalog)
        top_n: Maximum number of entries to return

    Returns:
        List of CuisineCount sorted by count, highest first

    Examples:
        >>> r1 = Recipe(id=1, title="A", cuisines=frozenset({"thai"}), cuisine_labels=["Thai"])
        >>> r2 = Recipe(id=2, title="B", cuisines=frozenset({"thai"}), cuisine_labels=["Thai"])
        >>> cuisine_histogram([r1, r2])
        [CuisineCount(name='Thai', count=2)]
    """
    if top_n <= 0:
        return []

    counts: Dict[str, int] = {}
    display_names: Dict[str, str] = {}

    for recipe in recipes:
        labels = recipe.cuisine_labels or sorted(recipe.cuisines)
        for label in labels:
            key = label.lower()
            if key not in counts:
                counts[key] = 0
                display_names[key] = label
            counts[key] += 1

    # dicts keep insertion order and sorted() is stable, so ties stay in first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CuisineCount(name=display_names[key], count=count) for key, count in ranked[:top_n]]


def macronutrient_breakdown(recipe: Recipe) -> List[MacroSlice]:
    """
    Build the protein/carbs/fat slices for a recipe's pie chart.

    Missing nutrients are charted as 0 so the chart always has three slices.

    Args:
        recipe: Recipe to break down

    Returns:
        Three MacroSlice entries: Protein, Carbs, Fat
    """
    return [
        MacroSlice(name=display_name, value=recipe.nutrients.get(nutrient, 0.0))
        for display_name, nutrient in MACRONUTRIENTS
    ]
