"""
Filter predicates for recipe collections.

A recipe matches a FilterQuery when all three axes match:
- search text: case-insensitive substring of the title (empty text matches everything)
- cuisine: "all" matches everything, otherwise the label must be one of the recipe's cuisines
- diet: same rule against the recipe's diets
"""

from typing import Iterable, List, Optional

from recipe_engine.models import FilterQuery, Recipe


def _matches_label(labels: frozenset, wanted: Optional[str]) -> bool:
    if FilterQuery.is_any(wanted):
        return True
    return wanted.strip().lower() in labels


def matches(recipe: Recipe, query: FilterQuery) -> bool:
    """
    Check whether a recipe satisfies a filter query.

    Args:
        recipe: Normalized recipe
        query: Filter query

    Returns:
        True if the title, cuisine and diet axes all match

    Examples:
        >>> pasta = Recipe(id=1, title="Pasta", cuisines=frozenset({"italian"}))
        >>> matches(pasta, FilterQuery(search_text="PAS", cuisine="Italian"))
        True
        >>> matches(pasta, FilterQuery(diet="vegan"))
        False
    """
    search_text = query.search_text.lower()
    if search_text and search_text not in recipe.title.lower():
        return False
    return _matches_label(recipe.cuisines, query.cuisine) and _matches_label(recipe.diets, query.diet)


def filter_recipes(recipes: Iterable[Recipe], query: FilterQuery) -> List[Recipe]:
    """Return the recipes matching `query`, in their original order."""
    return [recipe for recipe in recipes if matches(recipe, query)]
