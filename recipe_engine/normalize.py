"""
Normalization of raw search API records into Recipe models.

Raw records are untrusted: any field may be missing or have the wrong type.
The rules are:
- A record without a non-empty string title is invalid (normalize_recipe returns None)
- `cuisines` / `diets` are only read when they are a list or tuple; anything else
  degrades to "no labels known"
- A nutrient is recorded only when `nutrition.nutrients` has an entry with exactly
  that name and a usable amount; otherwise it is absent, not zero
- A health score is kept only when it is a real number; otherwise it is unknown (None)

No function in this module raises for malformed optional fields.
"""

import logging
import math
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Tuple

from recipe_engine.models import Recipe, TRACKED_NUTRIENTS

logger = logging.getLogger(__name__)


def _as_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None for bools, strings, NaN, etc."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return float(value)


def _as_int(value: Any) -> Optional[int]:
    number = _as_number(value)
    return int(round(number)) if number is not None else None


def _as_text(value: Any) -> Optional[str]:
    return value if isinstance(value, str) and value else None


def _extract_labels(value: Any) -> Tuple[frozenset, List[str]]:
    """
    Read a cuisine/diet label list.

    Returns:
        Tuple of (lower-cased label set, display labels in first-seen order).
        Non-sequence values and non-string entries are ignored.
    """
    if not isinstance(value, (list, tuple)):
        return frozenset(), []

    lowered = set()
    display: List[str] = []
    for label in value:
        if not isinstance(label, str) or not label.strip():
            continue
        key = label.strip().lower()
        if key not in lowered:
            lowered.add(key)
            display.append(label.strip())
    return frozenset(lowered), display


def extract_nutrient(raw: Mapping[str, Any], name: str) -> Optional[float]:
    """
    Find the amount of a named nutrient in a raw record.

    Args:
        raw: Raw recipe record
        name: Exact nutrient name (e.g., "Calories", "Protein")

    Returns:
        Amount of the first `nutrition.nutrients` entry whose name equals `name`,
        or None if nutrition data is missing, no entry matches, or the amount is
        not a non-negative number.

    Examples:
        >>> extract_nutrient({"nutrition": {"nutrients": [{"name": "Fat", "amount": 12.5}]}}, "Fat")
        12.5
        >>> extract_nutrient({"nutrition": {}}, "Fat") is None
        True
    """
    nutrition = raw.get("nutrition")
    if not isinstance(nutrition, Mapping):
        return None
    nutrients = nutrition.get("nutrients")
    if not isinstance(nutrients, (list, tuple)):
        return None

    for entry in nutrients:
        if isinstance(entry, Mapping) and entry.get("name") == name:
            amount = _as_number(entry.get("amount"))
            if amount is None or amount < 0:
                return None
            return amount
    return None


def _extract_health_score(value: Any) -> Optional[int]:
    score = _as_number(value)
    if score is None:
        return None
    # Floored: score >= 70 holds exactly when it holds for the raw value
    return int(math.floor(min(100.0, max(0.0, score))))


def _extract_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def normalize_recipe(raw: Any, index: int = 0) -> Optional[Recipe]:
    """
    Normalize one raw search API record.

    Args:
        raw: Raw record (expected to be a mapping, but anything is accepted)
        index: Position of the record in the fetch response. Used to build a
               synthetic negative id when the record has no usable id.

    Returns:
        Recipe, or None when the record is invalid (not a mapping, or missing
        a non-empty title).

    Examples:
        >>> normalize_recipe({"id": 1, "title": "Pasta", "cuisines": ["Italian"]}).cuisines
        frozenset({'italian'})
        >>> normalize_recipe({"id": 2, "title": ""}) is None
        True
    """
    if not isinstance(raw, Mapping):
        return None

    title = raw.get("title")
    if not isinstance(title, str) or not title.strip():
        return None

    cuisines, cuisine_labels = _extract_labels(raw.get("cuisines"))
    diets, diet_labels = _extract_labels(raw.get("diets"))

    nutrients: Dict[str, float] = {}
    for name in TRACKED_NUTRIENTS:
        amount = extract_nutrient(raw, name)
        if amount is not None:
            nutrients[name] = amount

    recipe_id = _extract_id(raw.get("id"))
    if recipe_id is None:
        recipe_id = -(index + 1)

    return Recipe(
        id=recipe_id,
        title=title,
        cuisines=cuisines,
        diets=diets,
        cuisine_labels=cuisine_labels,
        diet_labels=diet_labels,
        health_score=_extract_health_score(raw.get("healthScore")),
        nutrients=nutrients,
        image=_as_text(raw.get("image")),
        ready_in_minutes=_as_int(raw.get("readyInMinutes")),
        servings=_as_int(raw.get("servings")),
        summary=_as_text(raw.get("summary")),
    )


def normalize_recipes(raws: Iterable[Any]) -> List[Recipe]:
    """
    Normalize a batch of raw records, keeping fetch order.

    Invalid records are dropped. When two records share an id the first one
    is kept, so ids are unique within the returned list.

    Args:
        raws: Raw records as returned by the search API

    Returns:
        List of valid Recipe objects in input order
    """
    recipes: List[Recipe] = []
    seen_ids = set()
    invalid_count = 0
    duplicate_count = 0

    for index, raw in enumerate(raws):
        recipe = normalize_recipe(raw, index=index)
        if recipe is None:
            invalid_count += 1
            continue
        if recipe.id in seen_ids:
            duplicate_count += 1
            continue
        seen_ids.add(recipe.id)
        recipes.append(recipe)

    if invalid_count or duplicate_count:
        logger.warning("Dropped %d invalid and %d duplicate recipe records", invalid_count, duplicate_count)
    logger.info("Normalized %d recipes", len(recipes))
    return recipes
