"""
Tests for raw record normalization.

This module tests normalize_recipe, extract_nutrient and normalize_recipes in
recipe_engine.normalize, with records shaped like Spoonacular complexSearch results.
"""

import pytest

from recipe_engine.normalize import extract_nutrient, normalize_recipe, normalize_recipes


@pytest.fixture
def full_record():
    """A complete complexSearch result with recipe information and nutrition."""
    return {
        "id": 715538,
        "title": "Bruschetta Style Pork & Pasta",
        "image": "https://img.spoonacular.com/recipes/715538-312x231.jpg",
        "cuisines": ["Mediterranean", "Italian", "European"],
        "diets": ["dairy free"],
        "healthScore": 32,
        "readyInMinutes": 35,
        "servings": 5,
        "summary": "<b>Bruschetta Style Pork & Pasta</b> might be just the main course you are searching for.",
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 521.23, "unit": "kcal"},
                {"name": "Fat", "amount": 12.15, "unit": "g"},
                {"name": "Carbohydrates", "amount": 68.42, "unit": "g"},
                {"name": "Protein", "amount": 35.1, "unit": "g"},
            ]
        },
    }


class TestNormalizeRecipe:
    """Test cases for normalize_recipe."""

    def test_normalize_full_record(self, full_record):
        """Test that every field of a complete record is mapped."""
        recipe = normalize_recipe(full_record)

        assert recipe is not None
        assert recipe.id == 715538
        assert recipe.title == "Bruschetta Style Pork & Pasta"
        assert recipe.cuisines == frozenset({"mediterranean", "italian", "european"})
        assert recipe.cuisine_labels == ["Mediterranean", "Italian", "European"]
        assert recipe.diets == frozenset({"dairy free"})
        assert recipe.health_score == 32
        assert recipe.ready_in_minutes == 35
        assert recipe.servings == 5
        assert recipe.image.endswith("715538-312x231.jpg")
        assert recipe.summary.startswith("<b>")
        assert recipe.nutrients == {
            "Calories": 521.23,
            "Protein": 35.1,
            "Carbohydrates": 68.42,
            "Fat": 12.15,
        }
        assert recipe.calories == 521.23

    @pytest.mark.parametrize("raw", [None, "Pasta", 42, ["title"]])
    def test_non_mapping_is_invalid(self, raw):
        """Test that anything other than a mapping is invalid."""
        assert normalize_recipe(raw) is None

    @pytest.mark.parametrize("title", [None, "", "   ", 123, ["Pasta"]])
    def test_missing_or_empty_title_is_invalid(self, full_record, title):
        """Test that a record without a usable title is invalid."""
        full_record["title"] = title
        assert normalize_recipe(full_record) is None

    def test_absent_title_key_is_invalid(self, full_record):
        """Test that a record with no title key at all is invalid."""
        del full_record["title"]
        assert normalize_recipe(full_record) is None

    def test_minimal_record(self):
        """Test that a title alone is enough, and everything else is absent."""
        recipe = normalize_recipe({"id": 1, "title": "Toast"})

        assert recipe is not None
        assert recipe.cuisines == frozenset()
        assert recipe.diets == frozenset()
        assert recipe.health_score is None
        assert recipe.nutrients == {}
        assert recipe.calories is None
        assert recipe.image is None
        assert recipe.summary is None

    @pytest.mark.parametrize("cuisines", ["Italian", {"name": "Italian"}, 7, None])
    def test_non_sequence_cuisines_degrade_to_empty(self, cuisines):
        """Test that a non-list cuisines value never raises and yields no cuisines."""
        recipe = normalize_recipe({"id": 1, "title": "Pizza", "cuisines": cuisines})

        assert recipe is not None
        assert recipe.cuisines == frozenset()
        assert recipe.cuisine_labels == []

    def test_non_sequence_diets_degrade_to_empty(self):
        """Test that a non-list diets value yields no diets."""
        recipe = normalize_recipe({"id": 1, "title": "Salad", "diets": "vegan"})
        assert recipe.diets == frozenset()

    def test_labels_lower_cased_and_deduplicated(self):
        """Test that labels are lower-cased for matching and non-strings are skipped."""
        recipe = normalize_recipe({
            "id": 1,
            "title": "Curry",
            "cuisines": ["Indian", "INDIAN", None, 3, " Asian "],
        })

        assert recipe.cuisines == frozenset({"indian", "asian"})
        assert recipe.cuisine_labels == ["Indian", "Asian"]

    def test_zero_health_score_is_kept(self):
        """Test that a real 0 health score is distinguished from unknown."""
        assert normalize_recipe({"id": 1, "title": "Fries", "healthScore": 0}).health_score == 0
        assert normalize_recipe({"id": 2, "title": "Fries"}).health_score is None

    @pytest.mark.parametrize("score", ["80", True, None, float("nan"), {"value": 80}])
    def test_non_numeric_health_score_is_unknown(self, score):
        """Test that health scores that are not real numbers become unknown."""
        assert normalize_recipe({"id": 1, "title": "Soup", "healthScore": score}).health_score is None

    def test_health_score_floored_and_clamped(self):
        """Test that fractional scores are floored and out-of-range scores brought into 0..100."""
        assert normalize_recipe({"id": 1, "title": "A", "healthScore": 69.6}).health_score == 69
        assert normalize_recipe({"id": 4, "title": "D", "healthScore": 70.4}).health_score == 70
        assert normalize_recipe({"id": 2, "title": "B", "healthScore": 150}).health_score == 100
        assert normalize_recipe({"id": 3, "title": "C", "healthScore": -5}).health_score == 0

    def test_string_id_is_coerced(self):
        """Test that a numeric string id is accepted."""
        assert normalize_recipe({"id": "42", "title": "Stew"}).id == 42

    def test_missing_id_gets_synthetic_negative_id(self):
        """Test that a titled record without an id gets an id from its position."""
        assert normalize_recipe({"title": "Stew"}, index=4).id == -5
        assert normalize_recipe({"id": "abc", "title": "Stew"}, index=0).id == -1


class TestExtractNutrient:
    """Test cases for extract_nutrient."""

    def test_first_matching_entry_wins(self):
        """Test that the first entry with the exact name is used."""
        raw = {"nutrition": {"nutrients": [
            {"name": "Calories", "amount": 100},
            {"name": "Calories", "amount": 999},
        ]}}
        assert extract_nutrient(raw, "Calories") == 100.0

    def test_name_match_is_exact(self):
        """Test that nutrient names are matched case-sensitively."""
        raw = {"nutrition": {"nutrients": [{"name": "calories", "amount": 100}]}}
        assert extract_nutrient(raw, "Calories") is None

    @pytest.mark.parametrize("raw", [
        {},
        {"nutrition": None},
        {"nutrition": {}},
        {"nutrition": {"nutrients": None}},
        {"nutrition": {"nutrients": "Calories"}},
        {"nutrition": {"nutrients": [{"name": "Fat", "amount": 3}]}},
        {"nutrition": {"nutrients": ["Calories", None]}},
    ])
    def test_missing_nutrient_is_absent(self, raw):
        """Test that missing nutrition data gives None, never 0."""
        assert extract_nutrient(raw, "Calories") is None

    @pytest.mark.parametrize("amount", [None, "200", -1, True])
    def test_unusable_amount_is_absent(self, amount):
        """Test that a matching entry with an unusable amount gives None."""
        raw = {"nutrition": {"nutrients": [{"name": "Calories", "amount": amount}]}}
        assert extract_nutrient(raw, "Calories") is None

    def test_zero_amount_is_kept(self):
        """Test that a real 0 amount is recorded."""
        raw = {"nutrition": {"nutrients": [{"name": "Fat", "amount": 0}]}}
        assert extract_nutrient(raw, "Fat") == 0.0


class TestNormalizeRecipes:
    """Test cases for batch normalization."""

    def test_invalid_records_dropped_order_kept(self):
        """Test that invalid records are excluded and the rest keep fetch order."""
        raws = [
            {"id": 3, "title": "C"},
            {"id": 9},
            None,
            {"id": 1, "title": "A"},
            {"id": 2, "title": ""},
            {"id": 5, "title": "B"},
        ]

        recipes = normalize_recipes(raws)

        assert [r.title for r in recipes] == ["C", "A", "B"]

    def test_duplicate_ids_keep_first(self):
        """Test that when ids collide the first record wins."""
        recipes = normalize_recipes([
            {"id": 1, "title": "First"},
            {"id": 1, "title": "Second"},
        ])

        assert len(recipes) == 1
        assert recipes[0].title == "First"

    def test_records_without_ids_do_not_collide(self):
        """Test that synthetic ids are unique across a batch."""
        recipes = normalize_recipes([{"title": "A"}, {"title": "B"}, {"id": 7, "title": "C"}])

        assert [r.id for r in recipes] == [-1, -2, 7]

    def test_empty_input(self):
        """Test that an empty batch gives an empty list."""
        assert normalize_recipes([]) == []
