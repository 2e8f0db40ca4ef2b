"""
Filter choices for the recipe list page.

Values are lower-cased labels matched against Recipe.cuisines / Recipe.diets;
the first entry of each list is the "all" sentinel.
"""

from recipe_engine.models import ANY_LABEL

CUISINE_OPTIONS = [
    (ANY_LABEL, "All Cuisines"),
    ("american", "American"),
    ("italian", "Italian"),
    ("mexican", "Mexican"),
    ("chinese", "Chinese"),
    ("indian", "Indian"),
    ("japanese", "Japanese"),
    ("mediterranean", "Mediterranean"),
    ("greek", "Greek"),
    ("french", "French"),
    ("thai", "Thai"),
    ("vietnamese", "Vietnamese"),
    ("korean", "Korean"),
]

DIET_OPTIONS = [
    (ANY_LABEL, "All Diets"),
    ("vegetarian", "Vegetarian"),
    ("vegan", "Vegan"),
    ("gluten free", "Gluten Free"),
]
