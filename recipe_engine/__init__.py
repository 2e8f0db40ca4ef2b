"""
Recipe filtering and aggregation engine.

This package contains:
- models: Recipe, FilterQuery, RecipeStats and chart data models
- normalize: Raw search API records -> Recipe
- filters: Search text / cuisine / diet predicates
- stats: Summary statistics, cuisine histogram, macronutrient breakdown
- catalog: Per-session store of recipes and the current query
- connectors: Recipe sources (Spoonacular)
- loader: One fetch attempt into a catalog
- summary: Plain-text rendering of HTML summaries
- config: .env loading and typed settings
"""
