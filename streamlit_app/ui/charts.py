"""
Chart builders for the recipe pages.

Provides the cuisine distribution bar chart for the list page and the
macronutrient donut for the detail page. Both share the same quiet, modern
theme with muted colors.
"""

from typing import List

import altair as alt
import pandas as pd

from recipe_engine.models import CuisineCount, MacroSlice


# Modern color palette (muted, accessible)
COLORS = {
    "primary": "#4f46e5",      # Indigo
    "secondary": "#64748b",    # Slate gray
    "text": "#1e293b",         # Dark slate
    "background": "#ffffff",   # White
    "grid": "#f1f5f9",         # Very light gray
}

# Protein, Carbs, Fat
MACRO_COLORS = ["#0088FE", "#00C49F", "#FFBB28"]


def apply_modern_theme(chart: alt.Chart) -> alt.Chart:
    """
    Apply a unified modern theme to an Altair chart.

    Args:
        chart: Altair chart to theme

    Returns:
        Themed chart with consistent styling
    """
    return chart.configure_view(
        strokeWidth=0,           # No borders
        fill=COLORS["background"],
    ).configure_axis(
        grid=True,
        gridColor=COLORS["grid"],
        gridOpacity=0.3,
        gridWidth=0.5,
        domain=False,            # No axis lines
        labelColor=COLORS["text"],
        labelFontSize=11,
        titleColor=COLORS["text"],
        titleFontSize=12,
        titleFontWeight="normal",
        ticks=False,             # No tick marks
    ).configure_legend(
        titleFontSize=11,
        labelFontSize=10,
        labelColor=COLORS["text"],
        titleColor=COLORS["text"],
        strokeColor=COLORS["grid"],
        padding=8,
        cornerRadius=4,
    ).configure(
        padding={"left": 10, "top": 10, "right": 10, "bottom": 10},
        background=COLORS["background"],
    )


def histogram_to_frame(histogram: List[CuisineCount]) -> pd.DataFrame:
    """Convert histogram entries to a DataFrame with 'name' and 'count' columns, keeping order."""
    return pd.DataFrame(
        [{"name": entry.name, "count": entry.count} for entry in histogram],
        columns=["name", "count"],
    )


def macros_to_frame(slices: List[MacroSlice]) -> pd.DataFrame:
    """Convert macronutrient slices to a DataFrame with 'name', 'value' and 'percent' columns."""
    df = pd.DataFrame(
        [{"name": s.name, "value": s.value} for s in slices],
        columns=["name", "value"],
    )
    total = df["value"].sum()
    df["percent"] = df["value"] / total if total > 0 else 0.0
    return df


def build_cuisine_bar_chart(histogram: List[CuisineCount]) -> alt.Chart:
    """
    Build the "Recipe Distribution by Cuisine" bar chart.

    Args:
        histogram: Output of cuisine_histogram(), already sorted and truncated

    Returns:
        Themed vertical bar chart, bars in histogram order
    """
    df = histogram_to_frame(histogram)

    if df.empty:
        empty_df = pd.DataFrame({"name": ["No data"], "count": [0]})
        chart = alt.Chart(empty_df).mark_bar().encode(
            x=alt.X("name:N", axis=alt.Axis(title=None)),
            y=alt.Y("count:Q", axis=alt.Axis(title="Recipes")),
        ).properties(height=400)
        return apply_modern_theme(chart)

    chart = alt.Chart(df).mark_bar(
        color=COLORS["primary"],
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "name:N",
            sort=df["name"].tolist(),  # Keep histogram order
            axis=alt.Axis(title=None, labelAngle=-45),
        ),
        y=alt.Y(
            "count:Q",
            axis=alt.Axis(title="Recipes", tickMinStep=1),
        ),
        tooltip=[
            alt.Tooltip("name:N", title="Cuisine"),
            alt.Tooltip("count:Q", title="Recipes"),
        ],
    ).properties(
        height=400
    )

    return apply_modern_theme(chart)


def build_macro_donut(slices: List[MacroSlice]) -> alt.Chart:
    """
    Build the macronutrient distribution donut for a recipe.

    Args:
        slices: Output of macronutrient_breakdown()

    Returns:
        Themed donut chart; a grey "No data" ring when every slice is 0
    """
    df = macros_to_frame(slices)

    if df.empty or df["value"].sum() <= 0:
        empty_data = pd.DataFrame({"value": [1], "name": ["No data"]})
        chart = alt.Chart(empty_data).mark_arc(innerRadius=60, outerRadius=100).encode(
            theta="value:Q",
            color=alt.Color("name:N", scale=alt.Scale(domain=["No data"], range=[COLORS["grid"]]), legend=None)
        )
        return apply_modern_theme(chart)

    names = df["name"].tolist()

    chart = alt.Chart(df).mark_arc(
        innerRadius=60,
        outerRadius=100,
        strokeWidth=2,
        stroke=COLORS["background"]
    ).encode(
        theta=alt.Theta("value:Q", stack=True),
        color=alt.Color(
            "name:N",
            scale=alt.Scale(domain=names, range=MACRO_COLORS[:len(names)]),
            legend=alt.Legend(title=None, orient="bottom", labelFontSize=11)
        ),
        tooltip=[
            alt.Tooltip("name:N", title="Nutrient"),
            alt.Tooltip("value:Q", title="Grams", format=".1f"),
            alt.Tooltip("percent:Q", format=".0%", title="Share")
        ]
    ).properties(
        width=300,
        height=300
    )

    text = alt.Chart(df).mark_text(
        radius=120,
        size=12,
        color=COLORS["text"],
    ).encode(
        theta=alt.Theta("value:Q", stack=True),
        text=alt.Text("value:Q", format=".0f")
    )

    return apply_modern_theme(chart + text)
