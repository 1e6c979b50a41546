import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from f1_wins.charts.base import color_map, empty_figure

TITLE = "Winning constructor by race and season"


def render_results_heatmap(
    heatmap_df: pd.DataFrame,
    team_colors: dict[str, str] | None = None,
    template: str = "plotly_white",
) -> go.Figure:
    """
    Render the race x season grid coloured by winning team category.

    Each cell is a square marker so the categorical colours can come straight
    from the team colour lookup. Races are ordered by popularity, most-run at
    the top.

    Args:
        heatmap_df: Long table with race_name, total_appearances, season,
            team and team_category columns.
        team_colors: Optional category -> colour lookup.
        template: Plotly template name.

    Returns:
        Plotly Figure object.
    """
    if heatmap_df.empty:
        return empty_figure(TITLE, template)

    race_order = (
        heatmap_df[["race_name", "total_appearances"]]
        .drop_duplicates()
        .sort_values(["total_appearances", "race_name"], ascending=[False, True])["race_name"]
        .tolist()
    )
    categories = (
        heatmap_df["team_category"].value_counts().sort_values(ascending=False, kind="mergesort").index.tolist()
    )

    fig = px.scatter(
        heatmap_df,
        x="season",
        y="race_name",
        color="team_category",
        hover_data=["team"],
        category_orders={"race_name": race_order, "team_category": categories},
        color_discrete_map=color_map(categories, team_colors or {}),
        template=template,
    )
    fig.update_traces(marker=dict(symbol="square", size=11, line=dict(width=0)))
    fig.update_layout(
        title=TITLE,
        xaxis_title="Season",
        yaxis_title=None,
        legend_title="Constructor",
        height=max(500, 26 * len(race_order)),
    )
    return fig
