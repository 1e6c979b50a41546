import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from f1_wins.charts.base import color_map, empty_figure

TITLE = "Grand Prix wins per season"


def render_season_wins(
    counts: pd.DataFrame,
    team_colors: dict[str, str] | None = None,
    template: str = "plotly_white",
) -> go.Figure:
    """Stacked bars of wins per season, one segment per constructor."""
    if counts.empty:
        return empty_figure(TITLE, template)

    fig = px.bar(
        counts.sort_values(["season", "team"]),
        x="season",
        y="wins",
        color="team",
        color_discrete_map=color_map(counts["team"].unique(), team_colors or {}),
        template=template,
    )
    fig.update_layout(
        title=TITLE,
        barmode="stack",
        xaxis_title="Season",
        yaxis_title="Wins",
        legend_title="Constructor",
    )
    return fig
