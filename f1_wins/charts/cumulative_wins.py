import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from f1_wins.charts.base import color_map, empty_figure

TITLE = "Cumulative Grand Prix wins by constructor"


def render_cumulative_wins(
    cumulative_df: pd.DataFrame,
    team_colors: dict[str, str] | None = None,
    template: str = "plotly_white",
) -> go.Figure:
    """
    Render the stair-step view of cumulative wins per constructor.

    Args:
        cumulative_df: DataFrame with 'season', 'team', 'cumulative_wins'.
        team_colors: Optional team -> colour lookup.
        template: Plotly template name.

    Returns:
        Plotly Figure object.
    """
    if cumulative_df.empty:
        return empty_figure(TITLE, template)

    fig = px.line(
        cumulative_df,
        x="season",
        y="cumulative_wins",
        color="team",
        line_shape="hv",
        markers=True,
        color_discrete_map=color_map(cumulative_df["team"].unique(), team_colors or {}),
        template=template,
    )
    fig.update_layout(
        title=TITLE,
        xaxis_title="Season",
        yaxis_title="Wins (cumulative)",
        legend_title="Constructor",
        hovermode="x unified",
    )
    return fig
