import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from f1_wins.charts.base import empty_figure

TITLE = "Current season constructor points"


def render_team_points(points_df: pd.DataFrame, template: str = "plotly_white") -> go.Figure:
    """Horizontal bar chart of scraped team points, leader on top."""
    if points_df.empty:
        return empty_figure(TITLE, template)

    df = points_df.sort_values("points", ascending=True)
    fig = px.bar(
        df,
        x="points",
        y="team",
        orientation="h",
        text="points",
        template=template,
    )
    fig.update_traces(texttemplate="%{text:.0f}", textposition="outside")
    fig.update_layout(
        title=TITLE,
        xaxis_title="Points",
        yaxis_title=None,
    )
    return fig
