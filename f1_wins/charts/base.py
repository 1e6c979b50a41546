"""
Shared helpers for chart rendering and export.
"""
from pathlib import Path

import plotly.graph_objects as go

from f1_wins.utils.logger import logger

STATIC_SUFFIXES = {".png", ".jpg", ".jpeg", ".svg", ".pdf", ".webp"}


def empty_figure(title: str, template: str = "plotly_white") -> go.Figure:
    """Placeholder figure for a table with no rows."""
    fig = go.Figure()
    fig.add_annotation(
        text="No data",
        xref="paper",
        yref="paper",
        x=0.5,
        y=0.5,
        showarrow=False,
        font=dict(size=20, color="gray"),
    )
    fig.update_layout(
        title=title,
        template=template,
        xaxis=dict(visible=False),
        yaxis=dict(visible=False),
    )
    return fig


def color_map(categories, team_colors: dict[str, str]) -> dict[str, str]:
    """Restrict the configured colours to the categories being plotted."""
    return {c: team_colors[c] for c in categories if c in team_colors}


def save_figure(fig: go.Figure, path: Path, width: int = 1200, height: int = 700) -> Path:
    """
    Write a figure to disk.

    Image suffixes go through kaleido; anything else is written as HTML.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in STATIC_SUFFIXES:
        fig.write_image(str(path), width=width, height=height)
    else:
        fig.write_html(str(path), include_plotlyjs="cdn")
    logger.info(f"Saved chart → {path}")
    return path
