"""
Pipeline orchestration.

Wins branch: fetch result pages -> win table -> cumulative / per-season
counts and the race heatmap table -> three charts.
Points branch: scrape the teams page -> points chart.

A failed result page never stops the wins branch; charts are drawn from
whatever rows survived. A scrape structure mismatch does stop the points
branch.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from f1_wins.charts.base import save_figure
from f1_wins.charts.cumulative_wins import render_cumulative_wins
from f1_wins.charts.results_heatmap import render_results_heatmap
from f1_wins.charts.season_wins import render_season_wins
from f1_wins.charts.team_points import render_team_points
from f1_wins.config import cfg
from f1_wins.ingest.api_client import ResultsClient
from f1_wins.ingest.table_builder import build_win_table
from f1_wins.scrape.team_points import scrape_team_points
from f1_wins.transform.cumulative import cumulative_wins, season_team_wins
from f1_wins.transform.race_matrix import build_heatmap_table
from f1_wins.utils.logger import logger


@dataclass(frozen=True)
class WinTables:
    wins: pd.DataFrame
    season_counts: pd.DataFrame
    cumulative: pd.DataFrame
    heatmap: pd.DataFrame


def aggregate_wins(
    win_df: pd.DataFrame,
    top_k: Optional[int] = None,
    top_n: Optional[int] = None,
    teams: Optional[Iterable[str]] = None,
) -> WinTables:
    """
    Derive every chart table from the win table. Pure: no I/O, no state.

    Args:
        win_df: Output of `build_win_table`.
        top_k: Races kept in the heatmap (default from config).
        top_n: Named team categories in the heatmap (default from config).
        teams: Allow-list for the cumulative view (default from config).
    """
    top_k = cfg.aggregation.top_k_races if top_k is None else top_k
    top_n = cfg.aggregation.top_n_teams if top_n is None else top_n
    teams = cfg.charts.team_allow_list if teams is None else teams

    counts = season_team_wins(win_df)
    return WinTables(
        wins=win_df,
        season_counts=counts,
        cumulative=cumulative_wins(counts, teams=teams),
        heatmap=build_heatmap_table(
            win_df,
            top_k=top_k,
            top_n=top_n,
            other_label=cfg.aggregation.other_label,
        ),
    )


def _chart_path(out_dir: Path, name: str) -> Path:
    return out_dir / f"{name}.{cfg.charts.image_format}"


def run_wins_pipeline(
    offsets: Optional[Iterable[int]] = None,
    top_k: Optional[int] = None,
    top_n: Optional[int] = None,
    out_dir: Optional[Path] = None,
    client: Optional[ResultsClient] = None,
) -> WinTables:
    """
    Fetch race results and render the cumulative, per-season and heatmap charts.

    Args:
        offsets: Result offsets to fetch (default: configured range).
        top_k: Races kept in the heatmap.
        top_n: Named team categories in the heatmap.
        out_dir: Chart directory (default: cfg.paths.charts).
        client: Pre-built client, mainly for tests.

    Returns:
        The derived tables.
    """
    out_dir = Path(out_dir or cfg.paths.charts)
    client = client or ResultsClient()

    pages = client.fetch_pages(offsets)
    if not pages:
        logger.warning("No result pages fetched; charts will be empty.")

    tables = aggregate_wins(build_win_table(pages), top_k=top_k, top_n=top_n)
    logger.info(
        f"{len(tables.wins)} wins over {tables.wins['season'].nunique()} seasons "
        f"by {tables.wins['team'].nunique()} constructors."
    )

    colors = cfg.charts.team_colors
    template = cfg.charts.template
    size = dict(width=cfg.charts.width, height=cfg.charts.height)

    save_figure(
        render_cumulative_wins(tables.cumulative, colors, template),
        _chart_path(out_dir, "cumulative_wins"),
        **size,
    )
    save_figure(
        render_season_wins(tables.season_counts, colors, template),
        _chart_path(out_dir, "season_wins"),
        **size,
    )
    heatmap_fig = render_results_heatmap(tables.heatmap, colors, template)
    save_figure(
        heatmap_fig,
        _chart_path(out_dir, "results_heatmap"),
        width=cfg.charts.width,
        height=max(cfg.charts.height, heatmap_fig.layout.height or 0),
    )
    return tables


def run_points_pipeline(out_dir: Optional[Path] = None) -> pd.DataFrame:
    """
    Scrape current team points and render the points bar chart.

    Raises:
        ScrapeStructureMismatch: if the page no longer matches the selectors.
    """
    out_dir = Path(out_dir or cfg.paths.charts)
    points = scrape_team_points()
    save_figure(
        render_team_points(points, cfg.charts.template),
        _chart_path(out_dir, "team_points"),
        width=cfg.charts.width,
        height=cfg.charts.height,
    )
    return points
