"""
Click-based CLI for the F1 constructor wins charts.

Usage:
    f1-wins setup
    f1-wins wins --offset-end 2000 --top-k 25
    f1-wins points
    f1-wins run
"""
import sys

import click
import requests

from f1_wins.config import cfg
from f1_wins.scrape.team_points import ScrapeStructureMismatch
from f1_wins.utils.logger import setup_logger, logger


@click.group()
@click.option("--log-level", default=None, help="Logging level (defaults to F1W_LOG_LEVEL or INFO).")
def cli(log_level: str | None) -> None:
    """🏎️  F1 constructor wins history"""
    setup_logger(log_dir=cfg.paths.logs, level=log_level)


@cli.command()
def setup() -> None:
    """Create output directories."""
    logger.info("Setting up project directories...")
    cfg.paths.setup()
    logger.success("✅ All directories created.")


def _wins(offset_end: int | None, top_k: int | None, top_n: int | None) -> None:
    from f1_wins.pipeline import run_wins_pipeline

    offsets = None
    if offset_end is not None:
        offsets = range(cfg.api.offset_start, offset_end, cfg.api.offset_step)
    run_wins_pipeline(offsets=offsets, top_k=top_k, top_n=top_n)


def _points() -> None:
    from f1_wins.pipeline import run_points_pipeline

    try:
        run_points_pipeline()
    except ScrapeStructureMismatch as e:
        logger.error(f"Team page scrape failed: {e}")
        sys.exit(1)
    except requests.exceptions.RequestException as e:
        logger.error(f"Could not fetch team page: {e}")
        sys.exit(1)


@cli.command()
@click.option("--offset-end", default=None, type=int, help="Stop paging at this offset (for testing).")
@click.option("--top-k", default=None, type=int, help="Races shown in the heatmap.")
@click.option("--top-n", default=None, type=int, help="Named team categories in the heatmap.")
def wins(offset_end: int | None, top_k: int | None, top_n: int | None) -> None:
    """Fetch race results and render the wins charts."""
    cfg.paths.setup()
    logger.info("Building wins charts...")
    _wins(offset_end, top_k, top_n)
    logger.success("✅ Wins charts complete.")


@cli.command()
def points() -> None:
    """Scrape current team points and render the points chart."""
    cfg.paths.setup()
    logger.info("Building team points chart...")
    _points()
    logger.success("✅ Points chart complete.")


@cli.command()
@click.option("--offset-end", default=None, type=int, help="Stop paging at this offset (for testing).")
@click.option("--top-k", default=None, type=int, help="Races shown in the heatmap.")
@click.option("--top-n", default=None, type=int, help="Named team categories in the heatmap.")
def run(offset_end: int | None, top_k: int | None, top_n: int | None) -> None:
    """Render all four charts."""
    cfg.paths.setup()
    _wins(offset_end, top_k, top_n)
    _points()
    logger.success("✅ All charts complete.")


if __name__ == "__main__":
    cli()
