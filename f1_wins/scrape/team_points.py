"""
Current team points scraped from the public Formula 1 teams page.

The page repeats each team name and point total across several nested
elements, so both selector results are subsampled with a fixed stride
before names and points are paired by index.
"""
import re

import pandas as pd
import requests
from bs4 import BeautifulSoup

from f1_wins.config import ScrapeConfig, cfg
from f1_wins.utils.logger import logger

_NUMBER = re.compile(r"-?\d{1,3}(?:,\d{3})+(?:\.\d+)?|-?\d+(?:\.\d+)?")


class ScrapeStructureMismatch(ValueError):
    """The teams page no longer matches the configured selectors/strides."""


def fetch_team_page(url: str | None = None, timeout: int | None = None) -> str:
    """GET the teams page and return its HTML. HTTP errors propagate."""
    url = url or cfg.scrape.team_page_url
    logger.info(f"Fetching team page: {url}")
    response = requests.get(
        url,
        headers={"User-Agent": cfg.scrape.user_agent},
        timeout=timeout or cfg.scrape.timeout,
    )
    response.raise_for_status()
    return response.text


def parse_points(text: str) -> float:
    """Parse '245 PTS' / '1,024' style text to a float."""
    match = _NUMBER.search(text)
    if match is None:
        raise ScrapeStructureMismatch(f"Could not parse points from {text!r}")
    return float(match.group(0).replace(",", ""))


def _select_texts(soup: BeautifulSoup, selector: str, start: int, stride: int) -> list[str]:
    nodes = soup.select(selector)
    texts = [node.get_text(" ", strip=True) for node in nodes]
    logger.debug(f"{selector!r}: {len(texts)} raw nodes, keeping every {stride} from {start}")
    return texts[start::stride]


def extract_team_points(html: str, config: ScrapeConfig | None = None) -> pd.DataFrame:
    """
    Extract the TeamPoints table from the teams page HTML.

    Args:
        html: Page HTML.
        config: Selectors and strides. Defaults to the project config.

    Returns:
        DataFrame with columns team, points sorted by points descending.

    Raises:
        ScrapeStructureMismatch: a selector matches nothing, name and point
            lists differ in length, or a point value is not numeric.
    """
    config = config or cfg.scrape
    soup = BeautifulSoup(html, "html.parser")

    names = _select_texts(soup, config.name_selector, config.name_start, config.name_stride)
    points_text = _select_texts(soup, config.points_selector, config.points_start, config.points_stride)

    for selector, texts in ((config.name_selector, names), (config.points_selector, points_text)):
        if not texts:
            raise ScrapeStructureMismatch(f"Team page structure changed: selector {selector!r} matched nothing")

    if len(names) != len(points_text):
        raise ScrapeStructureMismatch(
            f"Team page structure changed: {len(names)} names vs {len(points_text)} point values "
            f"(selectors {config.name_selector!r} / {config.points_selector!r})"
        )

    df = pd.DataFrame({
        "team": names,
        "points": [parse_points(text) for text in points_text],
    })
    logger.info(f"Scraped points for {len(df)} teams.")
    return df.sort_values("points", ascending=False, kind="mergesort").reset_index(drop=True)


def scrape_team_points(config: ScrapeConfig | None = None) -> pd.DataFrame:
    """Fetch the teams page and extract its TeamPoints table."""
    config = config or cfg.scrape
    html = fetch_team_page(config.team_page_url, timeout=config.timeout)
    return extract_team_points(html, config)
