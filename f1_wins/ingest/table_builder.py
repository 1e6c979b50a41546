"""
Flatten fetched result pages into one row per won race.
"""
from typing import Any, Iterable

import pandas as pd

from f1_wins.ingest.extractor import extract_races, extract_winners
from f1_wins.utils.logger import logger

WIN_COLUMNS = ["driver", "season", "team", "race_name"]


def empty_win_table() -> pd.DataFrame:
    return pd.DataFrame({
        "driver": pd.Series(dtype="object"),
        "season": pd.Series(dtype="int64"),
        "team": pd.Series(dtype="object"),
        "race_name": pd.Series(dtype="object"),
    })


def build_win_table(pages: Iterable[Any]) -> pd.DataFrame:
    """
    Build the win table from fetched pages.

    Races keep source order (pages in fetch order, races within a page in
    original order). Races without a resolvable winner are dropped.

    Args:
        pages: Decoded results pages.

    Returns:
        DataFrame with columns driver, season (int), team, race_name.
    """
    races, winners = [], []
    for page in pages:
        races.extend(extract_races(page))
        winners.extend(extract_winners(page))

    records = [
        {
            "driver": winner.driver,
            "season": race.get("season"),
            "team": winner.team,
            "race_name": race.get("raceName"),
        }
        for race, winner in zip(races, winners)
        if winner is not None
    ]
    dropped = len(races) - len(records)
    logger.info(f"Extracted {len(records)} winners from {len(races)} races ({dropped} without a winner).")

    if not records:
        return empty_win_table()

    df = pd.DataFrame(records, columns=WIN_COLUMNS)
    df["season"] = pd.to_numeric(df["season"], errors="coerce")

    invalid = (
        df["season"].isna()
        | (df["season"] % 1 != 0)
        | df["race_name"].isna()
        | (df["race_name"] == "")
    )
    if invalid.any():
        logger.warning(f"Dropping {int(invalid.sum())} rows with a missing or non-integer season, or no race name.")
        df = df[~invalid].copy()

    df["season"] = df["season"].astype("int64")
    return df.reset_index(drop=True)
