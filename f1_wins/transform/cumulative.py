"""
Per-season and cumulative constructor win counts.

Every function here takes a DataFrame and returns a new one; inputs are
never modified.
"""
from typing import Iterable, Optional

import pandas as pd


def season_team_wins(win_df: pd.DataFrame) -> pd.DataFrame:
    """
    Count wins per (season, team).

    Seasons are coerced to numbers so that ordering is numeric.

    Args:
        win_df: Win table with at least 'season' and 'team' columns.

    Returns:
        DataFrame with columns season, team, wins sorted by team then season.
    """
    if win_df.empty:
        return pd.DataFrame({
            "season": pd.Series(dtype="int64"),
            "team": pd.Series(dtype="object"),
            "wins": pd.Series(dtype="int64"),
        })

    df = win_df.assign(season=pd.to_numeric(win_df["season"]).astype("int64"))
    counts = df.groupby(["season", "team"]).size().reset_index(name="wins")
    return counts.sort_values(["team", "season"]).reset_index(drop=True)


def cumulative_wins(
    counts: pd.DataFrame,
    teams: Optional[Iterable[str]] = None,
) -> pd.DataFrame:
    """
    Add a running total of wins per team over increasing season.

    Args:
        counts: Output of `season_team_wins`.
        teams: Optional allow-list; other teams are left out of the result.

    Returns:
        DataFrame with columns season, team, wins, cumulative_wins.
    """
    df = counts
    if teams is not None:
        df = df[df["team"].isin(list(teams))]

    df = df.sort_values(["team", "season"]).reset_index(drop=True)
    df["cumulative_wins"] = df.groupby("team")["wins"].cumsum().astype("int64")
    return df
