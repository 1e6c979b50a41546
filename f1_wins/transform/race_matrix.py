"""
Race x season matrix of winning constructors for the results heatmap.

Steps:
1. Count how many won editions each race name has (popularity)
2. Pivot to one row per race, one column per season
3. Rank by popularity and keep the top K races
4. Melt back to long form and bound the number of team categories
"""
import pandas as pd

from f1_wins.utils.logger import logger

ID_COLUMNS = ["race_name", "total_appearances"]
LONG_COLUMNS = ["race_name", "total_appearances", "season", "team"]


def race_appearances(win_df: pd.DataFrame) -> pd.DataFrame:
    """Number of win rows per race name, as race_name / total_appearances."""
    return (
        win_df.groupby("race_name")
        .size()
        .rename("total_appearances")
        .reset_index()
    )


def race_season_matrix(win_df: pd.DataFrame) -> pd.DataFrame:
    """
    Pivot the win table to one row per race and one column per season.

    Cells hold the winning team, NaN where the race was not held (or not won)
    that season. Rows are sorted by total_appearances descending; equal
    counts keep alphabetical race order.

    Args:
        win_df: Win table with race_name, season and team columns.

    Returns:
        Wide DataFrame: race_name, total_appearances, then one int column per season.
    """
    if win_df.empty:
        return pd.DataFrame({
            "race_name": pd.Series(dtype="object"),
            "total_appearances": pd.Series(dtype="int64"),
        })

    df = win_df.assign(season=pd.to_numeric(win_df["season"]).astype("int64"))
    matrix = df.pivot_table(
        index="race_name",
        columns="season",
        values="team",
        aggfunc="first",
    )
    seasons = sorted(int(s) for s in matrix.columns)
    matrix.columns = [int(s) for s in matrix.columns]
    matrix = matrix.reset_index()

    matrix = matrix.merge(race_appearances(df), on="race_name", how="left")
    matrix = matrix[ID_COLUMNS + seasons]
    return (
        matrix.sort_values("total_appearances", ascending=False, kind="mergesort")
        .reset_index(drop=True)
    )


def top_races(matrix: pd.DataFrame, k: int = 25) -> pd.DataFrame:
    """
    Keep the first k rows of a popularity-sorted matrix.

    This is a fixed-size slice: when several races share the count at the
    boundary, some of them are kept and some dropped. The cut is logged.
    """
    top = matrix.head(k).reset_index(drop=True)
    if k > 0 and len(matrix) > k:
        boundary = matrix["total_appearances"].iloc[k - 1]
        cut = int((matrix["total_appearances"].iloc[k:] == boundary).sum())
        if cut:
            logger.warning(
                f"Top-{k} race cut splits a tie: {cut} race(s) with "
                f"{boundary} appearances were left out."
            )
    return top


def melt_matrix(matrix: pd.DataFrame) -> pd.DataFrame:
    """Unpivot a race matrix to long form, dropping empty cells."""
    season_cols = [c for c in matrix.columns if c not in ID_COLUMNS]
    if matrix.empty or not season_cols:
        return pd.DataFrame({
            "race_name": pd.Series(dtype="object"),
            "total_appearances": pd.Series(dtype="int64"),
            "season": pd.Series(dtype="int64"),
            "team": pd.Series(dtype="object"),
        })

    long_df = matrix.melt(
        id_vars=ID_COLUMNS,
        value_vars=season_cols,
        var_name="season",
        value_name="team",
    )
    long_df = long_df.dropna(subset=["team"]).copy()
    long_df["season"] = long_df["season"].astype("int64")
    return long_df[LONG_COLUMNS].reset_index(drop=True)


def bound_team_categories(
    long_df: pd.DataFrame,
    top_n: int = 11,
    other_label: str = "Other",
) -> pd.DataFrame:
    """
    Keep the top_n most frequent teams as named categories, relabel the rest.

    Frequency ties are broken alphabetically so the result is deterministic.

    Args:
        long_df: Long race table with a 'team' column.
        top_n: Number of named team categories to keep.
        other_label: Label for every remaining team.

    Returns:
        Copy of long_df with an added 'team_category' column.
    """
    counts = (
        long_df.groupby("team")
        .size()
        .reset_index(name="n")
        .sort_values(["n", "team"], ascending=[False, True])
    )
    named = set(counts["team"].head(top_n))

    out = long_df.copy()
    out["team_category"] = out["team"].where(out["team"].isin(named), other_label)
    return out


def build_heatmap_table(
    win_df: pd.DataFrame,
    top_k: int = 25,
    top_n: int = 11,
    other_label: str = "Other",
) -> pd.DataFrame:
    """Win table -> long heatmap table for the top_k most-run races."""
    matrix = top_races(race_season_matrix(win_df), k=top_k)
    long_df = melt_matrix(matrix)
    logger.info(f"Heatmap table: {matrix.shape[0]} races x {long_df['season'].nunique()} seasons.")
    return bound_team_categories(long_df, top_n=top_n, other_label=other_label)
