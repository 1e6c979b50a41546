"""
Winner extraction from Ergast results pages.

A page holds `MRData.RaceTable.Races`; each race lists its classified rows
under `Results`. Because the API pages over result rows rather than races,
a race can be split across two pages and the second chunk carries no
position-1 row. Such chunks yield no winner and are dropped downstream.
"""
from typing import Any, NamedTuple, Optional

from f1_wins.utils.logger import logger


class Winner(NamedTuple):
    driver: str
    team: str


def extract_races(page: Any) -> list[dict]:
    """
    Return the race list of a results page, or [] if the page has none.
    """
    if not isinstance(page, dict):
        return []
    race_table = (page.get("MRData") or {}).get("RaceTable") or {}
    races = race_table.get("Races") or []
    return [race for race in races if isinstance(race, dict)]


def _parse_position(value: Any) -> Optional[int]:
    """Positions arrive as strings; anything non-integer is unknown."""
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def find_winner(race: dict) -> Optional[Winner]:
    """
    Find the position-1 row of a race.

    If several rows claim position 1 the first one in source order is kept
    and a warning is logged.

    Args:
        race: A single race record.

    Returns:
        Winner(driver, team), or None if no row resolves a winner.
    """
    results = race.get("Results") or []
    if isinstance(results, dict):
        results = [results]

    winners = [row for row in results if _parse_position(row.get("position")) == 1]
    if not winners:
        return None

    if len(winners) > 1:
        logger.warning(
            f"{len(winners)} rows claim position 1 in {race.get('season')} "
            f"{race.get('raceName')}; keeping the first."
        )

    row = winners[0]
    driver = (row.get("Driver") or {}).get("driverId")
    team = (row.get("Constructor") or {}).get("constructorId")
    if not driver or not team:
        return None
    return Winner(driver=driver, team=team)


def extract_winners(page: Any) -> list[Optional[Winner]]:
    """Winners aligned by index with `extract_races(page)`."""
    return [find_winner(race) for race in extract_races(page)]
