"""
Pytest fixtures for the F1 wins pipeline tests.
"""
import pandas as pd
import pytest


def make_result(position, driver: str, team: str) -> dict:
    return {
        "position": str(position) if position is not None else None,
        "Driver": {"driverId": driver},
        "Constructor": {"constructorId": team},
    }


def make_race(season: int, race_name: str, results: list[dict]) -> dict:
    return {"season": str(season), "round": "1", "raceName": race_name, "Results": results}


def make_page(races: list[dict]) -> dict:
    return {"MRData": {"total": "100", "RaceTable": {"Races": races}}}


@pytest.fixture
def page_with_winner() -> dict:
    """One race in 2021 won by d1 driving for t1."""
    return make_page([
        make_race(2021, "R1", [
            make_result(1, "d1", "t1"),
            make_result(2, "d2", "t2"),
        ]),
    ])


@pytest.fixture
def page_without_winner() -> dict:
    """Tail of a race split across pages: no position-1 row."""
    return make_page([
        make_race(2021, "R2", [
            make_result(16, "d3", "t3"),
            make_result("R", "d4", "t4"),
        ]),
    ])


@pytest.fixture
def sample_wins() -> pd.DataFrame:
    """Small win table across three seasons."""
    return pd.DataFrame([
        {"driver": "leclerc", "season": 2019, "team": "ferrari", "race_name": "Belgian Grand Prix"},
        {"driver": "hamilton", "season": 2019, "team": "mercedes", "race_name": "British Grand Prix"},
        {"driver": "hamilton", "season": 2019, "team": "mercedes", "race_name": "Monaco Grand Prix"},
        {"driver": "vettel", "season": 2020, "team": "ferrari", "race_name": "Monaco Grand Prix"},
        {"driver": "hamilton", "season": 2020, "team": "mercedes", "race_name": "British Grand Prix"},
        {"driver": "gasly", "season": 2020, "team": "alphatauri", "race_name": "Italian Grand Prix"},
        {"driver": "sainz", "season": 2021, "team": "ferrari", "race_name": "British Grand Prix"},
        {"driver": "max_verstappen", "season": 2021, "team": "red_bull", "race_name": "Monaco Grand Prix"},
        {"driver": "max_verstappen", "season": 2021, "team": "red_bull", "race_name": "Belgian Grand Prix"},
    ])


def team_page_html(teams: list[tuple[str, str]]) -> str:
    """Mimic the teams page: each name appears 5 times, each point value twice."""
    cards = []
    for name, points in teams:
        names = "".join(f'<span class="team-name">{name}</span>' for _ in range(5))
        pts = "".join(f'<span class="team-points">{points}</span>' for _ in range(2))
        cards.append(f'<a class="team-card"><div>{names}</div><div>{pts}</div></a>')
    return "<html><body>" + "".join(cards) + "</body></html>"


@pytest.fixture
def team_html() -> str:
    return team_page_html([("McLaren", "666 PTS"), ("Ferrari", "652 PTS")])
