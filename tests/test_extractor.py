"""
Unit tests for winner extraction and the win table builder.
"""
import pandas as pd

from conftest import make_page, make_race, make_result
from f1_wins.ingest import table_builder
from f1_wins.ingest.extractor import Winner, extract_races, extract_winners, find_winner
from f1_wins.ingest.table_builder import WIN_COLUMNS, build_win_table


class TestExtractRaces:
    def test_returns_race_list(self, page_with_winner):
        races = extract_races(page_with_winner)
        assert len(races) == 1
        assert races[0]["raceName"] == "R1"

    def test_missing_levels_return_empty(self):
        assert extract_races({}) == []
        assert extract_races({"MRData": {}}) == []
        assert extract_races({"MRData": {"RaceTable": {}}}) == []

    def test_non_dict_page_returns_empty(self):
        assert extract_races(None) == []
        assert extract_races([]) == []


class TestFindWinner:
    def test_picks_position_one(self):
        race = make_race(2021, "R1", [
            make_result(2, "d2", "t2"),
            make_result(1, "d1", "t1"),
        ])
        assert find_winner(race) == Winner(driver="d1", team="t1")

    def test_no_position_one_returns_none(self, page_without_winner):
        race = extract_races(page_without_winner)[0]
        assert find_winner(race) is None

    def test_unknown_positions_never_match(self):
        race = make_race(2021, "R1", [make_result(None, "d1", "t1"), make_result("DNF", "d2", "t2")])
        assert find_winner(race) is None

    def test_empty_results_returns_none(self):
        assert find_winner(make_race(2021, "R1", [])) is None
        assert find_winner({"season": "2021", "raceName": "R1"}) is None

    def test_multiple_position_one_keeps_first(self):
        race = make_race(2021, "R1", [
            make_result(1, "first", "t1"),
            make_result(1, "second", "t2"),
        ])
        assert find_winner(race) == Winner(driver="first", team="t1")

    def test_missing_constructor_is_not_a_winner(self):
        race = make_race(2021, "R1", [{"position": "1", "Driver": {"driverId": "d1"}}])
        assert find_winner(race) is None

    def test_driver_id_that_looks_like_a_sentinel_is_kept(self):
        race = make_race(2021, "R1", [make_result(1, "NA", "t1")])
        assert find_winner(race) == Winner(driver="NA", team="t1")

    def test_extract_winners_aligned_with_races(self):
        page = make_page([
            make_race(2020, "A", [make_result(1, "d1", "t1")]),
            make_race(2020, "B", [make_result(3, "d2", "t2")]),
        ])
        assert extract_winners(page) == [Winner("d1", "t1"), None]


class TestBuildWinTable:
    def test_drops_race_without_winner(self, page_with_winner, page_without_winner):
        df = build_win_table([page_with_winner, page_without_winner])
        assert len(df) == 1
        row = df.iloc[0]
        assert (row["driver"], row["season"], row["team"], row["race_name"]) == ("d1", 2021, "t1", "R1")

    def test_exact_columns(self, page_with_winner):
        df = build_win_table([page_with_winner])
        assert list(df.columns) == WIN_COLUMNS

    def test_season_is_integer(self, page_with_winner):
        df = build_win_table([page_with_winner])
        assert pd.api.types.is_integer_dtype(df["season"])

    def test_preserves_source_order(self):
        pages = [
            make_page([
                make_race(1990, "Z", [make_result(1, "senna", "mclaren")]),
                make_race(1990, "A", [make_result(1, "prost", "ferrari")]),
            ]),
            make_page([make_race(1991, "M", [make_result(1, "mansell", "williams")])]),
        ]
        df = build_win_table(pages)
        assert df["race_name"].tolist() == ["Z", "A", "M"]

    def test_row_count_is_races_minus_dropped(self):
        pages = [
            make_page([
                make_race(2000, "A", [make_result(1, "d1", "t1")]),
                make_race(2000, "B", [make_result(2, "d2", "t2")]),
                make_race(2000, "C", [make_result(1, "d3", "t3")]),
            ]),
        ]
        assert len(build_win_table(pages)) == 2

    def test_no_pages_gives_empty_table(self):
        df = build_win_table([])
        assert df.empty
        assert list(df.columns) == WIN_COLUMNS

    def test_all_rows_complete(self, page_with_winner):
        df = build_win_table([page_with_winner, page_with_winner])
        assert df[["driver", "team", "race_name"]].notna().all().all()
        assert (df[["driver", "team", "race_name"]] != "").all().all()

    def test_non_numeric_season_dropped(self):
        page = make_page([
            {"season": "n/a", "raceName": "A", "Results": [make_result(1, "d1", "t1")]},
            make_race(2001, "B", [make_result(1, "d2", "t2")]),
        ])
        df = build_win_table([page])
        assert df["race_name"].tolist() == ["B"]

    def test_fractional_season_dropped(self):
        page = make_page([
            {"season": "2021.5", "raceName": "A", "Results": [make_result(1, "d1", "t1")]},
            make_race(2021, "B", [make_result(1, "d2", "t2")]),
        ])
        df = build_win_table([page])
        assert df["race_name"].tolist() == ["B"]
        assert df["season"].tolist() == [2021]

    def test_uses_page_level_winner_extraction(self, monkeypatch, page_with_winner):
        calls = []

        def fake_extract_winners(page):
            calls.append(page)
            return [None]

        monkeypatch.setattr(table_builder, "extract_winners", fake_extract_winners)
        df = build_win_table([page_with_winner])
        assert calls == [page_with_winner]
        assert df.empty
