"""Tests for StrikeTable."""

import pytest

from rosterlink.game.strikes import StrikeTable


class TestStrikeTable:
    def test_unknown_name_has_zero(self) -> None:
        table = StrikeTable()
        assert table.count("Curry") == 0
        assert "Curry" not in table
        assert len(table) == 0

    def test_add_strike_increments(self) -> None:
        table = StrikeTable()
        assert table.add_strike("Curry") == 1
        assert table.add_strike("Curry") == 2
        assert table["Curry"] == 2

    def test_exhausted_at_cap(self) -> None:
        table = StrikeTable(max_strikes=3)
        for _ in range(3):
            table.add_strike("Curry")
        assert table.is_exhausted("Curry")
        assert not table.is_exhausted("Thompson")

    def test_cannot_exceed_cap(self) -> None:
        table = StrikeTable(max_strikes=1)
        table.add_strike("Curry")
        with pytest.raises(ValueError):
            table.add_strike("Curry")
        assert table["Curry"] == 1

    def test_leaderboard_order(self) -> None:
        table = StrikeTable()
        table.add_strike("Thompson")
        table.add_strike("Curry")
        table.add_strike("Curry")
        table.add_strike("Durant")
        assert table.leaderboard() == [("Curry", 2), ("Durant", 1), ("Thompson", 1)]

    def test_behaves_as_mapping(self) -> None:
        table = StrikeTable()
        table.add_strike("Curry")
        assert dict(table) == {"Curry": 1}
        assert table.get("Durant", 0) == 0
