"""Tests for console reporting."""

import io

from rich.console import Console

from montyhall.io.report_writer import (
    build_proportion_table,
    format_proportion_table,
    print_game_result,
    print_proportion_table,
)
from montyhall.models.game import GameAssignment, GameResult, Outcome, Strategy

TABLE = {
    Strategy.STAY: {Outcome.WIN: 0.34, Outcome.LOSE: 0.66},
    Strategy.SWITCH: {Outcome.WIN: 0.66, Outcome.LOSE: 0.34},
}


def render(callback) -> str:
    buffer = io.StringIO()
    callback(Console(file=buffer, width=100, color_system=None))
    return buffer.getvalue()


class TestProportionTable:
    """Tests for proportion table rendering."""

    def test_rich_table_shape(self):
        table = build_proportion_table(TABLE)
        assert table.row_count == 2
        assert [c.header for c in table.columns] == ["Strategy", "LOSE", "WIN"]

    def test_rich_and_plain_share_column_order(self):
        rich_headers = [c.header for c in build_proportion_table(TABLE).columns][1:]
        plain_headers = format_proportion_table(TABLE).splitlines()[0].split()[1:]
        assert rich_headers == plain_headers

    def test_print(self):
        output = render(lambda c: print_proportion_table(TABLE, output=c, title="Results"))
        assert "Results" in output
        assert "0.34" in output
        assert "0.66" in output

    def test_print_decimals(self):
        output = render(lambda c: print_proportion_table(TABLE, decimals=3, output=c))
        assert "0.340" in output

    def test_plain_text(self):
        text = format_proportion_table(TABLE)
        lines = text.splitlines()
        assert lines[0].split() == ["strategy", "LOSE", "WIN"]
        assert lines[1].split() == ["stay", "0.66", "0.34"]
        assert lines[2].split() == ["switch", "0.34", "0.66"]

    def test_plain_text_missing_row(self):
        text = format_proportion_table({Strategy.STAY: TABLE[Strategy.STAY]}, decimals=1)
        assert text.splitlines()[2].split() == ["switch", "0.0", "0.0"]


class TestGameResult:
    """Tests for single game rendering."""

    def test_print_game_result(self):
        result = GameResult(
            assignment=GameAssignment.with_reward_at(2),
            initial_pick=1,
            revealed_door=3,
            final_picks={Strategy.STAY: 1, Strategy.SWITCH: 2},
            outcomes={Strategy.STAY: Outcome.LOSE, Strategy.SWITCH: Outcome.WIN},
        )
        output = render(lambda c: print_game_result(result, output=c))

        assert "picked" in output
        assert "opened" in output
        assert "reward" in output
        assert "WIN" in output
        assert "LOSE" in output
