"""Tests for the level table."""

from wordgrid.game import LevelTable, parse_level_rows


class TestParsing:
    """Test cases for CSV parsing."""

    def test_header_skipped(self):
        rows = parse_level_rows("level,goal,time_limit_sec\n1,10,120\n")
        assert len(rows) == 1
        assert rows[0].level == 1
        assert rows[0].goal == 10
        assert rows[0].time_limit_sec == 120

    def test_malformed_rows_dropped(self):
        """Non-numeric or short rows are filtered out."""
        text = "level,goal,time_limit_sec\n1,10,120\n2,abc,100\n\nfoo,1,2\n4\n3,30,\n"
        rows = parse_level_rows(text)
        assert [r.level for r in rows] == [1, 3]
        assert rows[1].time_limit_sec == 0

    def test_whitespace_tolerated(self):
        rows = parse_level_rows("level,goal,time_limit_sec\n 2 , 15 , 90 \r\n")
        assert rows[0].level == 2
        assert rows[0].goal == 15

    def test_empty_text(self):
        assert parse_level_rows("") == []


class TestLevelTable:
    """Test cases for level lookup."""

    def test_lookup(self):
        table = LevelTable.from_csv_text("level,goal,time_limit_sec\n1,10,120\n2,20,100\n")
        assert table.lookup(2).goal == 20
        assert len(table) == 2
        assert table.last_level == 2

    def test_missing_level(self):
        """A missing level means the campaign is over."""
        table = LevelTable.from_csv_text("level,goal,time_limit_sec\n1,10,120\n")
        assert table.lookup(2) is None
        assert table.lookup(0) is None

    def test_duplicate_levels_first_wins(self):
        table = LevelTable.from_csv_text("level,goal,time_limit_sec\n1,10,0\n1,99,0\n")
        assert table.lookup(1).goal == 10

    def test_from_file(self, tmp_path):
        path = tmp_path / "levels.csv"
        path.write_text("level,goal,time_limit_sec\n7,70,60\n")
        assert LevelTable.from_file(path).lookup(7).goal == 70

    def test_packaged_table(self):
        """The packaged table starts at level one."""
        table = LevelTable.from_file()
        assert table.lookup(1) is not None
        assert table.last_level >= 1
