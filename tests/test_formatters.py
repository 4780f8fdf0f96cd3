"""Tests for the formatters package."""

import csv
import io
import re
from pathlib import Path

import pytest

from dstat.formatters import (
    BlockFormatter,
    CsvFormatter,
    LinearFormatter,
    PluralRule,
    get_formatter,
    pluralize,
)
from dstat.formatters.block_formatter import BLOCK_LINES
from dstat.formatters.linear_formatter import border, data_row, header_row
from dstat.tally import EntryType, TypeTally

PATHS = [Path("/srv/data"), Path("/var/tmp")]


class TestPluralize:
    @pytest.mark.parametrize("count,suffix", [(0, "s"), (1, ""), (2, "s"), (17, "s")])
    def test_add_s(self, count, suffix):
        assert pluralize(count, PluralRule.ADD_S) == suffix

    @pytest.mark.parametrize("count,suffix", [(0, "ies"), (1, "y"), (2, "ies"), (3, "ies")])
    def test_y_to_ies(self, count, suffix):
        assert pluralize(count, PluralRule.Y_TO_IES) == suffix


class TestGetFormatter:
    def test_known_formatters(self):
        assert isinstance(get_formatter("block"), BlockFormatter)
        assert isinstance(get_formatter("linear"), LinearFormatter)
        assert isinstance(get_formatter("csv"), CsvFormatter)

    def test_unknown_formatter(self):
        with pytest.raises(ValueError, match="Unknown formatter"):
            get_formatter("xml")


class TestBlockFormatter:
    def test_empty_tally_is_all_plural(self):
        result = BlockFormatter().format([Path("/empty")], TypeTally())
        assert result == (
            "Directory:\n"
            "\t/empty\n"
            "\n"
            "Totals:\n"
            "       0:directories\n"
            "       0:FIFO files\n"
            "       0:character special files\n"
            "       0:block special files\n"
            "       0:regular files\n"
            "       0:symlinks\n"
            "       0:sockets\n"
            "       0:union whiteout files\n"
            "       0:unknown file types\n"
        )

    def test_single_counts_are_singular(self):
        tally = TypeTally(regular=1, directory=1)
        lines = BlockFormatter().format([Path("/x")], tally, quiet=True).splitlines()
        assert "       1:regular file" in lines
        assert "       1:directory" in lines
        assert "       0:sockets" in lines

    def test_every_label_singular_at_one(self):
        tally = TypeTally(**{t.value: 1 for t in EntryType})
        result = BlockFormatter().format([], tally, quiet=True)
        for _, stem, rule in BLOCK_LINES:
            assert f"       1:{stem}{'y' if rule is PluralRule.Y_TO_IES else ''}\n" in result

    def test_plural_directory_heading(self):
        result = BlockFormatter().format(PATHS, TypeTally())
        assert result.startswith("Directories:\n\t/srv/data\n\t/var/tmp\n\nTotals:\n")

    def test_quiet_omits_header(self):
        result = BlockFormatter().format(PATHS, TypeTally(), quiet=True)
        assert "Totals" not in result
        assert "/srv/data" not in result
        assert len(result.splitlines()) == 9

    def test_counts_right_aligned_eight_wide(self):
        tally = TypeTally(regular=12345678)
        result = BlockFormatter().format([], tally, quiet=True)
        assert "12345678:regular files\n" in result


class TestLinearFormatter:
    def test_border_matches_row_width(self, sample_tally):
        assert len(border().rstrip("\n")) == len(data_row(sample_tally))
        assert len(header_row().rstrip("\n")) == len(data_row(sample_tally))

    def test_border_has_one_segment_per_category(self):
        assert border() == "+---------" * 9 + "+\n"

    def test_header_row(self):
        assert header_row() == (
            "| Regular |     Dir |    Link |   Block |    Char |"
            "    FIFO |  Socket |  WhtOut | Unknown |\n"
        )

    def test_full_table(self, sample_tally):
        result = LinearFormatter().format(PATHS, sample_tally)
        lines = result.splitlines()
        assert lines[:3] == ["Directories:", "\t/srv/data", "\t/var/tmp"]
        assert lines[3] == lines[5] == lines[7] == border().rstrip("\n")
        assert lines[6] == (
            "|      12 |       1 |       3 |       0 |       2 |"
            "       1 |       5 |       0 |       7 |"
        )

    def test_quiet_is_data_row_only(self, sample_tally):
        result = LinearFormatter().format(PATHS, sample_tally, quiet=True)
        assert result == data_row(sample_tally) + "\n"


class TestCsvFormatter:
    def test_header_and_rows(self, sample_tally):
        result = CsvFormatter().format(PATHS, sample_tally)
        assert result == (
            "Directories\n"
            "/srv/data\n"
            "/var/tmp\n"
            "Regular,Directory,Link,Block Special,Character Special,FIFO,Socket,White Out,Unknown\n"
            "12,1,3,0,2,1,5,0,7\n"
        )

    def test_single_directory_heading(self):
        result = CsvFormatter().format([Path("/one")], TypeTally())
        assert result.startswith("Directory\n/one\n")

    def test_quiet_emits_only_counts(self, sample_tally):
        assert CsvFormatter().format(PATHS, sample_tally, quiet=True) == "12,1,3,0,2,1,5,0,7\n"

    def test_no_trailing_comma(self, sample_tally):
        for line in CsvFormatter().format(PATHS, sample_tally).splitlines():
            assert not line.endswith(",")

    def test_path_with_comma_is_quoted(self):
        result = CsvFormatter().format([Path("/data/a,b")], TypeTally())
        assert '"/data/a,b"' in result
        rows = list(csv.reader(io.StringIO(result)))
        assert rows[1] == ["/data/a,b"]


class TestCrossFormatConsistency:
    def test_csv_counts_match_block(self, sample_tally):
        csv_counts = CsvFormatter().format(PATHS, sample_tally).splitlines()
        header = csv_counts[-2].split(",")
        values = [int(v) for v in csv_counts[-1].split(",")]
        by_csv_name = dict(zip(header, values))

        block = BlockFormatter().format(PATHS, sample_tally, quiet=True)
        by_stem = {}
        for line in block.splitlines():
            count, label = line.split(":", 1)
            by_stem[label] = int(count)

        assert by_csv_name["Regular"] == by_stem["regular files"]
        assert by_csv_name["Directory"] == by_stem["directory"]
        assert by_csv_name["Link"] == by_stem["symlinks"]
        assert by_csv_name["Block Special"] == by_stem["block special files"]
        assert by_csv_name["Character Special"] == by_stem["character special files"]
        assert by_csv_name["FIFO"] == by_stem["FIFO file"]
        assert by_csv_name["Socket"] == by_stem["sockets"]
        assert by_csv_name["White Out"] == by_stem["union whiteout files"]
        assert by_csv_name["Unknown"] == by_stem["unknown file types"]

    def test_linear_counts_match_csv(self, sample_tally):
        row = LinearFormatter().format(PATHS, sample_tally, quiet=True)
        linear_values = [int(v) for v in re.findall(r"\d+", row)]
        csv_values = [int(v) for v in CsvFormatter().format(PATHS, sample_tally, quiet=True).split(",")]
        assert linear_values == csv_values
