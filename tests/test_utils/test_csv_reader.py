"""Tests for CSV and inline issue input."""

import pytest

from issue_poster.bitbucket_client.models import IssueEntry, IssueKind
from issue_poster.utils.csv_reader import (
    IssueFileError,
    entries_from_titles,
    read_csv_entries,
    split_titles,
)


class TestReadCsvEntries:
    """Test reading entries from CSV files."""

    def test_full_row(self, write_csv) -> None:
        """Test a row with every recognized column."""
        path = write_csv(
            "Title,Content,Responsible,Kind\nFix bug,Details here,alice,Bug\n"
        )

        assert read_csv_entries(path) == [
            IssueEntry(
                title="Fix bug",
                content="Details here",
                responsible="alice",
                kind=IssueKind.BUG,
            )
        ]

    def test_row_order_preserved(self, write_csv) -> None:
        """Test entries come back in file order."""
        path = write_csv("Title\nfirst\nsecond\nthird\n")

        assert [e.title for e in read_csv_entries(path)] == [
            "first",
            "second",
            "third",
        ]

    def test_headers_case_insensitive_any_order(self, write_csv) -> None:
        """Test column matching ignores case, order and padding."""
        path = write_csv("KIND, title ,content\ntask,Write docs,See wiki\n")

        entry = read_csv_entries(path)[0]
        assert entry.title == "Write docs"
        assert entry.content == "See wiki"
        assert entry.kind is IssueKind.TASK
        assert entry.responsible is None

    def test_unknown_columns_ignored(self, write_csv) -> None:
        """Test extra columns do not affect the entry."""
        path = write_csv("Title,Priority,Milestone\nA,major,v1\n")

        assert read_csv_entries(path) == [IssueEntry(title="A")]

    def test_duplicate_column_first_wins(self, write_csv) -> None:
        """Test the first of two same-named columns is used."""
        path = write_csv("Title,title,Kind,KIND\nfirst,second,Bug,Task\n")

        entry = read_csv_entries(path)[0]
        assert entry.title == "first"
        assert entry.kind is IssueKind.BUG

    def test_short_row(self, write_csv) -> None:
        """Test a row with fewer cells than the header."""
        path = write_csv("Title,Content,Kind\nA\n")

        assert read_csv_entries(path) == [IssueEntry(title="A")]

    def test_empty_cells_are_absent(self, write_csv) -> None:
        """Test empty cells leave fields unset."""
        path = write_csv("Title,Content,Responsible,Kind\nA,,,\n")

        entry = read_csv_entries(path)[0]
        assert entry.to_form() == {"title": "A"}

    def test_quoted_values(self, write_csv) -> None:
        """Test quoted cells with commas and newlines."""
        path = write_csv('Title,Content\n"Crash, on save","line one\nline two"\n')

        entry = read_csv_entries(path)[0]
        assert entry.title == "Crash, on save"
        assert entry.content == "line one\nline two"

    def test_byte_order_mark(self, tmp_path) -> None:
        """Test files saved with a UTF-8 BOM."""
        path = tmp_path / "bom.csv"
        path.write_bytes(b"\xef\xbb\xbfTitle,Kind\nA,Proposal\n")

        assert read_csv_entries(path)[0].kind is IssueKind.PROPOSAL

    def test_header_only(self, write_csv) -> None:
        """Test a file without data rows yields nothing."""
        assert read_csv_entries(write_csv("Title,Content\n")) == []

    def test_empty_file(self, write_csv) -> None:
        """Test an empty file yields nothing."""
        assert read_csv_entries(write_csv("")) == []

    def test_missing_file(self, tmp_path) -> None:
        """Test a missing file raises IssueFileError."""
        with pytest.raises(IssueFileError, match="not found"):
            read_csv_entries(tmp_path / "nope.csv")

    def test_missing_title_column(self, write_csv) -> None:
        """Test a header without Title is rejected."""
        path = write_csv("Content,Kind\nsomething,Bug\n")

        with pytest.raises(IssueFileError, match="no Title column"):
            read_csv_entries(path)

    def test_empty_title_rejected(self, write_csv) -> None:
        """Test a row with a blank title is rejected with its line."""
        path = write_csv("Title,Content\nA,ok\n,orphan content\n")

        with pytest.raises(IssueFileError, match="line 3"):
            read_csv_entries(path)

    def test_unknown_kind_rejected(self, write_csv) -> None:
        """Test a kind outside the enumeration is rejected."""
        path = write_csv("Title,Kind\nA,Feature\n")

        with pytest.raises(IssueFileError, match="kind"):
            read_csv_entries(path)


class TestInlineTitles:
    """Test inline title handling."""

    def test_split_titles(self) -> None:
        """Test comma splitting across repeated values."""
        assert split_titles(["A,B", " C , ,D"]) == ["A", "B", "C", "D"]

    def test_split_empty(self) -> None:
        """Test blank values produce no titles."""
        assert split_titles([""]) == []

    def test_entries_from_titles(self) -> None:
        """Test titles become bare entries in order."""
        entries = entries_from_titles(["A", "B", "C"])

        assert [e.title for e in entries] == ["A", "B", "C"]
        assert all(e.to_form() == {"title": e.title} for e in entries)
