"""Tests for tick2paper/rows.py — CSV row source."""

import csv
from unittest.mock import patch

from tick2paper.models import FIELD_NAMES
from tick2paper.rows import parse_rows


def test_rows_keyed_by_field_names():
    rows, error = parse_rows('"Work","Admin","Pay rent"\n')
    assert error is None
    assert len(rows) == 1
    assert list(rows[0]) == list(FIELD_NAMES)
    assert rows[0]["folderName"] == "Work"
    assert rows[0]["title"] == "Pay rent"
    assert rows[0]["viewMode"] == ""


def test_blank_lines_skipped():
    rows, _ = parse_rows("a,b\n\nc,d\n")
    assert len(rows) == 2


def test_surplus_cells_dropped():
    rows, _ = parse_rows(",".join(str(i) for i in range(25)), fieldnames=("x", "y"))
    assert rows == [{"x": "0", "y": "1"}]


def test_multiline_quoted_cell():
    rows, _ = parse_rows('"Work","Admin","Task","","line one\nline two"\n')
    assert rows[0]["content"] == "line one\nline two"


def test_backup_preamble_is_data(backup_text):
    rows, error = parse_rows(backup_text)
    assert error is None
    # Date, Version, Status, header, 4 tasks
    assert len(rows) == 8
    assert rows[3]["folderName"] == "Folder Name"


def test_oversized_field_is_parsed():
    note = "x" * 200_000
    rows, error = parse_rows(f'"Work","Admin","Task","","{note}"\n')
    assert error is None
    assert rows[0]["content"] == note


def test_csv_error_keeps_rows_read_so_far():
    def broken_reader(_):
        yield ["Work", "Admin", "First"]
        raise csv.Error("unexpected end of data")

    with patch("tick2paper.rows.csv.reader", side_effect=broken_reader):
        rows, error = parse_rows("ignored")
    assert error == "unexpected end of data"
    assert [r["title"] for r in rows] == ["First"]
