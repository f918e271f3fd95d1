"""
Tests for CSV export.
"""

import io

import pytest

from palindromic_fuel.exceptions import ExportError
from palindromic_fuel.export import HEADER, export_batch_csv, export_csv, result_row, write_rows
from palindromic_fuel.search import Result, ResultKind

HEADER_LINE = "Price per Unit (minor units),Volume,Cost (major units),Volume is Palindrome,Type"

RESULTS = [
    Result(25.0, "32.23", False, ResultKind.WHOLE),
    Result(38.83, "50.05", True, ResultKind.PALINDROMIC_DECIMAL),
]


def test_header():
    assert ",".join(HEADER) == HEADER_LINE


def test_result_row():
    assert result_row(RESULTS[0], 128.9) == ["128.9", "25", "32.23", "No", "whole"]
    assert result_row(RESULTS[1], 128.9) == ["128.9", "38.83", "50.05", "Yes", "palindromic_decimal"]


def test_write_rows():
    stream = io.StringIO()
    count = write_rows(stream, [(128.9, RESULTS)])

    assert count == 2
    assert stream.getvalue().splitlines() == [
        HEADER_LINE,
        "128.9,25,32.23,No,whole",
        "128.9,38.83,50.05,Yes,palindromic_decimal",
    ]


def test_export_csv(tmp_path):
    path = tmp_path / "results.csv"
    assert export_csv(path, RESULTS, 128.9) == 2

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == HEADER_LINE
    assert "128.9,25,32.23,No,whole" in lines
    assert "128.9,38.83,50.05,Yes,palindromic_decimal" in lines


def test_export_csv_empty(tmp_path):
    path = tmp_path / "empty.csv"
    assert export_csv(path, [], 128.9) == 0
    assert path.read_text(encoding="utf-8").splitlines() == [HEADER_LINE]


def test_export_batch_csv(tmp_path):
    batch_results = {
        128.9: [Result(25.0, "32.23", False, ResultKind.WHOLE)],
        135.7: [Result(18.0, "24.42", False, ResultKind.WHOLE)],
    }
    path = tmp_path / "batch.csv"
    assert export_batch_csv(path, batch_results, [135.7, 128.9]) == 2

    assert path.read_text(encoding="utf-8").splitlines() == [
        HEADER_LINE,
        "135.7,18,24.42,No,whole",
        "128.9,25,32.23,No,whole",
    ]


def test_export_csv_unwritable(tmp_path):
    with pytest.raises(ExportError):
        export_csv(tmp_path / "missing" / "results.csv", RESULTS, 128.9)
