"""Tests for CSV / JSON exports of the selection."""

import csv
import io
import json

from selection_export import build_selection_csv, build_selection_json, selection_rows


def test_rows_mark_auto_and_explicit(ledger):
    ledger.record_auto_select(3)
    ledger.record_explicit_select(1)
    ledger.record_explicit_deselect(2)
    assert selection_rows(ledger) == [(3, "auto"), (1, "explicit")]


def test_csv(ledger):
    ledger.record_auto_select(3)
    ledger.record_explicit_select(1)

    rows = list(csv.reader(io.StringIO(build_selection_csv(ledger))))

    assert rows == [["id", "source"], ["3", "auto"], ["1", "explicit"]]


def test_csv_empty_has_header(ledger):
    assert build_selection_csv(ledger).splitlines() == ["id,source"]


def test_json_matches_snapshot(ledger):
    ledger.target_count = 4
    ledger.record_auto_select(8)
    ledger.record_explicit_deselect(9)
    assert json.loads(build_selection_json(ledger)) == {
        "selected": [8],
        "deselected": [9],
        "auto_selected": [8],
        "target_count": 4,
    }
