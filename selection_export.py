"""Export helpers for the current selection (CSV / JSON downloads)."""

from __future__ import annotations

import csv
import io
import json
from typing import List, Tuple

from selection_ledger import SelectionLedger


def selection_rows(ledger: SelectionLedger) -> List[Tuple[int, str]]:
    """(id, source) rows in selection order; source is "auto" or "explicit"."""
    return [
        (art_id, "auto" if ledger.is_auto(art_id) else "explicit")
        for art_id in ledger.selected_ids()
    ]


def build_selection_csv(ledger: SelectionLedger) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(["id", "source"])
    writer.writerows(selection_rows(ledger))
    return buffer.getvalue()


def build_selection_json(ledger: SelectionLedger) -> str:
    return json.dumps(ledger.snapshot(), ensure_ascii=False, indent=2)
