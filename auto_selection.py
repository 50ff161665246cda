"""
auto_selection.py — "select the first N artworks" across pages.

The user asks for a total count; the engine fills the remaining slots from
each page as it is loaded, greedily and in display order, and gives back
auto-selected ids (oldest first) when the goal is lowered.
"""

from __future__ import annotations

import re
from typing import Any, List, Sequence

from artic_api import Artwork
from selection_ledger import SelectionLedger


class InvalidTargetInput(ValueError):
    """Raised when a target count is not a positive integer."""


_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_target_count(raw: Any) -> int:
    """
    Parse a user-entered target count.

    Accepts ints and strings; surrounding whitespace is ignored and a leading
    integer prefix is enough ("20 rows" -> 20). Anything that is not a
    positive integer raises InvalidTargetInput.
    """
    if isinstance(raw, bool):
        raise InvalidTargetInput(f"not a count: {raw!r}")

    if isinstance(raw, int):
        n = raw
    elif isinstance(raw, float):
        if not raw.is_integer():
            raise InvalidTargetInput(f"not a whole number: {raw!r}")
        n = int(raw)
    elif isinstance(raw, str):
        m = _LEADING_INT.match(raw.strip())
        if not m:
            raise InvalidTargetInput(f"not a number: {raw!r}")
        try:
            n = int(m.group(0))
        except ValueError as exc:
            # int() refuses digit strings past sys.get_int_max_str_digits()
            raise InvalidTargetInput(f"number too long: {len(m.group(0))} digits") from exc
    else:
        raise InvalidTargetInput(f"unsupported input: {raw!r}")

    if n <= 0:
        raise InvalidTargetInput(f"count must be positive, got {n}")
    return n


def fill_target(ledger: SelectionLedger, page_items: Sequence[Artwork]) -> List[int]:
    """
    Auto-select artworks of this page until the target is reached.

    Returns the ids claimed on this call (in page order).
    """
    target = ledger.target_count
    if target <= 0 or ledger.size() >= target:
        return []

    claimed: List[int] = []
    for art in page_items:
        if ledger.size() >= target:
            break
        if ledger.record_auto_select(art.id):
            claimed.append(art.id)
    return claimed


def shrink_to_target(ledger: SelectionLedger) -> List[int]:
    """
    Release auto-selected ids (oldest first) while the ledger is over target.

    Explicit selections are never released; if the auto pool runs out first
    the ledger stays over target.
    """
    target = ledger.target_count
    released: List[int] = []
    if target <= 0:
        return released

    for art_id in ledger.auto_ids():
        if ledger.size() <= target:
            break
        if ledger.release_auto(art_id):
            released.append(art_id)
    return released


def set_target(ledger: SelectionLedger, n: Any, current_items: Sequence[Artwork] = ()) -> bool:
    """
    Set a new total goal, shrink if needed, then top up from the current page.

    Returns False without touching the ledger when `n` is not a positive int.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        return False

    ledger.target_count = n
    shrink_to_target(ledger)
    fill_target(ledger, current_items)
    return True
