"""
selection_ledger.py — global selection record across pages.

The ledger remembers selection decisions by artwork id, independently of
which page is currently loaded:

- selected:      ids considered selected, globally
- deselected:    ids the user explicitly removed (auto-fill never takes them back)
- auto_selected: subset of `selected` claimed by the "select N" auto-fill
- target_count:  last bulk-selection goal (0 = no active target)

Sets are kept as insertion-ordered dicts, so every listing (and the order
in which auto-selected ids are released when shrinking) is the order in
which ids entered the set.
"""

from __future__ import annotations

from typing import Any, Dict, List


class SelectionLedger:
    """Per-session selection state. One instance is owned by the page view."""

    def __init__(self) -> None:
        self._selected: Dict[int, None] = {}
        self._deselected: Dict[int, None] = {}
        self._auto_selected: Dict[int, None] = {}
        self.target_count: int = 0

    # ============================================================
    # Explicit user decisions
    # ============================================================
    def record_explicit_select(self, art_id: int) -> None:
        """Mark `art_id` as selected by the user. Idempotent."""
        self._selected.setdefault(art_id, None)
        self._deselected.pop(art_id, None)
        self._auto_selected.pop(art_id, None)

    def record_explicit_deselect(self, art_id: int) -> None:
        """Mark `art_id` as removed by the user. Idempotent."""
        self._selected.pop(art_id, None)
        self._auto_selected.pop(art_id, None)
        self._deselected.setdefault(art_id, None)

    def clear_all(self) -> None:
        """Forget every decision and drop the active target."""
        self._selected.clear()
        self._deselected.clear()
        self._auto_selected.clear()
        self.target_count = 0

    # ============================================================
    # Auto-fill primitives (used by auto_selection)
    # ============================================================
    def record_auto_select(self, art_id: int) -> bool:
        """
        Claim `art_id` for the auto-fill.

        Returns False (and changes nothing) when the id is already selected
        or was explicitly deselected.
        """
        if art_id in self._selected or art_id in self._deselected:
            return False
        self._selected[art_id] = None
        self._auto_selected[art_id] = None
        return True

    def release_auto(self, art_id: int) -> bool:
        """Drop an auto-selected id from the selection. Explicit ids are kept."""
        if art_id not in self._auto_selected:
            return False
        del self._auto_selected[art_id]
        self._selected.pop(art_id, None)
        return True

    # ============================================================
    # Read helpers
    # ============================================================
    def size(self) -> int:
        return len(self._selected)

    def __len__(self) -> int:
        return len(self._selected)

    def __contains__(self, art_id: object) -> bool:
        return art_id in self._selected

    def is_selected(self, art_id: int) -> bool:
        return art_id in self._selected

    def is_deselected(self, art_id: int) -> bool:
        return art_id in self._deselected

    def is_auto(self, art_id: int) -> bool:
        return art_id in self._auto_selected

    def selected_ids(self) -> List[int]:
        return list(self._selected)

    def deselected_ids(self) -> List[int]:
        return list(self._deselected)

    def auto_ids(self) -> List[int]:
        return list(self._auto_selected)

    def explicit_ids(self) -> List[int]:
        """Selected ids that came from a user action."""
        return [i for i in self._selected if i not in self._auto_selected]

    def snapshot(self) -> Dict[str, Any]:
        """Plain-data copy of the ledger (for exports and debugging)."""
        return {
            "selected": self.selected_ids(),
            "deselected": self.deselected_ids(),
            "auto_selected": self.auto_ids(),
            "target_count": self.target_count,
        }

    def __repr__(self) -> str:
        return (
            f"SelectionLedger(selected={len(self._selected)}, "
            f"auto={len(self._auto_selected)}, "
            f"deselected={len(self._deselected)}, "
            f"target={self.target_count})"
        )
