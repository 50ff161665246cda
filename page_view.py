"""
page_view.py — bridge between the selection ledger and the loaded page.

The controller keeps the one page that is currently materialized, derives
which of its rows are shown as selected, and turns edits made on that page
into ledger decisions. It never talks to Streamlit, so it can be driven
directly from tests.

Page loads are serialized with a token: starting a load supersedes any
load still in flight, and only the latest one may apply its result.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional, Sequence

from artic_api import Artwork, ArtworkPage, FetchError
from auto_selection import InvalidTargetInput, fill_target, parse_target_count, shrink_to_target
from auto_selection import set_target as apply_target
from selection_ledger import SelectionLedger


ROWS_PER_PAGE = 12

PageFetcher = Callable[[int, int], ArtworkPage]


class PageViewController:
    """Current page + its rendered selection, backed by a SelectionLedger."""

    def __init__(self, ledger: Optional[SelectionLedger] = None, page_size: int = ROWS_PER_PAGE) -> None:
        self.ledger = ledger if ledger is not None else SelectionLedger()
        self.page_size = page_size

        self._items: List[Artwork] = []
        self._rendered: List[Artwork] = []

        self.current_page = 1
        self.total_records = 0
        self.total_pages = 0

        self.loading = False
        self.last_error: Optional[FetchError] = None

        # Bumped whenever the rendered rows change outside of a table edit
        self.revision = 0

        self._load_token = 0
        self._pending_page: Optional[int] = None

    # ============================================================
    # Read surface
    # ============================================================
    @property
    def items(self) -> List[Artwork]:
        return list(self._items)

    @property
    def rendered_selection(self) -> List[Artwork]:
        return list(self._rendered)

    @property
    def rendered_selection_ids(self) -> List[int]:
        return [a.id for a in self._rendered]

    @property
    def total_selected(self) -> int:
        return self.ledger.size()

    @property
    def target_count(self) -> int:
        return self.ledger.target_count

    @property
    def load_token(self) -> int:
        return self._load_token

    @property
    def page_count(self) -> int:
        if self.total_pages:
            return self.total_pages
        if self.page_size <= 0:
            return 0
        return -(-self.total_records // self.page_size)

    # ============================================================
    # Page loading
    # ============================================================
    def begin_load(self, page: int) -> int:
        """Start loading `page`; returns the token the result must carry."""
        self._load_token += 1
        self._pending_page = page
        self.loading = True
        return self._load_token

    def complete_load(self, token: int, result: ArtworkPage) -> bool:
        """Apply a fetched page. Stale tokens are ignored (returns False)."""
        if token != self._load_token:
            return False

        page = self._pending_page or result.current_page
        self._pending_page = None
        self.loading = False
        self.last_error = None
        self.total_pages = result.total_pages
        self.on_page_loaded(result.items, total=result.total, page=page)
        return True

    def fail_load(self, token: int, error: FetchError) -> bool:
        """Record a failed fetch; page and ledger stay as they were."""
        if token != self._load_token:
            return False

        self._pending_page = None
        self.loading = False
        self.last_error = error
        return True

    def load_page(self, page: int, fetch_page: PageFetcher) -> ArtworkPage:
        """
        Fetch and apply `page` synchronously.

        FetchError is re-raised after being recorded in `last_error`.
        """
        token = self.begin_load(page)
        try:
            result = fetch_page(page, self.page_size)
        except FetchError as exc:
            self.fail_load(token, exc)
            raise
        except Exception:
            # Unexpected fetcher bug: settle the token so paging stays usable
            if token == self._load_token:
                self._pending_page = None
                self.loading = False
            raise
        self.complete_load(token, result)
        return result

    def on_page_loaded(
        self,
        items: Sequence[Artwork],
        total: Optional[int] = None,
        page: Optional[int] = None,
    ) -> None:
        """Replace the current page, auto-fill toward the target, re-derive the view."""
        self._items = list(items)
        if total is not None:
            self.total_records = total
        if page is not None:
            self.current_page = page

        fill_target(self.ledger, self._items)
        self._refresh_rendered()
        self.revision += 1

    # ============================================================
    # User actions
    # ============================================================
    def on_user_selection_change(self, new_visible_ids: Iterable[int]) -> List[int]:
        """
        Reconcile the rows the user now sees as selected on this page.

        Only rows whose state actually flipped are recorded, so an
        auto-selected row that stays checked stays auto-selected. Returns the
        auto-selected ids released to get back under the target.
        """
        visible = set(new_visible_ids)

        for art in self._items:
            was_selected = self.ledger.is_selected(art.id)
            is_selected = art.id in visible

            if not was_selected and is_selected:
                self.ledger.record_explicit_select(art.id)
            elif was_selected and not is_selected:
                self.ledger.record_explicit_deselect(art.id)

        released: List[int] = []
        target = self.ledger.target_count
        if target > 0 and self.ledger.size() > target:
            released = shrink_to_target(self.ledger)

        self._refresh_rendered()

        page_ids = {a.id for a in self._items}
        if set(self.rendered_selection_ids) != visible & page_ids:
            self.revision += 1
        return released

    def select_all_on_page(self) -> List[int]:
        released = self.on_user_selection_change(a.id for a in self._items)
        self.revision += 1
        return released

    def deselect_all_on_page(self) -> List[int]:
        released = self.on_user_selection_change(())
        self.revision += 1
        return released

    def set_target(self, raw) -> bool:
        """
        Apply a "select N rows" request.

        Invalid input is ignored and returns False; nothing is mutated.
        """
        try:
            n = parse_target_count(raw)
        except InvalidTargetInput:
            return False

        apply_target(self.ledger, n, self._items)
        self._refresh_rendered()
        self.revision += 1
        return True

    def clear_all(self) -> None:
        self.ledger.clear_all()
        self._refresh_rendered()
        self.revision += 1

    # ============================================================
    # Internals
    # ============================================================
    def _refresh_rendered(self) -> None:
        self._rendered = [
            a for a in self._items
            if self.ledger.is_selected(a.id) and not self.ledger.is_deselected(a.id)
        ]

    def __repr__(self) -> str:
        return (
            f"PageViewController(page={self.current_page}, rows={len(self._items)}, "
            f"rendered={len(self._rendered)}, ledger={self.ledger!r})"
        )
