"""Shared test fixtures for the explorer core."""

import pytest

from artic_api import Artwork, ArtworkPage
from page_view import PageViewController
from selection_ledger import SelectionLedger


def make_artworks(*ids):
    """Artworks with the given ids, in the given order."""
    return [Artwork(id=i, title=f"Artwork {i}") for i in ids]


@pytest.fixture
def arts():
    """Factory fixture: arts(1, 2, 3) -> artworks with those ids."""
    return make_artworks


@pytest.fixture
def ledger():
    return SelectionLedger()


@pytest.fixture
def controller(ledger):
    """Controller with page size 3 over an empty ledger."""
    return PageViewController(ledger, page_size=3)


@pytest.fixture
def paged_source():
    """Fetcher over ids 1..8 in pages of `page_size`, recording requested pages."""
    all_items = make_artworks(*range(1, 9))
    calls = []

    def fetch(page, page_size):
        calls.append((page, page_size))
        start = (page - 1) * page_size
        total = len(all_items)
        return ArtworkPage(
            items=all_items[start:start + page_size],
            total=total,
            current_page=page,
            total_pages=-(-total // page_size),
        )

    fetch.calls = calls
    return fetch


class FakeResponse:
    """Minimal stand-in for requests.Response."""

    def __init__(self, payload=None, status_code=200, text="", json_error=False):
        self._payload = payload
        self.status_code = status_code
        self.text = text
        self._json_error = json_error

    @property
    def ok(self):
        return 200 <= self.status_code < 400

    def json(self):
        if self._json_error:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._payload


class FakeSession:
    """Records GET calls and returns a canned response (or raises)."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.headers = {}

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response
