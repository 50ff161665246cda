"""
artic_api.py — Art Institute of Chicago API adapter (page data source)

Provides the page-level interface used by the selection browser:

- fetch_artworks_page(page, page_size) -> ArtworkPage
- Artwork.from_api(dict) -> Artwork
- Artwork display helpers (title / artist / origin / date range)

Data source:
- Artworks listing: https://api.artic.edu/api/v1/artworks

Notes:
- No API key is needed.
- Pagination is remote: one request per page, nothing else is kept.
- Failures are raised as FetchError so the caller can keep its current page.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import requests


# ============================================================
# Constants
# ============================================================

API_BASE_URL = "https://api.artic.edu/api/v1"
ARTWORKS_URL = f"{API_BASE_URL}/artworks"

ARTWORK_FIELDS = "id,title,place_of_origin,artist_display,inscriptions,date_start,date_end"

REQUEST_TIMEOUT = 20

# The listing endpoint refuses limits above this value
MAX_PAGE_SIZE = 100


# ============================================================
# Errors
# ============================================================

class FetchError(RuntimeError):
    """Raised when a page cannot be fetched or the payload is unusable."""


# ============================================================
# Data model
# ============================================================

@dataclass(frozen=True)
class Artwork:
    id: int
    title: Optional[str] = None
    place_of_origin: Optional[str] = None
    artist_display: Optional[str] = None
    inscriptions: Optional[str] = None
    date_start: Optional[int] = None
    date_end: Optional[int] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "Artwork":
        """
        Build an Artwork from one `data[]` entry of the listing endpoint.

        Raises ValueError when the entry has no integer id.
        """
        raw_id = item.get("id")
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise ValueError(f"artwork without integer id: {raw_id!r}")

        return cls(
            id=raw_id,
            title=_opt_str(item.get("title")),
            place_of_origin=_opt_str(item.get("place_of_origin")),
            artist_display=_opt_str(item.get("artist_display")),
            inscriptions=_opt_str(item.get("inscriptions")),
            date_start=_opt_int(item.get("date_start")),
            date_end=_opt_int(item.get("date_end")),
        )

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"

    @property
    def display_artist(self) -> str:
        return self.artist_display or "Unknown Artist"

    @property
    def display_origin(self) -> str:
        return self.place_of_origin or "Unknown"

    @property
    def display_date(self) -> str:
        """Date range as shown in the table ("1890 - 1895", "1890" or "Unknown")."""
        if self.date_start and self.date_end:
            return f"{self.date_start} - {self.date_end}"
        if self.date_start:
            return f"{self.date_start}"
        return "Unknown"

    def to_row(self) -> Dict[str, Any]:
        """Row dict used by the table view."""
        return {
            "Code": self.id,
            "Name": self.display_title,
            "Artist": self.display_artist,
            "Origin": self.display_origin,
            "Date": self.display_date,
            "Inscriptions": self.inscriptions or "",
        }


@dataclass
class ArtworkPage:
    items: List[Artwork] = field(default_factory=list)
    total: int = 0
    current_page: int = 1
    total_pages: int = 0


def _opt_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _opt_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


# ============================================================
# HTTP session
# ============================================================

def _get_session() -> requests.Session:
    """Configured HTTP session."""
    s = requests.Session()
    s.headers.update({
        "User-Agent": "ArticExplorer/1.0",
        # Requested by the API usage policy
        "AIC-User-Agent": "ArticExplorer/1.0",
    })
    return s


# ============================================================
# Payload mapping
# ============================================================

def _parse_page_payload(data: Any, page: int, page_size: int) -> ArtworkPage:
    """Map the listing JSON into an ArtworkPage (rows keep API order)."""
    if not isinstance(data, dict):
        raise FetchError("Artworks API returned an unexpected payload (not an object).")

    rows = data.get("data")
    pagination = data.get("pagination")
    if not isinstance(rows, list) or not isinstance(pagination, dict):
        raise FetchError("Artworks API payload is missing `data` or `pagination`.")

    items: List[Artwork] = []
    seen: set[int] = set()
    for row in rows:
        if not isinstance(row, dict):
            continue
        try:
            art = Artwork.from_api(row)
        except ValueError as exc:
            print(f"[artic_api] Warning: skipping row on page {page}: {exc}")
            continue
        if art.id in seen:
            continue
        seen.add(art.id)
        items.append(art)

    total = _opt_int(pagination.get("total"))
    total = max(total, 0) if total is not None else len(items)

    current = _opt_int(pagination.get("current_page")) or page

    total_pages = _opt_int(pagination.get("total_pages"))
    if total_pages is None:
        total_pages = -(-total // page_size) if page_size else 0

    return ArtworkPage(items=items, total=total, current_page=current, total_pages=total_pages)


# ============================================================
# Public API used by the page view
# ============================================================

def fetch_artworks_page(
    page: int = 1,
    page_size: int = 12,
    session: Optional[requests.Session] = None,
) -> ArtworkPage:
    """
    Fetch one page of artworks.

    `page` is 1-based. `page_size` is clamped to [1, MAX_PAGE_SIZE].
    Raises FetchError on network failures, non-2xx responses and bad payloads.
    """
    page = max(int(page), 1)
    page_size = min(max(int(page_size), 1), MAX_PAGE_SIZE)

    session = session or _get_session()
    params = {"page": page, "limit": page_size, "fields": ARTWORK_FIELDS}

    try:
        resp = session.get(ARTWORKS_URL, params=params, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as exc:
        raise FetchError(f"Artworks API request failed for page {page}: {exc}") from exc

    if not resp.ok:
        raise FetchError(f"Artworks API error ({resp.status_code}) for page {page}: {resp.text[:200]}")

    try:
        data = resp.json()
    except ValueError as exc:
        raise FetchError(f"Artworks API returned non-JSON for page {page}: {resp.text[:200]}") from exc

    return _parse_page_payload(data, page, page_size)
