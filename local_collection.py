# local_collection.py

"""
Offline page source for the explorer.

Instead of calling the Art Institute API, this module loads a local
collection of artworks from a JSON file and paginates it, returning the
same ArtworkPage shape as artic_api.fetch_artworks_page.

Expected format of data/collection_sample.json:

[
  {
    "id": 27992,
    "title": "A Sunday on La Grande Jatte, 1884",
    "place_of_origin": "France",
    "artist_display": "Georges Seurat\nFrench, 1859-1891",
    "inscriptions": null,
    "date_start": 1884,
    "date_end": 1886
  },
  ...
]

A dict keyed by id is accepted too (its values are used, in file order).
"""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import List

from app_paths import COLLECTION_SAMPLE_FILE
from artic_api import Artwork, ArtworkPage


@lru_cache(maxsize=4)
def load_collection(path_str: str = str(COLLECTION_SAMPLE_FILE)) -> List[Artwork]:
    """
    Load the local collection from a JSON file.

    Rows without an integer id are dropped, duplicate ids keep the first row.
    If the file does not exist or is invalid, returns an empty list.
    """
    path = Path(path_str)
    try:
        if not path.exists():
            return []

        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        # Never break the app because of the local sample
        return []

    if isinstance(data, dict):
        rows = list(data.values())
    elif isinstance(data, list):
        rows = data
    else:
        return []

    items: List[Artwork] = []
    seen: set[int] = set()
    for row in rows:
        if not isinstance(row, dict):
            continue
        try:
            art = Artwork.from_api(row)
        except ValueError:
            continue
        if art.id in seen:
            continue
        seen.add(art.id)
        items.append(art)
    return items


def fetch_local_page(
    page: int = 1,
    page_size: int = 12,
    path_str: str = str(COLLECTION_SAMPLE_FILE),
) -> ArtworkPage:
    """
    Return one 1-based page of the local collection.

    Out-of-range pages yield an empty item list with the real total.
    """
    all_items = load_collection(path_str)

    if page < 1:
        page = 1
    if page_size <= 0:
        page_size = 12

    total = len(all_items)
    start = (page - 1) * page_size
    end = start + page_size

    return ArtworkPage(
        items=all_items[start:end],
        total=total,
        current_page=page,
        total_pages=-(-total // page_size),
    )
