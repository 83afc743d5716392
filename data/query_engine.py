"""
Query operations over the read-only catalog: lookup, search, randomized
pagination and random sampling. Every result is a copy; the catalog itself
is never reordered or modified.
"""

import logging
import random
import threading
from typing import Optional

from data.catalog_store import Catalog, VideoRecord

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


class CatalogQueryError(Exception):
    """Base class for request-time catalog errors."""


class VideoNotFound(CatalogQueryError):
    def __init__(self, video_id: str):
        super().__init__(f"Video not found: {video_id!r}")
        self.video_id = video_id


class EmptyCatalog(CatalogQueryError):
    def __init__(self):
        super().__init__("Catalog has no videos")


def _copy(record: VideoRecord) -> VideoRecord:
    return record.model_copy(deep=True)


class CatalogQueryEngine:
    """Stateless queries over an injected Catalog.

    Randomized operations share one Random instance, seeded once here and
    guarded by a lock so concurrent handlers never interleave draws.
    """

    def __init__(self, catalog: Catalog, rng: Optional[random.Random] = None,
                 default_page_size: int = DEFAULT_PAGE_SIZE):
        if default_page_size <= 0:
            raise ValueError("default_page_size must be positive")
        self._catalog = catalog
        self._rng = rng if rng is not None else random.Random()
        self._rng_lock = threading.Lock()
        self.default_page_size = default_page_size

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    # --- Lookup ---

    def get_by_id(self, video_id: str) -> VideoRecord:
        """Case-insensitive exact id match; first record in storage order wins."""
        wanted = video_id.casefold()
        for record in self._catalog:
            if record.id.casefold() == wanted:
                return _copy(record)
        logger.debug("Lookup miss for id %r", video_id)
        raise VideoNotFound(video_id)

    def search(self, query: str = "", exact_id: str = "") -> list[VideoRecord]:
        """Title substring search with an exact-id short-circuit.

        Records are scanned in storage order. The first record whose id equals
        exact_id is appended and the scan stops there, so titles after it are
        never checked. With both arguments empty the result is empty.
        """
        q = query.casefold()
        wanted = exact_id.casefold()
        results = []
        for record in self._catalog:
            if wanted and record.id.casefold() == wanted:
                results.append(_copy(record))
                break
            if q and q in record.title.casefold():
                results.append(_copy(record))
        return results

    # --- Randomized views ---

    def _shuffled(self) -> list[VideoRecord]:
        """Fresh full permutation of the catalog (new list per call)."""
        items = list(self._catalog)
        with self._rng_lock:
            self._rng.shuffle(items)
        return items

    def normalize_page(self, page: Optional[int], limit: Optional[int]) -> tuple[int, int]:
        """Clamp page to >= 0 and replace a missing or non-positive limit with the default."""
        if page is None or page < 0:
            page = 0
        if limit is None or limit <= 0:
            limit = self.default_page_size
        return page, limit

    def paginate(self, page: Optional[int] = 0, limit: Optional[int] = None) -> list[VideoRecord]:
        """One window of a fresh random permutation of the whole catalog.

        Returns [] when the window starts past the end; the last page may be short.
        """
        page, limit = self.normalize_page(page, limit)
        shuffled = self._shuffled()
        start = page * limit
        if start >= len(shuffled):
            return []
        end = min(start + limit, len(shuffled))
        return [_copy(r) for r in shuffled[start:end]]

    def random_one(self) -> VideoRecord:
        """Uniformly pick one record. Raises EmptyCatalog when there are none."""
        size = len(self._catalog)
        if size == 0:
            raise EmptyCatalog()
        with self._rng_lock:
            index = self._rng.randrange(size)
        return _copy(self._catalog[index])

    def random_sample(self, n: int) -> list[VideoRecord]:
        """Up to n distinct records (shuffle, then truncate)."""
        if n <= 0:
            return []
        return [_copy(r) for r in self._shuffled()[:n]]
