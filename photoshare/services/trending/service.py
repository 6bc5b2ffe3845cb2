# photoshare/services/trending/service.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from photoshare.common.logging import get_logger
from photoshare.domain.errors import CacheUnavailable, DataStoreError
from photoshare.domain.policies.pagination import PageWindow, paginate
from photoshare.domain.ports.trending_cache import TrendingCachePort
from photoshare.domain.ports.trending_query import TrendingQueryPort
from photoshare.services.mappers.trending import to_trending_read
from photoshare.services.schemas.trending import TrendingPhotoRead

logger = get_logger(__name__)

DEFAULT_CACHE_LIMIT = 100


class TrendingService:
    """
    Cache-aside orchestration for the trending feed, and the only writer of
    the trending cache.

    Reads serve a window of the ranked list, from the cache when present,
    otherwise from a rebuild that also repopulates the cache. Writes elsewhere
    call `on_mutating_event()` after their commit so the next read rebuilds.

    The trending view is the top `cache_limit` items in both cache states, so
    `total`/`pages` do not depend on whether the cache was warm.
    """

    def __init__(
        self,
        *,
        cache: TrendingCachePort,
        query: TrendingQueryPort,
        cache_limit: int = DEFAULT_CACHE_LIMIT,
        ttl_seconds: Optional[int] = None,
    ) -> None:
        if cache_limit <= 0:
            raise ValueError("cache_limit must be > 0")
        self.cache = cache
        self.query = query
        self.cache_limit = cache_limit
        self.ttl_seconds = ttl_seconds

    def fetch_page(self, page: int, limit: int) -> PageWindow[TrendingPhotoRead]:
        cached = self._read_cache()
        if cached is not None:
            return paginate(cached, page, limit)

        ranked = self.rebuild()
        return paginate(ranked, page, limit)

    def rebuild(self) -> List[TrendingPhotoRead]:
        """Recompute the top `cache_limit` list and store it. Store errors propagate."""
        try:
            rows = self.query.top_ranked(limit=self.cache_limit)
        except SQLAlchemyError as e:
            logger.error("Trending rebuild failed in top_ranked(limit=%d): %s", self.cache_limit, e)
            raise DataStoreError("trending.top_ranked", e) from e

        ranked = [to_trending_read(r) for r in rows]
        try:
            self.cache.set(ranked, self.ttl_seconds)
        except CacheUnavailable as e:
            logger.warning("Trending cache %s failed on key %s; served uncached: %s", e.operation, e.key, e.cause)
        logger.info("Trending list rebuilt with %d items", len(ranked))
        return ranked

    def on_mutating_event(self) -> None:
        """
        Drop the cached ranking. Call synchronously after a ranking-relevant
        write commits and before its response goes out.
        """
        try:
            self.cache.invalidate()
        except CacheUnavailable as e:
            logger.warning(
                "Trending cache %s failed on key %s; entry expires by TTL: %s", e.operation, e.key, e.cause
            )

    def _read_cache(self) -> Optional[List[TrendingPhotoRead]]:
        try:
            return self.cache.get()
        except CacheUnavailable as e:
            logger.warning("Trending cache %s failed on key %s; falling back to database: %s", e.operation, e.key, e.cause)
            return None
