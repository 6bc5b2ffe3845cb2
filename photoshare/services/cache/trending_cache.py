# photoshare/services/cache/trending_cache.py
from __future__ import annotations

from typing import List, Optional

import redis
from pydantic import TypeAdapter, ValidationError

from photoshare.common.logging import get_logger
from photoshare.domain.errors import CacheUnavailable
from photoshare.domain.ports.trending_cache import KeyValueBackend
from photoshare.services.schemas.trending import TrendingPhotoRead

logger = get_logger(__name__)

DEFAULT_KEY = "trending:photos"
DEFAULT_TTL_SEC = 60 * 15

_ranked_list = TypeAdapter(List[TrendingPhotoRead])


class RedisTrendingCache:
    """
    The precomputed ranked list under one well-known key, stored as the same
    JSON the trending endpoint serves. Satisfies TrendingCachePort.

    - get(): None when absent or expired; CacheUnavailable on backend errors.
    - set(): overwrite with a fresh TTL window.
    - invalidate(): DEL, idempotent.

    With client=None the store is disabled: reads miss, writes are no-ops.
    """

    def __init__(
        self,
        client: Optional[KeyValueBackend],
        *,
        key: str = DEFAULT_KEY,
        ttl_seconds: int = DEFAULT_TTL_SEC,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        self.client = client
        self.key = key
        self.ttl_seconds = ttl_seconds

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def get(self) -> Optional[List[TrendingPhotoRead]]:
        if self.client is None:
            return None
        try:
            raw = self.client.get(self.key)
        except redis.RedisError as e:
            raise CacheUnavailable("get", self.key, e) from e

        if raw is None:
            logger.debug("Cache MISS: %s", self.key)
            return None
        try:
            items = _ranked_list.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding undecodable payload under %s: %s", self.key, e)
            return None
        logger.debug("Cache HIT: %s (%d items)", self.key, len(items))
        return items

    def set(self, items: List[TrendingPhotoRead], ttl_seconds: Optional[int] = None) -> None:
        if self.client is None:
            return
        ttl = ttl_seconds or self.ttl_seconds
        payload = _ranked_list.dump_json(items, by_alias=True)
        try:
            self.client.set(self.key, payload, ex=ttl)
        except redis.RedisError as e:
            raise CacheUnavailable("set", self.key, e) from e
        logger.debug("Cache SET: %s (%d items, TTL %ss)", self.key, len(items), ttl)

    def invalidate(self) -> None:
        if self.client is None:
            return
        try:
            self.client.delete(self.key)
        except redis.RedisError as e:
            raise CacheUnavailable("invalidate", self.key, e) from e
        logger.info("Trending cache invalidated (%s)", self.key)
