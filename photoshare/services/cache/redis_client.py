# photoshare/services/cache/redis_client.py
from __future__ import annotations

from typing import Optional

import redis

from photoshare.common.logging import get_logger
from photoshare.common.settings import Settings

logger = get_logger(__name__)


def build_redis_client(cfg: Settings) -> Optional[redis.Redis]:
    """
    Open the process-wide redis client, or return None when no REDIS_URL is
    configured (trending then runs in direct-query mode).

    A failed ping is logged but the client is kept: redis-py reconnects on the
    next command, and every cache call already degrades to a miss on error.
    """
    if not cfg.redis_url:
        logger.info("No REDIS_URL configured; trending cache disabled")
        return None

    client = redis.Redis.from_url(
        cfg.redis_url,
        socket_timeout=cfg.cache.socket_timeout_sec,
        socket_connect_timeout=cfg.cache.socket_connect_timeout_sec,
    )
    try:
        client.ping()
        logger.info("Redis connection established")
    except redis.RedisError as e:
        logger.warning("Redis unavailable at startup (%s); serving trending without cache until it returns", e)
    return client


def close_redis_client(client: Optional[redis.Redis]) -> None:
    if client is None:
        return
    try:
        client.close()
        logger.info("Redis connection closed")
    except redis.RedisError as e:
        logger.warning("Error closing redis client: %s", e)
