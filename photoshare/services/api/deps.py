# photoshare/services/api/deps.py
from __future__ import annotations
from typing import Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from photoshare.common.settings import get_settings
from photoshare.database.core.main import SessionLocal
from photoshare.database.repos.trending_query import TrendingQueryRepo
from photoshare.domain.ports.trending_cache import TrendingCachePort
from photoshare.services.trending.service import TrendingService


def get_db() -> Generator[Session, None, None]:
    """
    Request-scoped session. Reads use it as-is; writes wrap their work in
    `transactional(db)` so the commit lands before the trending invalidation.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_trending_cache(request: Request) -> TrendingCachePort:
    """The process-wide cache store opened in the app lifespan."""
    return request.app.state.trending_cache


def get_trending_service(
    db: Session = Depends(get_db),
    cache: TrendingCachePort = Depends(get_trending_cache),
) -> TrendingService:
    cfg = get_settings()
    return TrendingService(
        cache=cache,
        query=TrendingQueryRepo(db),
        cache_limit=cfg.trending.cache_limit,
        ttl_seconds=cfg.cache.trending_ttl_sec,
    )
