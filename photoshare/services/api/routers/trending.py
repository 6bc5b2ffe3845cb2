from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from photoshare.common.logging import get_logger
from photoshare.common.settings import get_settings
from photoshare.database.models import User as DBUser
from photoshare.domain.errors import DataStoreError
from photoshare.services.api.auth import get_current_user
from photoshare.services.api.deps import get_trending_service
from photoshare.services.api.errors import to_http
from photoshare.services.schemas import PaginationRead, TrendingPageRead
from photoshare.services.trending.service import TrendingService

cfg = get_settings()
logger = get_logger(__name__)
router = APIRouter(prefix=f"{cfg.api.prefix}/trending", tags=["trending"])


@router.get("", response_model=TrendingPageRead)
def get_trending(
    page: int = Query(1, ge=1),
    limit: int = Query(cfg.trending.default_page_size, ge=1, le=cfg.trending.max_page_size),
    _caller: DBUser = Depends(get_current_user),
    trending: TrendingService = Depends(get_trending_service),
) -> TrendingPageRead:
    """Media ranked by comments + ratings, served from the trending cache when warm."""
    try:
        window = trending.fetch_page(page, limit)
    except DataStoreError as e:
        logger.error("GET trending page=%d limit=%d failed: %s", page, limit, e)
        raise to_http(e) from e

    p = window.pagination
    return TrendingPageRead(
        photos=window.items,
        pagination=PaginationRead(page=p.page, limit=p.limit, total=p.total, pages=p.pages),
    )
