# photoshare/services/api/routers/health.py
from __future__ import annotations
from fastapi import APIRouter, Depends
from photoshare.common.settings import get_settings
from photoshare.domain.ports.trending_cache import TrendingCachePort
from photoshare.services.api.deps import get_trending_cache

router = APIRouter()

@router.get("/healthz")
def healthz(cache: TrendingCachePort = Depends(get_trending_cache)):
    s = get_settings()
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "cache": "enabled" if getattr(cache, "enabled", False) else "disabled",
    }
