from __future__ import annotations

from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from photoshare.common.logging import get_logger
from photoshare.common.settings import get_settings
from photoshare.services.api.routers import comments, health, photos, ratings, trending, users
from photoshare.services.cache.redis_client import build_redis_client, close_redis_client
from photoshare.services.cache.trending_cache import RedisTrendingCache

cfg = get_settings()
dev = cfg.app_env.lower() == "development"
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # One cache client per process, shared by reference across requests
    client = build_redis_client(cfg)
    app.state.trending_cache = RedisTrendingCache(
        client,
        key=cfg.cache.trending_key,
        ttl_seconds=cfg.cache.trending_ttl_sec,
    )
    try:
        yield
    finally:
        close_redis_client(client)


async def _data_store_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error("%s %s failed in the data store: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, content={"detail": "Server error"})


def create_app() -> FastAPI:
    app = FastAPI(
        title="Photoshare API",
        version="0.1.0",
        docs_url=f"{cfg.api.prefix}/docs",
        openapi_url=f"{cfg.api.prefix}/openapi.json",
        lifespan=lifespan,
    )

    allow_origins = ["*"] if dev else cfg.api.cors_allow_origins
    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_methods=cfg.api.cors_allow_methods,
        allow_headers=cfg.api.cors_allow_headers,
        allow_credentials=cfg.api.cors_allow_credentials and not dev,
    )

    app.add_exception_handler(SQLAlchemyError, _data_store_error)

    # Routers
    app.include_router(trending.router)
    app.include_router(photos.router)
    app.include_router(comments.router)
    app.include_router(ratings.router)
    app.include_router(users.router)
    app.include_router(health.router)
    return app

app = create_app()
