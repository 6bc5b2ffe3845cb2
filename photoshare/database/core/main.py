# photoshare/database/core/main.py
from __future__ import annotations

from typing import Any, Dict

from sqlalchemy import MetaData, create_engine, event
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from photoshare.common.settings import Settings, get_settings

_settings = get_settings()

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}


def _app_schema() -> str | None:
    s = _settings.db_schema
    return s if s and s.lower() != "public" else None


class Base(DeclarativeBase):
    # "public" leaves tables unqualified so the same metadata runs on SQLite
    metadata = MetaData(schema=_app_schema(), naming_convention=NAMING_CONVENTION)


def engine_options(cfg: Settings) -> Dict[str, Any]:
    """
    Pool settings apply to server databases only. SQLite (local runs) gets
    the driver's defaults plus cross-thread access for the FastAPI threadpool.
    """
    opts: Dict[str, Any] = {"echo": cfg.db.echo, "future": True}
    if make_url(cfg.database_url).get_backend_name() == "sqlite":
        opts["connect_args"] = {"check_same_thread": False}
        return opts
    opts.update(
        pool_size=cfg.db.pool_size,
        max_overflow=cfg.db.max_overflow,
        pool_timeout=cfg.db.pool_timeout,
        pool_pre_ping=cfg.db.pool_pre_ping,
        pool_recycle=cfg.db.pool_recycle,
    )
    return opts


engine = create_engine(_settings.database_url, **engine_options(_settings))

if _app_schema():
    @event.listens_for(engine, "connect")
    def _set_search_path(dbapi_conn, _):
        # app schema first, public second so extensions stay visible
        with dbapi_conn.cursor() as cur:
            cur.execute(f'SET search_path TO "{_settings.db_schema}", public')


SessionLocal = sessionmaker(bind=engine, expire_on_commit=False, future=True, autoflush=False)
