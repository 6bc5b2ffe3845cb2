# tests/conftest.py
from __future__ import annotations

import uuid
from typing import Dict, Optional

import pytest
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from photoshare.common.settings import get_settings
from photoshare.database.models import Base, MediaItem, User
from photoshare.domain.enums.user_role import UserRole


@pytest.fixture(scope="session")
def _database_url():
    """
    USE_TESTCONTAINERS=true runs the suite against a throwaway Postgres;
    otherwise everything runs on an in-memory SQLite database.
    """
    cfg = get_settings()
    if not cfg.use_testcontainers:
        yield None
        return

    from testcontainers.postgres import PostgresContainer

    with PostgresContainer(cfg.test_db_image) as pg:
        # testcontainers hands out psycopg2 URLs; we ship psycopg (v3)
        yield pg.get_connection_url().replace("psycopg2", "psycopg")


def _sqlite_engine() -> Engine:
    engine = create_engine(
        "sqlite+pysqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
        future=True,
    )

    @event.listens_for(engine, "connect")
    def _enable_fks(dbapi_conn, _):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()

    return engine


@pytest.fixture(scope="session")
def db_engine(_database_url) -> Engine:
    engine = create_engine(_database_url, future=True) if _database_url else _sqlite_engine()

    # Skip Alembic here; just create tables from models
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def session_factory(db_engine):
    """Sessions configured like the app's SessionLocal. Tables are emptied after each test."""
    factory = sessionmaker(bind=db_engine, expire_on_commit=False, autoflush=False, future=True)
    try:
        yield factory
    finally:
        with db_engine.begin() as conn:
            for table in reversed(Base.metadata.sorted_tables):
                conn.execute(table.delete())


# ---------------------------- fake redis --------------------------------------

class FakeRedis:
    """
    Just enough of redis.Redis for the trending cache: GET, SET with EX, DEL.
    Expiry follows `now`, which tests advance by hand.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._data: Dict[str, bytes] = {}
        self._expires: Dict[str, float] = {}
        self.calls: list[str] = []

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def _alive(self, key: str) -> bool:
        exp = self._expires.get(key)
        if exp is not None and self.now >= exp:
            self._data.pop(key, None)
            self._expires.pop(key, None)
        return key in self._data

    def get(self, key: str) -> Optional[bytes]:
        self.calls.append("get")
        return self._data[key] if self._alive(key) else None

    def set(self, key: str, value, ex: Optional[int] = None):
        self.calls.append("set")
        self._data[key] = value.encode() if isinstance(value, str) else bytes(value)
        if ex is not None:
            self._expires[key] = self.now + ex
        else:
            self._expires.pop(key, None)
        return True

    def delete(self, *keys: str) -> int:
        self.calls.append("delete")
        n = 0
        for key in keys:
            if self._alive(key):
                n += 1
            self._data.pop(key, None)
            self._expires.pop(key, None)
        return n

    def ttl(self, key: str) -> int:
        if not self._alive(key):
            return -2
        exp = self._expires.get(key)
        return -1 if exp is None else int(exp - self.now)


@pytest.fixture()
def fake_redis() -> FakeRedis:
    return FakeRedis()


# ---------------------------- data helpers ------------------------------------

def _mk_user(session, username: Optional[str] = None, role: UserRole = UserRole.consumer) -> User:
    username = username or f"user_{uuid.uuid4().hex[:8]}"
    u = User(username=username, email=f"{username}@example.com", role=role)
    session.add(u)
    session.flush()
    return u


def _mk_media(session, owner: User, title: str = "Sunset", **kw) -> MediaItem:
    m = MediaItem(
        user_id=owner.id,
        title=title,
        image_url=kw.pop("image_url", f"https://cdn.example.com/{uuid.uuid4().hex}.jpg"),
        storage_id=kw.pop("storage_id", uuid.uuid4().hex),
        **kw,
    )
    session.add(m)
    session.flush()
    return m


@pytest.fixture()
def make_user():
    return _mk_user


@pytest.fixture()
def make_media():
    return _mk_media
