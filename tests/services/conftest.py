# tests/services/conftest.py
from __future__ import annotations

from typing import Dict

import pytest
from starlette.testclient import TestClient

from photoshare.domain.enums.user_role import UserRole
from photoshare.services.api.app import create_app
from photoshare.services.api.auth import create_access_token
from photoshare.services.api.deps import get_db, get_trending_cache
from photoshare.services.cache.trending_cache import RedisTrendingCache


@pytest.fixture()
def trending_cache(fake_redis) -> RedisTrendingCache:
    return RedisTrendingCache(fake_redis, key="trending:photos", ttl_seconds=900)


@pytest.fixture()
def api_client(session_factory, trending_cache):
    """
    A TestClient whose `get_db` yields sessions on the test engine and whose
    trending cache is backed by the in-memory fake redis. Each request gets
    its own session, as in production, so commits are real.
    """
    app = create_app()

    def _db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = _db
    app.dependency_overrides[get_trending_cache] = lambda: trending_cache

    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture()
def seed(session_factory):
    """Run `fn(session)` in its own committed transaction and return its result."""
    def _run(fn):
        with session_factory() as s:
            out = fn(s)
            s.commit()
            return out
    return _run


@pytest.fixture()
def creator(seed, make_user):
    return seed(lambda s: make_user(s, "carla", role=UserRole.creator))


@pytest.fixture()
def consumer(seed, make_user):
    return seed(lambda s: make_user(s, "dev", role=UserRole.consumer))


def auth(user) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def auth_for():
    return auth
