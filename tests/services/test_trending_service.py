from __future__ import annotations

import uuid
from datetime import datetime, timedelta, timezone
from unittest import mock

import pytest
import redis
from sqlalchemy.exc import OperationalError

from photoshare.domain.entities.trending import AuthorRef, TrendingRow
from photoshare.domain.enums.media_kind import MediaKind
from photoshare.domain.errors import DataStoreError
from photoshare.services.cache.trending_cache import RedisTrendingCache
from photoshare.services.trending.service import TrendingService

T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


def _rows(n: int):
    author = AuthorRef(id=uuid.uuid4(), username="ann")
    return [
        TrendingRow(
            id=uuid.uuid4(),
            title=f"p{i}",
            image_url=f"https://cdn.example.com/{i}.jpg",
            media_type=MediaKind.image,
            author=author,
            engagement_score=n - i,
            date_created=T0 - timedelta(minutes=i),
        )
        for i in range(n)
    ]


class StubQuery:
    """Ranked query stand-in that honours `limit` and counts calls."""

    def __init__(self, rows):
        self.rows = rows
        self.calls = []

    def top_ranked(self, *, limit, offset=0):
        self.calls.append((limit, offset))
        return self.rows[offset:offset + limit]


def _service(cache, query, **kw):
    return TrendingService(cache=cache, query=query, ttl_seconds=900, **kw)


def test_miss_rebuilds_and_populates_cache(fake_redis):
    query = StubQuery(_rows(30))
    cache = RedisTrendingCache(fake_redis)
    svc = _service(cache, query)

    window = svc.fetch_page(2, 12)

    assert query.calls == [(100, 0)]
    assert [p.title for p in window.items] == [f"p{i}" for i in range(12, 24)]
    assert window.pagination.total == 30
    assert window.pagination.pages == 3
    assert len(cache.get()) == 30
    assert fake_redis.ttl(cache.key) == 900


def test_hit_serves_without_touching_the_database(fake_redis):
    query = StubQuery(_rows(5))
    svc = _service(RedisTrendingCache(fake_redis), query)
    svc.fetch_page(1, 2)
    query.calls.clear()

    window = svc.fetch_page(3, 2)

    assert query.calls == []
    assert [p.title for p in window.items] == ["p4"]
    assert window.pagination.pages == 3


def test_view_is_capped_in_both_cache_states(fake_redis):
    query = StubQuery(_rows(130))
    svc = _service(RedisTrendingCache(fake_redis), query)

    cold = svc.fetch_page(1, 12).pagination
    warm = svc.fetch_page(1, 12).pagination

    assert cold == warm
    assert cold.total == 100
    assert cold.pages == 9


def test_invalidation_forces_rebuild(fake_redis):
    rows = _rows(3)
    query = StubQuery(rows)
    svc = _service(RedisTrendingCache(fake_redis), query)
    svc.fetch_page(1, 12)

    rows[2].engagement_score = 99
    query.rows = [rows[2], rows[0], rows[1]]
    svc.on_mutating_event()
    window = svc.fetch_page(1, 12)

    assert window.items[0].engagement_score == 99
    assert len(query.calls) == 2


def test_cache_read_failure_falls_back_to_database(caplog):
    client = mock.Mock()
    client.get.side_effect = redis.ConnectionError("refused")
    client.set.side_effect = redis.ConnectionError("refused")
    query = StubQuery(_rows(4))
    svc = _service(RedisTrendingCache(client), query)

    window = svc.fetch_page(1, 12)

    assert len(window.items) == 4
    assert query.calls == [(100, 0)]
    assert "falling back to database" in caplog.text


def test_invalidation_failure_is_swallowed(caplog):
    client = mock.Mock()
    client.delete.side_effect = redis.ConnectionError("refused")
    svc = _service(RedisTrendingCache(client), StubQuery([]))

    svc.on_mutating_event()

    client.delete.assert_called_once_with("trending:photos")
    assert "expires by TTL" in caplog.text


def test_store_failure_raises_data_store_error(fake_redis):
    query = mock.Mock()
    query.top_ranked.side_effect = OperationalError("SELECT", {}, Exception("db down"))
    svc = _service(RedisTrendingCache(fake_redis), query)

    with pytest.raises(DataStoreError) as exc:
        svc.fetch_page(1, 12)
    assert exc.value.operation == "trending.top_ranked"
    # nothing cached from a failed rebuild
    assert fake_redis.get("trending:photos") is None


def test_disabled_cache_queries_every_time():
    query = StubQuery(_rows(2))
    svc = _service(RedisTrendingCache(None), query)

    svc.fetch_page(1, 12)
    svc.fetch_page(1, 12)

    assert len(query.calls) == 2


def test_query_repo_is_required(fake_redis):
    with pytest.raises(TypeError):
        TrendingService(cache=RedisTrendingCache(fake_redis))
