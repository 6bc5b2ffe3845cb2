import pytest

from photoshare.common import settings as s


@pytest.fixture()
def fresh_settings():
    s.get_settings.cache_clear()
    yield s.get_settings
    s.get_settings.cache_clear()


def test_defaults(fresh_settings, monkeypatch):
    for var in ("DATABASE_URL", "REDIS_URL", "DB__SCHEMA_NAME", "CACHE__TRENDING_TTL_SEC"):
        monkeypatch.delenv(var, raising=False)

    cfg = fresh_settings()

    assert cfg.redis_url is None
    assert cfg.cache.trending_key == "trending:photos"
    assert cfg.cache.trending_ttl_sec == 900
    assert cfg.trending.cache_limit == 100
    assert cfg.trending.default_page_size == 12
    assert cfg.db_schema == "public"
    assert cfg.database_url.startswith("postgresql+psycopg://")


def test_flat_urls_and_nested_overrides(fresh_settings, monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///./dev.db")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/0")
    monkeypatch.setenv("CACHE__TRENDING_TTL_SEC", "60")

    cfg = fresh_settings()

    assert cfg.database_url == "sqlite+pysqlite:///./dev.db"
    assert cfg.redis_url == "redis://cache:6379/0"
    assert cfg.cache.trending_ttl_sec == 60


def test_use_testcontainers_is_boolified(fresh_settings, monkeypatch):
    monkeypatch.setenv("USE_TESTCONTAINERS", "yes")
    assert fresh_settings().use_testcontainers is True


def test_cors_lists_accept_csv():
    api = s.APIConfig(cors_allow_origins="https://a.example, https://b.example")
    assert api.cors_allow_origins == ["https://a.example", "https://b.example"]
