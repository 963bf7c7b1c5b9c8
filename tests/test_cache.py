"""
Tests for core/cache.py — loading the catalog from the embedded tables or Mongo.
"""

import asyncio
from datetime import datetime, timedelta

import pytest
from fastapi import HTTPException

from access_careers.catalog import default_catalog
from access_careers.core import globals as app_globals
from access_careers.core.cache import CatalogCache
from access_careers.core.config import settings
from access_careers.core.dependencies import get_catalog
from access_careers.core.exceptions import CatalogIntegrityError


class FakeCursor:
    def __init__(self, docs):
        self.docs = docs

    async def to_list(self, length):
        return list(self.docs)


class FakeCollection:
    def __init__(self, docs):
        self.docs = docs
        self.find_calls = 0

    def find(self, query):
        self.find_calls += 1
        return FakeCursor(self.docs)


class FakeClient:
    """Just enough of AsyncIOMotorClient: client[db][collection].find({}).to_list(None)"""

    def __init__(self, docs):
        self.collections = {settings.CATALOG_DB: {settings.CUTOFFS_COLLECTION: FakeCollection(docs)}}

    def __getitem__(self, name):
        return self.collections[name]


def _doc(course_id="m-1", high=44, mid=40, low=37, cluster=("maths", "physics", "chemistry", "english")):
    return {
        "_id": "64f0c0ffee",
        "course_id": course_id,
        "course_name": "Bachelor of Science in Civil Engineering",
        "programme_level": "Degree",
        "category": "Engineering & Technology",
        "cluster_subject_ids": list(cluster),
        "cutoff_high": high,
        "cutoff_mid": mid,
        "cutoff_low": low,
    }


class TestEmbeddedSource:

    def test_serves_default_catalog(self):
        cache = CatalogCache()
        asyncio.run(cache.initialize())
        assert cache.get_catalog() is default_catalog()

    def test_never_expires(self):
        cache = CatalogCache(ttl_hours=0)
        asyncio.run(cache.initialize())
        assert cache.should_refresh() is False

    def test_uninitialized(self):
        cache = CatalogCache()
        assert cache.should_refresh() is True
        with pytest.raises(RuntimeError):
            cache.get_catalog()


class TestMongoSource:

    def test_loads_documents(self):
        cache = CatalogCache(FakeClient([_doc("m-1"), _doc("m-2", 40, 36, 30)]))
        asyncio.run(cache.initialize())
        catalog = cache.get_catalog()
        assert [c.course_id for c in catalog.cutoffs()] == ["m-1", "m-2"]
        assert catalog.cutoff("m-2").cutoff_low == 30

    def test_empty_collection_falls_back_to_embedded(self):
        cache = CatalogCache(FakeClient([]))
        asyncio.run(cache.initialize())
        assert cache.get_catalog() is default_catalog()

    def test_bad_thresholds_fail_startup(self):
        cache = CatalogCache(FakeClient([_doc("bad", high=40, mid=42)]))
        with pytest.raises(CatalogIntegrityError):
            asyncio.run(cache.initialize())
        assert cache.catalog is None

    def test_malformed_document_fails_startup(self):
        doc = _doc("broken")
        del doc["cutoff_mid"]
        cache = CatalogCache(FakeClient([doc]))
        with pytest.raises(CatalogIntegrityError) as exc_info:
            asyncio.run(cache.initialize())
        assert "broken" in exc_info.value.problems[0]

    def test_ttl_expiry(self):
        cache = CatalogCache(FakeClient([_doc()]), ttl_hours=6)
        asyncio.run(cache.initialize())
        assert cache.should_refresh() is False
        cache.cache_timestamp = datetime.utcnow() - timedelta(hours=7)
        assert cache.should_refresh() is True

    def test_failed_refresh_keeps_previous_catalog(self):
        client = FakeClient([_doc("m-1")])
        cache = CatalogCache(client)
        asyncio.run(cache.initialize())
        previous = cache.get_catalog()

        client.collections[settings.CATALOG_DB][settings.CUTOFFS_COLLECTION] = FakeCollection(
            [_doc("m-1", high=30, mid=40)]
        )
        with pytest.raises(CatalogIntegrityError):
            asyncio.run(cache.refresh_all())
        assert cache.get_catalog() is previous

    def test_failed_refresh_waits_for_next_ttl(self):
        client = FakeClient([_doc("m-1")])
        cache = CatalogCache(client, ttl_hours=6)
        asyncio.run(cache.initialize())
        cache.cache_timestamp = datetime.utcnow() - timedelta(hours=7)

        bad = FakeCollection([_doc("m-1", high=30, mid=40)])
        client.collections[settings.CATALOG_DB][settings.CUTOFFS_COLLECTION] = bad
        with pytest.raises(CatalogIntegrityError):
            asyncio.run(cache.refresh_all())
        assert cache.should_refresh() is False
        assert bad.find_calls == 1


class TestGetCatalog:

    def _install(self, monkeypatch, cache):
        monkeypatch.setattr(app_globals, "cache", cache)

    def test_no_cache_is_unavailable(self, monkeypatch):
        self._install(monkeypatch, None)
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(get_catalog())
        assert exc_info.value.status_code == 503

    def test_reloads_after_ttl(self, monkeypatch):
        client = FakeClient([_doc("m-1")])
        cache = CatalogCache(client, ttl_hours=6)
        asyncio.run(cache.initialize())
        self._install(monkeypatch, cache)

        client.collections[settings.CATALOG_DB][settings.CUTOFFS_COLLECTION] = FakeCollection([_doc("m-2")])
        assert asyncio.run(get_catalog()).cutoff("m-2") is None

        cache.cache_timestamp = datetime.utcnow() - timedelta(hours=7)
        catalog = asyncio.run(get_catalog())
        assert [c.course_id for c in catalog.cutoffs()] == ["m-2"]

    def test_failed_reload_serves_previous_catalog(self, monkeypatch):
        client = FakeClient([_doc("m-1")])
        cache = CatalogCache(client, ttl_hours=6)
        asyncio.run(cache.initialize())
        previous = cache.get_catalog()
        cache.cache_timestamp = datetime.utcnow() - timedelta(hours=7)
        self._install(monkeypatch, cache)

        bad = FakeCollection([_doc("m-1", high=30, mid=40)])
        client.collections[settings.CATALOG_DB][settings.CUTOFFS_COLLECTION] = bad
        for _ in range(5):
            assert asyncio.run(get_catalog()) is previous
        # one attempt, then the previous catalog is served until the TTL runs out again
        assert bad.find_calls == 1

    def test_failed_first_load_is_unavailable(self, monkeypatch):
        cache = CatalogCache(FakeClient([_doc("bad", high=40, mid=42)]))
        self._install(monkeypatch, cache)
        with pytest.raises(HTTPException) as exc_info:
            asyncio.run(get_catalog())
        assert exc_info.value.status_code == 503
