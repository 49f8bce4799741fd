import pytest

from cleanfeed.pipeline.cache import CacheStats, VerdictCache
from cleanfeed.pipeline.verdict import Verdict

FILTERED = Verdict.filtered("Contains keyword: leak", 0.9)
CLEAN = Verdict.clean()


@pytest.fixture
def cache(clock):
    return VerdictCache(clock=clock)


def test_store_and_retrieve(cache):
    cache.set("testuser", FILTERED)
    assert cache.get("testuser") == FILTERED


def test_missing_identifier_returns_none(cache):
    assert cache.get("nonexistent") is None
    assert not cache.has("nonexistent")


def test_has_and_contains(cache):
    cache.set("testuser", CLEAN)
    assert cache.has("testuser")
    assert "testuser" in cache
    assert "other" not in cache
    assert 42 not in cache


def test_keys_are_case_sensitive(cache):
    cache.set("TestUser", FILTERED)
    assert cache.get("testuser") is None


def test_clear(cache):
    cache.set("user1", FILTERED)
    cache.set("user2", CLEAN)
    cache.clear()
    assert cache.get("user1") is None
    assert cache.get("user2") is None
    assert cache.stats() == CacheStats(size=0, filtered=0)


def test_overwrite_replaces_verdict(cache):
    cache.set("testuser", CLEAN)
    updated = Verdict.filtered("Updated reason", 0.9)
    cache.set("testuser", updated)
    assert cache.get("testuser") == updated
    assert len(cache) == 1


def test_entries_expire_after_24_hours(cache, clock):
    cache.set("testuser", FILTERED)
    clock.advance_hours(23)
    assert cache.get("testuser") == FILTERED
    clock.advance_hours(2)
    assert cache.get("testuser") is None


def test_expired_read_removes_entry(cache, clock):
    cache.set("testuser", FILTERED)
    clock.advance_hours(25)
    # Still physically present until something touches it.
    assert cache.stats().size == 1
    assert not cache.has("testuser")
    assert cache.stats().size == 0


def test_overwrite_refreshes_timestamp(cache, clock):
    cache.set("testuser", CLEAN)
    clock.advance_hours(20)
    cache.set("testuser", CLEAN)
    clock.advance_hours(20)
    assert cache.has("testuser")


def test_set_sweeps_expired_entries(cache, clock):
    cache.set("olduser", FILTERED)
    clock.advance_hours(25)
    cache.set("newuser", CLEAN)
    assert cache.stats().size == 1
    assert cache.get("olduser") is None
    assert cache.get("newuser") == CLEAN


def test_size_is_bounded(cache, clock):
    for i in range(1200):
        cache.set(f"user{i}", FILTERED if i % 2 == 0 else CLEAN)
        clock.now += 1
    assert cache.stats().size <= 1000


def test_eviction_drops_oldest_batch(cache, clock):
    for i in range(1001):
        cache.set(f"user{i}", CLEAN)
        clock.now += 1
    # The 1001st insert pushed the cache over the ceiling.
    assert len(cache) == 801
    assert cache.get("user0") is None
    assert cache.get("user199") is None
    assert cache.get("user200") == CLEAN
    assert cache.get("user1000") == CLEAN


def test_custom_limits(clock):
    cache = VerdictCache(max_entries=10, eviction_batch=3, clock=clock)
    for i in range(11):
        cache.set(f"u{i}", CLEAN)
        clock.now += 1
    assert len(cache) == 8
    assert not cache.has("u2")
    assert cache.has("u3")


def test_stats(cache):
    assert cache.stats() == CacheStats(size=0, filtered=0)
    cache.set("filtered1", FILTERED)
    cache.set("filtered2", Verdict.filtered("links", 0.85))
    cache.set("clean1", CLEAN)
    stats = cache.stats()
    assert stats.size == 3
    assert stats.filtered == 2


def test_expiry_boundary_is_strict(cache, clock):
    cache.set("testuser", FILTERED)
    clock.now += 24 * 60 * 60 * 1000
    assert cache.get("testuser") == FILTERED
    clock.now += 1
    assert cache.get("testuser") is None
