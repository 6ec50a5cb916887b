"""Tests for the in-memory result cache."""

from core.cache import CACHE_TTL, ResultCache


def test_cache_basic(fake_clock):
    """Test basic cache operations."""
    cache = ResultCache(clock=fake_clock)

    # Initially empty
    assert cache.get("syria") is None

    value = {"summary": "tense"}
    cache.put("syria", value)
    assert cache.get("syria") is value


def test_default_ttl_is_five_minutes():
    assert CACHE_TTL == 300


def test_entry_expires_at_ttl(fake_clock):
    """An entry is fresh strictly before the TTL and absent from the TTL on."""
    cache = ResultCache(clock=fake_clock)
    cache.put("iran", "result")

    fake_clock.advance(CACHE_TTL - 0.001)
    assert cache.get("iran", CACHE_TTL) == "result"

    fake_clock.advance(0.001)
    assert cache.get("iran", CACHE_TTL) is None


def test_custom_ttl(fake_clock):
    cache = ResultCache(clock=fake_clock)
    cache.put("lebanon", "result")
    fake_clock.advance(10)

    assert cache.get("lebanon", ttl=60) == "result"
    assert cache.get("lebanon", ttl=5) is None


def test_put_overwrites_and_refreshes_timestamp(fake_clock):
    cache = ResultCache(clock=fake_clock)
    cache.put("ukraine", "old")
    fake_clock.advance(CACHE_TTL - 1)
    cache.put("ukraine", "new")
    fake_clock.advance(CACHE_TTL - 1)

    assert cache.get("ukraine") == "new"


def test_keys_are_independent(fake_clock):
    cache = ResultCache(clock=fake_clock)
    cache.put("a", 1)
    cache.put("b", 2)

    assert cache.get("a") == 1
    assert cache.get("b") == 2


def test_expired_entries_are_not_swept(fake_clock):
    """Expiry only affects reads; the entry itself stays until overwritten."""
    cache = ResultCache(clock=fake_clock)
    cache.put("a", 1)
    fake_clock.advance(CACHE_TTL + 1)

    assert cache.get("a") is None
    assert cache.get("a", ttl=CACHE_TTL + 2) == 1
