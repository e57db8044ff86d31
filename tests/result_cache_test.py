import sys
import os
import fnmatch
import hashlib
import pytest
import redis
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from core.result_cache import CachedMatch, RedisCacheStore, ResultCache, SQLiteCacheStore
from utils.config import MatcherSettings


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now


class FakeRedis:
    """Enough of redis.Redis for the store: get/set/delete/scan_iter."""

    def __init__(self):
        self.data = {}
        self.ttls = {}

    def get(self, key):
        return self.data.get(key)

    def set(self, key, value, ex=None):
        self.data[key] = value
        self.ttls[key] = ex
        return True

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
        return removed

    def scan_iter(self, match=None, count=None):
        return [key for key in list(self.data) if fnmatch.fnmatchcase(key, match)]


class BrokenRedis(FakeRedis):
    def get(self, key):
        raise redis.ConnectionError("connection refused")

    def set(self, key, value, ex=None):
        raise redis.ConnectionError("connection refused")


def _sqlite_cache(clock=None, ttl=3600):
    return ResultCache(SQLiteCacheStore(':memory:', clock=clock or FakeClock()), ttl=ttl)


def test_cache_key_uses_normalized_prompt():
    cache = _sqlite_cache()
    expected = 'cssmatch_pattern_' + hashlib.md5(b'make this blue').hexdigest()
    assert cache.cache_key("Make this BLUE!") == expected
    assert cache.cache_key("  make   this blue ") == expected

def test_set_then_get():
    cache = _sqlite_cache()
    assert cache.set("blue", {'color': '#0073aa'}, 95, ['blue'])
    cached = cache.get("BLUE")
    assert cached == CachedMatch(css={'color': '#0073aa'}, confidence=95, matched_patterns=['blue'])

def test_sqlite_entries_expire():
    clock = FakeClock()
    cache = _sqlite_cache(clock=clock, ttl=60)
    cache.set("blue", {'color': '#0073aa'}, 95, ['blue'])
    clock.now += 59
    assert cache.get("blue") is not None
    clock.now += 1
    assert cache.get("blue") is None

def test_sqlite_purge_expired():
    clock = FakeClock()
    store = SQLiteCacheStore(':memory:', clock=clock)
    store.set('a', '{}', 10)
    store.set('b', '{}', 100)
    clock.now += 50
    assert store.purge_expired() == 1
    assert store.get('b') == '{}'

def test_sqlite_store_on_disk(tmp_path):
    path = tmp_path / 'cache.sqlite3'
    store = SQLiteCacheStore(path)
    store.set('key', 'value', 3600)
    store.close()
    assert SQLiteCacheStore(path).get('key') == 'value'

@pytest.mark.parametrize("raw", [
    'not json',
    '{"css": {"color": "blue"}, "confidence": 95}',
    '{"css": {"color": "blue"}, "confidence": true, "matched_patterns": ["blue"]}',
    '{"css": {"color": "blue"}, "confidence": "95", "matched_patterns": ["blue"]}',
    '{"css": {"color": "blue"}, "confidence": 101, "matched_patterns": ["blue"]}',
    '{"css": {"color": 1}, "confidence": 95, "matched_patterns": ["blue"]}',
    '{"css": {"color": "blue"}, "confidence": 95, "matched_patterns": "blue"}',
])
def test_malformed_entries_are_misses(raw):
    cache = _sqlite_cache()
    key = cache.cache_key("blue")
    cache.store.set(key, raw, 3600)
    assert cache.get("blue") is None
    # dropped so the next match can overwrite it
    assert cache.store.get(key) is None

def test_is_cached_does_not_touch_stats():
    cache = _sqlite_cache()
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    assert cache.is_cached("blue")
    assert not cache.is_cached("red")
    assert cache.stats() == {'hits': 0, 'misses': 0, 'hit_rate': 0.0}

def test_stats_and_clear():
    cache = _sqlite_cache()
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    cache.get("blue")
    cache.get("blue")
    cache.get("red")
    assert cache.stats() == {'hits': 2, 'misses': 1, 'hit_rate': 0.6667}
    assert cache.clear() == 1
    assert cache.stats()['hits'] == 0
    assert cache.get("blue") is None

def test_clear_only_removes_own_prefix():
    store = SQLiteCacheStore(':memory:')
    store.set('other_app_key', 'keep', 3600)
    cache = ResultCache(store)
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    cache.clear()
    assert store.get('other_app_key') == 'keep'

def test_invalidate():
    cache = _sqlite_cache()
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    assert cache.invalidate("Blue")
    assert not cache.invalidate("Blue")

def test_redis_store_roundtrip_with_ttl():
    client = FakeRedis()
    cache = ResultCache(RedisCacheStore(client), ttl=120)
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    key = cache.cache_key("blue")
    assert client.ttls[key] == 120
    assert cache.get("blue").confidence == 95

def test_redis_clear_scans_prefix():
    client = FakeRedis()
    client.set('session:1', 'keep')
    cache = ResultCache(RedisCacheStore(client))
    cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    cache.set("red", {'color': 'red'}, 95, ['red'])
    assert cache.clear() == 2
    assert client.data == {'session:1': 'keep'}

def test_redis_failures_are_misses():
    cache = ResultCache(RedisCacheStore(BrokenRedis()))
    assert not cache.set("blue", {'color': 'blue'}, 95, ['blue'])
    assert cache.get("blue") is None

def test_from_settings_disabled():
    assert ResultCache.from_settings(MatcherSettings(cache_enabled=False)) is None

def test_from_settings_falls_back_to_sqlite(tmp_path, monkeypatch):
    def unreachable(url):
        raise redis.ConnectionError("connection refused")

    monkeypatch.setattr(RedisCacheStore, 'from_url', staticmethod(unreachable))
    settings = MatcherSettings(redis_url='redis://localhost:6379/0',
                               cache_db_path=str(tmp_path / 'cache.sqlite3'),
                               cache_ttl=30, cache_prefix='test_')
    cache = ResultCache.from_settings(settings)
    assert isinstance(cache.store, SQLiteCacheStore)
    assert cache.ttl == 30
    assert cache.cache_key("blue").startswith('test_')

def test_from_settings_uses_redis_when_reachable(monkeypatch):
    monkeypatch.setattr(RedisCacheStore, 'from_url', classmethod(lambda cls, url: cls(FakeRedis())))
    cache = ResultCache.from_settings(MatcherSettings(redis_url='redis://localhost:6379/0'))
    assert isinstance(cache.store, RedisCacheStore)

def test_from_settings_bad_redis_url_falls_back(tmp_path):
    settings = MatcherSettings(redis_url='http://not-redis', cache_db_path=str(tmp_path / 'cache.sqlite3'))
    assert isinstance(ResultCache.from_settings(settings).store, SQLiteCacheStore)
