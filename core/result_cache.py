"""
Result Cache Module
Memoizes match results keyed by the hash of the normalized prompt.

Two backends:
- Redis, the fast shared cache, used when a URL is configured and reachable
- SQLite, the durable fallback, with an explicit expiry column

Every value read back is validated before use. Anything malformed counts as
a miss and is dropped; backend failures are logged and also count as misses.
"""

import hashlib
import logging
import sqlite3
import threading
import time
from typing import Callable, Dict, List, Optional, Protocol

import redis
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .prompt_normalizer import normalize

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = 'cssmatch_pattern_'
DEFAULT_TTL = 3600


class CachedMatch(BaseModel):
    """The three fields worth caching; everything else in a MatchResult is derived."""

    model_config = ConfigDict(strict=True, frozen=True)

    css: Dict[str, str]
    confidence: int = Field(ge=0, le=100)
    matched_patterns: List[str]


class CacheStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str, ttl: int) -> bool: ...

    def delete(self, key: str) -> bool: ...

    def clear(self, prefix: str) -> int: ...


class RedisCacheStore:
    """Shared in-memory cache on Redis. Keys expire through Redis' own TTL."""

    def __init__(self, client):
        self.client = client

    @classmethod
    def from_url(cls, url: str) -> 'RedisCacheStore':
        """
        Connect and ping.

        Raises:
            redis.RedisError: If the server can't be reached
            ValueError: If the URL scheme isn't a Redis one
        """
        client = redis.Redis.from_url(
            url,
            decode_responses=True,
            socket_connect_timeout=1,
            socket_timeout=1,
        )
        client.ping()
        return cls(client)

    def get(self, key: str) -> Optional[str]:
        try:
            value = self.client.get(key)
        except redis.RedisError as e:
            logger.warning(f"Redis read failed for {key}: {e}")
            return None
        if isinstance(value, bytes):
            value = value.decode('utf-8', errors='replace')
        return value

    def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            return bool(self.client.set(key, value, ex=ttl))
        except redis.RedisError as e:
            logger.warning(f"Redis write failed for {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        try:
            return self.client.delete(key) > 0
        except redis.RedisError as e:
            logger.warning(f"Redis delete failed for {key}: {e}")
            return False

    def clear(self, prefix: str) -> int:
        """Delete every key under prefix. SCAN based, so other applications' keys survive."""
        try:
            keys = list(self.client.scan_iter(match=f"{prefix}*", count=500))
            if keys:
                self.client.delete(*keys)
            return len(keys)
        except redis.RedisError as e:
            logger.warning(f"Redis clear failed for prefix {prefix}: {e}")
            return 0


class SQLiteCacheStore:
    """Durable key-value store in SQLite. Expired rows are ignored on read and removed lazily."""

    def __init__(self, path: str = ':memory:', clock: Callable[[], float] = time.time):
        self.path = str(path)
        self.clock = clock
        self._lock = threading.Lock()
        self._conn = sqlite3.connect(self.path, check_same_thread=False)
        with self._conn:
            self._conn.execute(
                'CREATE TABLE IF NOT EXISTS match_cache ('
                ' cache_key TEXT PRIMARY KEY,'
                ' value TEXT NOT NULL,'
                ' expires_at REAL NOT NULL)'
            )

    def get(self, key: str) -> Optional[str]:
        try:
            with self._lock:
                row = self._conn.execute(
                    'SELECT value, expires_at FROM match_cache WHERE cache_key = ?', (key,)
                ).fetchone()
                if row is None:
                    return None
                value, expires_at = row
                if expires_at <= self.clock():
                    with self._conn:
                        self._conn.execute('DELETE FROM match_cache WHERE cache_key = ?', (key,))
                    return None
                return value
        except sqlite3.Error as e:
            logger.warning(f"SQLite read failed for {key}: {e}")
            return None

    def set(self, key: str, value: str, ttl: int) -> bool:
        try:
            with self._lock, self._conn:
                self._conn.execute(
                    'INSERT OR REPLACE INTO match_cache (cache_key, value, expires_at) VALUES (?, ?, ?)',
                    (key, value, self.clock() + ttl),
                )
            return True
        except sqlite3.Error as e:
            logger.warning(f"SQLite write failed for {key}: {e}")
            return False

    def delete(self, key: str) -> bool:
        try:
            with self._lock, self._conn:
                cursor = self._conn.execute('DELETE FROM match_cache WHERE cache_key = ?', (key,))
            return cursor.rowcount > 0
        except sqlite3.Error as e:
            logger.warning(f"SQLite delete failed for {key}: {e}")
            return False

    def clear(self, prefix: str) -> int:
        try:
            with self._lock, self._conn:
                cursor = self._conn.execute(
                    'DELETE FROM match_cache WHERE substr(cache_key, 1, ?) = ?', (len(prefix), prefix)
                )
            return cursor.rowcount
        except sqlite3.Error as e:
            logger.warning(f"SQLite clear failed for prefix {prefix}: {e}")
            return 0

    def purge_expired(self) -> int:
        try:
            with self._lock, self._conn:
                cursor = self._conn.execute('DELETE FROM match_cache WHERE expires_at <= ?', (self.clock(),))
            return cursor.rowcount
        except sqlite3.Error as e:
            logger.warning(f"SQLite purge failed: {e}")
            return 0

    def close(self) -> None:
        with self._lock:
            self._conn.close()


class ResultCache:
    """Content-addressed cache of match results: key = prefix + md5(normalize(prompt))."""

    def __init__(self, store: CacheStore, prefix: str = DEFAULT_PREFIX, ttl: int = DEFAULT_TTL):
        self.store = store
        self.prefix = prefix
        self.ttl = ttl
        self._stats_lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @classmethod
    def from_settings(cls, settings) -> Optional['ResultCache']:
        """
        Pick a backend from MatcherSettings.

        Redis when redis_url is set and answers a PING, otherwise SQLite at
        cache_db_path (in memory if that file can't be opened). None when
        caching is disabled.
        """
        if not settings.cache_enabled:
            logger.info("Result cache disabled")
            return None
        store = None
        if settings.redis_url:
            try:
                store = RedisCacheStore.from_url(settings.redis_url)
                logger.info("Result cache backed by Redis")
            except (redis.RedisError, ValueError) as e:
                logger.warning(f"Redis unavailable ({e}), falling back to SQLite cache")
        if store is None:
            try:
                store = SQLiteCacheStore(settings.cache_db_path)
                logger.info(f"Result cache backed by SQLite at {settings.cache_db_path}")
            except sqlite3.Error as e:
                logger.warning(f"Cannot open {settings.cache_db_path} ({e}), using an in-memory SQLite cache")
                store = SQLiteCacheStore(':memory:')
        return cls(store, prefix=settings.cache_prefix, ttl=settings.cache_ttl)

    def cache_key(self, prompt: str) -> str:
        digest = hashlib.md5(normalize(prompt).encode('utf-8')).hexdigest()
        return f"{self.prefix}{digest}"

    def _lookup(self, key: str) -> Optional[CachedMatch]:
        raw = self.store.get(key)
        if raw is None:
            return None
        try:
            return CachedMatch.model_validate_json(raw)
        except ValidationError:
            logger.debug(f"Discarding malformed cache entry {key}")
            self.store.delete(key)
            return None

    def get(self, prompt: str) -> Optional[CachedMatch]:
        cached = self._lookup(self.cache_key(prompt))
        with self._stats_lock:
            if cached is None:
                self.misses += 1
            else:
                self.hits += 1
        return cached

    def set(self, prompt: str, css: Dict[str, str], confidence: int, matched_patterns: List[str]) -> bool:
        entry = CachedMatch(css=dict(css), confidence=confidence, matched_patterns=list(matched_patterns))
        return self.store.set(self.cache_key(prompt), entry.model_dump_json(), self.ttl)

    def is_cached(self, prompt: str) -> bool:
        """Check for a valid entry without touching the hit/miss counters."""
        return self._lookup(self.cache_key(prompt)) is not None

    def invalidate(self, prompt: str) -> bool:
        return self.store.delete(self.cache_key(prompt))

    def clear(self) -> int:
        """Best effort: remove every entry under this cache's prefix and reset the counters."""
        removed = self.store.clear(self.prefix)
        with self._stats_lock:
            self.hits = 0
            self.misses = 0
        logger.info(f"Cleared {removed} cached results")
        return removed

    def stats(self) -> Dict[str, float]:
        with self._stats_lock:
            total = self.hits + self.misses
            return {
                'hits': self.hits,
                'misses': self.misses,
                'hit_rate': round(self.hits / total, 4) if total else 0.0,
            }
