"""Redis-backed expiring snapshot cache.

Holds page-reload recovery snapshots (session inputs, muscle selection) for the
active editing session. This is a best-effort cache, not storage:

- Entries expire after a fixed TTL (24h by default). Redis expiry is set on
  every write, and the envelope's own `expires_at` is checked on read so a
  stale entry is treated as absent even if Redis kept it.
- Redis failures and corrupt entries are logged and treated as absent. No
  method raises.
"""

import json
import time
from typing import Any

import redis
from loguru import logger

from session_resolver.config.settings import settings

SESSION_INPUTS_KEY = "session_inputs:{session_id}"
MUSCLE_SELECTION_KEY = "muscle_selection:{session_id}"


def _get_redis_client() -> redis.Redis | None:
    """Get Redis client instance.

    Returns:
        Redis client if available, None otherwise (best-effort)
    """
    try:
        return redis.from_url(settings.redis_url, decode_responses=True)
    except Exception as e:
        logger.bind(error=str(e)).warning("Failed to connect to Redis for snapshot cache")
        return None


class SnapshotCache:
    """Expiring JSON snapshot cache keyed by string.

    Attributes:
        ttl_seconds: Lifetime of each entry
    """

    def __init__(self, client: redis.Redis | None = None, ttl_seconds: int | None = None):
        self._client = client
        self.ttl_seconds = ttl_seconds if ttl_seconds is not None else settings.session_cache_ttl_seconds

    def _redis(self) -> redis.Redis | None:
        if self._client is None:
            self._client = _get_redis_client()
        return self._client

    def save(self, key: str, data: dict[str, Any]) -> None:
        """Write a snapshot with expiry. Failures are logged, never raised."""
        client = self._redis()
        if client is None:
            logger.bind(key=key).warning("Redis unavailable, skipping snapshot save")
            return

        now = time.time()
        envelope = {
            "data": data,
            "saved_at": now,
            "expires_at": now + self.ttl_seconds,
        }
        try:
            client.setex(key, self.ttl_seconds, json.dumps(envelope))
            logger.bind(key=key).debug("Saved session snapshot")
        except redis.RedisError as e:
            logger.bind(key=key, error=str(e)).warning("Failed to save session snapshot (non-fatal)")

    def load(self, key: str) -> dict[str, Any] | None:
        """Read a snapshot.

        Returns:
            Snapshot data, or None if missing, expired, corrupt, or Redis is unavailable
        """
        client = self._redis()
        if client is None:
            return None

        try:
            raw = client.get(key)
        except redis.RedisError as e:
            logger.bind(key=key, error=str(e)).warning("Failed to load session snapshot (non-fatal)")
            return None

        if not raw:
            return None

        if not isinstance(raw, str):
            logger.bind(key=key, raw_type=type(raw).__name__).warning("Unexpected type from Redis get")
            return None

        try:
            envelope = json.loads(raw)
            expires_at = float(envelope["expires_at"])
            data = envelope["data"]
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            logger.bind(key=key, error=str(e)).warning("Discarding corrupt session snapshot")
            self.clear(key)
            return None

        if time.time() > expires_at:
            logger.bind(key=key).debug("Session snapshot expired")
            self.clear(key)
            return None

        if not isinstance(data, dict):
            return None

        return data

    def clear(self, key: str) -> None:
        client = self._redis()
        if client is None:
            return
        try:
            client.delete(key)
        except redis.RedisError as e:
            logger.bind(key=key, error=str(e)).warning("Failed to clear session snapshot (non-fatal)")
