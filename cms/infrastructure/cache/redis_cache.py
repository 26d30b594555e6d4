"""Redis-based read-through cache for content entries.

Provides async Redis caching with TTL support. Every operation degrades to
a no-op when Redis is unreachable, so the content store keeps working
directly against Firestore.
"""

from __future__ import annotations

import json
import logging
from typing import Any

import redis.asyncio as redis

from cms.core.config import get_settings

logger = logging.getLogger(__name__)


class CacheService:
    """Async Redis cache service with TTL support.

    Uses cms.core.config for connection settings. Call connect() at
    startup and disconnect() at shutdown.
    """

    def __init__(self, redis_client: redis.Redis | None = None) -> None:
        """Initialize cache service.

        Args:
            redis_client: Optional Redis client for testing or DI.
        """
        self.redis = redis_client
        self.settings = get_settings()
        self._connected = redis_client is not None

    async def connect(self) -> None:
        """Establish Redis connection. Call on app startup."""
        if self.redis is not None:
            return
        try:
            self.redis = redis.Redis(
                host=self.settings.redis_host,
                port=self.settings.redis_port,
                db=self.settings.redis_db,
                password=(
                    self.settings.redis_password.get_secret_value()
                    if self.settings.redis_password
                    else None
                ),
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True,
            )
            await self.redis.ping()
            self._connected = True
            logger.info(
                "Redis cache connected: %s:%s",
                self.settings.redis_host,
                self.settings.redis_port,
            )
        except (redis.ConnectionError, redis.TimeoutError) as e:
            logger.warning("Redis connection failed: %s. Cache disabled.", e)
            self._connected = False
            self.redis = None

    async def disconnect(self) -> None:
        """Close Redis connection. Call on app shutdown."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            self._connected = False
            logger.info("Redis cache disconnected")

    def is_available(self) -> bool:
        """Return True if Redis is connected and usable."""
        return self._connected and self.redis is not None

    async def get(self, key: str) -> Any | None:
        """Return cached value (JSON-deserialized) or None if missing/unavailable."""
        if not self.is_available() or self.redis is None:
            return None
        try:
            value = await self.redis.get(key)
        except redis.RedisError:
            logger.warning("Cache get error for key %s", key, exc_info=True)
            return None
        if value is None:
            logger.debug("Cache MISS: %s", key)
            return None
        logger.debug("Cache HIT: %s", key)
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable cache entry %s", key)
            return None

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL. Returns True on success."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            await self.redis.setex(key, ttl, json.dumps(value))
            logger.debug("Cache SET: %s (TTL: %ss)", key, ttl)
            return True
        except redis.RedisError:
            logger.warning("Cache set error for key %s", key, exc_info=True)
            return False

    async def delete(self, key: str) -> bool:
        """Remove key from cache. Returns True if the command ran."""
        if not self.is_available() or self.redis is None:
            return False
        try:
            await self.redis.delete(key)
            logger.debug("Cache DELETE: %s", key)
            return True
        except redis.RedisError:
            logger.warning("Cache delete error for key %s", key, exc_info=True)
            return False
