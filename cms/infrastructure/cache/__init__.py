"""Cache: Redis service and cache key utilities.

Used by the Firestore content store as a read-through cache.
"""

from cms.infrastructure.cache.cache_protocol import CacheProtocol
from cms.infrastructure.cache.keys import content_key
from cms.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheProtocol",
    "CacheService",
    "content_key",
]
