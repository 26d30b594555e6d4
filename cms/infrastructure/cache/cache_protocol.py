"""Cache protocol for the content store (DIP)."""

from typing import Any, Protocol


class CacheProtocol(Protocol):
    """Protocol for cache backends (e.g. Redis) used under the content store."""

    def is_available(self) -> bool:
        """Return True if cache is connected and usable."""
        ...

    async def get(self, key: str) -> Any:
        """Return cached value or None."""
        ...

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        """Store value with TTL in seconds."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove key from cache."""
        ...
