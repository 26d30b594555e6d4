"""Per-page editable context: the admin flag plus a shared content cache.

One EditableContext is built per page render (or admin session) and passed
by reference to every EditableFieldController mounted on that page. The
cache holds the last known server value of each fetched key; it is never
persisted and is rebuilt from the content store on the next page load.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import Any, TypeVar

from cms.application.interfaces.repositories import IContentStore
from cms.domain.value_objects.content import ContentValue

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EditableContextCache:
    """In-memory id -> ContentValue map shared by the fields of one page."""

    def __init__(self) -> None:
        self._entries: dict[str, ContentValue] = {}

    def get(self, content_id: str) -> ContentValue | None:
        return self._entries.get(content_id)

    def set(self, content_id: str, value: ContentValue) -> None:
        self._entries[content_id] = value

    def has(self, content_id: str) -> bool:
        return content_id in self._entries

    def discard(self, content_id: str) -> None:
        """Forget one key (rollback of an optimistic insert)."""
        self._entries.pop(content_id, None)

    def snapshot(self) -> dict[str, ContentValue]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class EditableContext:
    """Admin flag, shared cache and tracked saves for one page."""

    def __init__(
        self,
        store: IContentStore,
        is_admin: bool = False,
        cache: EditableContextCache | None = None,
    ) -> None:
        self._store = store
        self._is_admin = is_admin
        self._cache = cache if cache is not None else EditableContextCache()
        self._fetches: dict[str, asyncio.Task[ContentValue | None]] = {}
        self._writes: set[asyncio.Task[Any]] = set()

    @property
    def is_admin(self) -> bool:
        return self._is_admin

    @property
    def cache(self) -> EditableContextCache:
        return self._cache

    @property
    def store(self) -> IContentStore:
        return self._store

    @property
    def pending_writes(self) -> int:
        return len(self._writes)

    async def fetch(self, content_id: str) -> ContentValue | None:
        """Return the cached value, or load it from the store once.

        Concurrent fetches of the same key share one store read. Absent
        keys are not cached, so a later fetch asks the store again.
        """
        if self._cache.has(content_id):
            return self._cache.get(content_id)

        task = self._fetches.get(content_id)
        if task is None:
            task = asyncio.ensure_future(self._load(content_id))
            self._fetches[content_id] = task
            task.add_done_callback(
                lambda t, key=content_id: self._forget_fetch(key, t)
            )
        return await asyncio.shield(task)

    def _forget_fetch(self, content_id: str, task: asyncio.Task) -> None:
        if self._fetches.get(content_id) is task:
            del self._fetches[content_id]

    async def _load(self, content_id: str) -> ContentValue | None:
        value = await self._store.get(content_id)
        # An edit that landed while the read was in flight wins.
        if self._cache.has(content_id):
            return self._cache.get(content_id)
        if value is not None:
            self._cache.set(content_id, value)
        return value

    async def reload(self, content_id: str) -> ContentValue | None:
        """Read content_id from the store, bypassing the page cache."""
        return await self._store.get(content_id)

    def track(self, coro: Coroutine[Any, Any, T], name: str) -> asyncio.Task[T]:
        """Run coro as a page-owned task that drain() waits for."""
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._writes.add(task)
        task.add_done_callback(self._writes.discard)
        return task

    async def drain(self) -> None:
        """Wait for every in-flight save (e.g. before the page is torn down)."""
        if not self._writes:
            return
        results = await asyncio.gather(*list(self._writes), return_exceptions=True)
        failed = sum(1 for r in results if isinstance(r, BaseException))
        if failed:
            logger.warning("%d content write(s) failed while draining", failed)
