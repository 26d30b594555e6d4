"""Tests for the Firestore content store over the in-memory client."""

from typing import Any

import pytest
from google.auth.exceptions import RefreshError

from cms.domain.exceptions import ContentStoreException
from cms.domain.value_objects.content import LocalizedValue, ScalarValue
from cms.infrastructure.firebase.collections import COLLECTION_CONTENT
from cms.infrastructure.firebase.repositories import FirestoreContentStore


class DictCache:
    """CacheProtocol double backed by a dict."""

    def __init__(self, available: bool = True) -> None:
        self.data: dict[str, Any] = {}
        self.available = available

    def is_available(self) -> bool:
        return self.available

    async def get(self, key: str) -> Any:
        return self.data.get(key)

    async def set(self, key: str, value: Any, ttl: int = 300) -> bool:
        self.data[key] = value
        return True

    async def delete(self, key: str) -> bool:
        return self.data.pop(key, None) is not None


async def test_put_then_get_round_trips_language_map(firestore) -> None:
    store = FirestoreContentStore(firestore)
    await store.put("navHome", LocalizedValue({"es": "Inicio", "en": "Home", "visible": True}))

    assert firestore.collections[COLLECTION_CONTENT]["navHome"] == {
        "value": {"es": "Inicio", "en": "Home", "visible": True}
    }
    value = await store.get("navHome")
    assert value == LocalizedValue({"es": "Inicio", "en": "Home", "visible": True})


async def test_legacy_string_reads_as_scalar(firestore) -> None:
    firestore.collection(COLLECTION_CONTENT)
    firestore.collections[COLLECTION_CONTENT]["heroTitle"] = {"value": "Sanar"}
    store = FirestoreContentStore(firestore)
    assert await store.get("heroTitle") == ScalarValue("Sanar")


async def test_get_missing_returns_none(firestore) -> None:
    assert await FirestoreContentStore(firestore).get("nope") is None


async def test_get_fails_soft_on_transport_error(firestore) -> None:
    store = FirestoreContentStore(firestore)
    await store.put("navHome", LocalizedValue({"es": "Inicio"}))
    firestore.fail_reads = True
    assert await store.get("navHome") is None


async def test_get_malformed_value_returns_none(firestore) -> None:
    firestore.collection(COLLECTION_CONTENT)
    firestore.collections[COLLECTION_CONTENT]["bad"] = {"value": 12}
    assert await FirestoreContentStore(firestore).get("bad") is None


async def test_unconfigured_store_reads_absent_and_refuses_writes() -> None:
    store = FirestoreContentStore(None)
    assert await store.get("navHome") is None
    with pytest.raises(ContentStoreException):
        await store.put("navHome", LocalizedValue({"es": "Inicio"}))
    with pytest.raises(ContentStoreException):
        await store.list_all()


async def test_put_raises_on_transport_error(firestore) -> None:
    firestore.fail_writes = True
    with pytest.raises(ContentStoreException) as exc_info:
        await FirestoreContentStore(firestore).put("navHome", ScalarValue("x"))
    assert exc_info.value.details["document_id"] == "navHome"


async def test_token_refresh_failure_is_a_store_error(firestore) -> None:
    store = FirestoreContentStore(firestore)
    firestore.write_error = RefreshError("invalid_grant")
    with pytest.raises(ContentStoreException):
        await store.put("navHome", ScalarValue("x"))
    with pytest.raises(ContentStoreException):
        await store.delete("navHome")


async def test_delete_is_idempotent(firestore) -> None:
    store = FirestoreContentStore(firestore)
    await store.put("navHome", ScalarValue("x"))
    await store.delete("navHome")
    await store.delete("navHome")
    assert await store.get("navHome") is None


async def test_list_all_sorted_and_skips_malformed(firestore) -> None:
    store = FirestoreContentStore(firestore)
    await store.put("zeta", ScalarValue("z"))
    await store.put("alpha", LocalizedValue({"es": "a"}))
    firestore.collections[COLLECTION_CONTENT]["broken"] = {"other": 1}

    entries = await store.list_all()
    assert [e.id for e in entries] == ["alpha", "zeta"]


async def test_cache_serves_reads_after_first_fetch(firestore) -> None:
    cache = DictCache()
    store = FirestoreContentStore(firestore, cache=cache)
    await store.put("navHome", LocalizedValue({"es": "Inicio"}))
    reads_before = firestore.read_count

    assert await store.get("navHome") == LocalizedValue({"es": "Inicio"})
    assert firestore.read_count == reads_before


async def test_delete_evicts_cache(firestore) -> None:
    cache = DictCache()
    store = FirestoreContentStore(firestore, cache=cache)
    await store.put("navHome", ScalarValue("x"))
    await store.delete("navHome")
    assert cache.data == {}
    assert await store.get("navHome") is None


async def test_unavailable_cache_is_bypassed(firestore) -> None:
    cache = DictCache(available=False)
    store = FirestoreContentStore(firestore, cache=cache)
    await store.put("navHome", ScalarValue("x"))
    assert cache.data == {}
    assert await store.get("navHome") == ScalarValue("x")


async def test_ids_with_separator_are_not_cached(firestore) -> None:
    cache = DictCache()
    store = FirestoreContentStore(firestore, cache=cache)
    await store.put("a:b", ScalarValue("x"))
    assert cache.data == {}
    assert await store.get("a:b") == ScalarValue("x")
