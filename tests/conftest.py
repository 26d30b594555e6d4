"""Pytest configuration and fixtures for the content service.

Firestore is replaced by an in-memory client with the same collection /
document surface as the REST client, so repositories, services and the
HTTP app all run without network access. Tests that talk to a real
project are marked requires_firestore and skip when it is not configured.
"""

from __future__ import annotations

import copy
import os
from collections.abc import AsyncIterator
from datetime import UTC, datetime, timedelta
from typing import Any

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from jose import jwt

from cms.core.config import get_settings
from cms.domain.exceptions import TranslationException
from cms.infrastructure.firebase._rest_client import DocumentSnapshot

TEST_SECRET_KEY = "test-secret-key-for-jwt-signing"
TEST_ADMIN_EMAIL = "admin@example.com"


def _deep_merge(target: dict[str, Any], data: dict[str, Any]) -> None:
    """Apply data onto target the way an updateMask of its leaf paths would."""
    for key, value in data.items():
        if isinstance(value, dict) and value and isinstance(target.get(key), dict):
            _deep_merge(target[key], value)
        else:
            target[key] = copy.deepcopy(value)


class FakeFirestoreClient:
    """In-memory stand-in for FirestoreRESTClient.

    Set fail_reads / fail_writes to make the next calls raise a transport
    error; writes_before_failure lets that many writes succeed first.
    write_error, when set, is raised by writes instead.
    """

    def __init__(self) -> None:
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.fail_reads = False
        self.fail_writes = False
        self.writes_before_failure: int | None = None
        self.write_error: Exception | None = None
        self.write_count = 0
        self.read_count = 0

    def collection(self, collection_id: str) -> FakeCollection:
        return FakeCollection(self, self.collections.setdefault(collection_id, {}))

    def _check_write(self) -> None:
        if self.write_error is not None:
            raise self.write_error
        if self.fail_writes:
            raise httpx.ConnectError("firestore unreachable")
        if self.writes_before_failure is not None:
            if self.writes_before_failure <= 0:
                raise httpx.ConnectError("firestore unreachable")
            self.writes_before_failure -= 1
        self.write_count += 1

    def _check_read(self) -> None:
        if self.fail_reads:
            raise httpx.ConnectError("firestore unreachable")
        self.read_count += 1

    async def aclose(self) -> None:
        return None


class FakeDocument:
    def __init__(self, client: FakeFirestoreClient, docs: dict[str, dict], doc_id: str):
        self._client = client
        self._docs = docs
        self.id = doc_id

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        self._client._check_write()
        if merge and self.id in self._docs:
            _deep_merge(self._docs[self.id], data)
        else:
            self._docs[self.id] = copy.deepcopy(data)

    async def get(self) -> DocumentSnapshot | None:
        self._client._check_read()
        data = self._docs.get(self.id)
        if data is None:
            return None
        return DocumentSnapshot(self.id, copy.deepcopy(data))

    async def delete(self) -> None:
        self._client._check_write()
        self._docs.pop(self.id, None)


class FakeCollection:
    def __init__(self, client: FakeFirestoreClient, docs: dict[str, dict]):
        self._client = client
        self._docs = docs

    def document(self, document_id: str) -> FakeDocument:
        return FakeDocument(self._client, self._docs, document_id)

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        self._client._check_read()
        for doc_id, data in list(self._docs.items()):
            yield DocumentSnapshot(doc_id, copy.deepcopy(data))


class FakeTranslator:
    """Translation double: returns canned text, or raises when fail is set."""

    def __init__(self, translations: dict[str, str] | None = None, fail: bool = False):
        self.translations = translations or {}
        self.fail = fail
        self.calls: list[tuple[str, str, str]] = []

    async def translate(self, text: str, source_lang: str, target_lang: str) -> str:
        self.calls.append((text, source_lang, target_lang))
        if self.fail:
            raise TranslationException(source_lang, target_lang, "service unreachable")
        return self.translations.get(text, f"[{target_lang}] {text}")


def make_token(
    sub: str = "user-1",
    email: str | None = None,
    is_admin: bool | None = None,
    expires_in: timedelta = timedelta(minutes=15),
) -> str:
    """Sign a token the way the site's identity provider would."""
    claims: dict[str, Any] = {"sub": sub, "exp": datetime.now(UTC) + expires_in}
    if email is not None:
        claims["email"] = email
    if is_admin is not None:
        claims["is_admin"] = is_admin
    return jwt.encode(claims, TEST_SECRET_KEY, algorithm="HS256")


@pytest.fixture(autouse=True)
def test_settings(monkeypatch: pytest.MonkeyPatch):
    """Deterministic settings: JWT secret, one admin email, no Redis or telemetry."""
    monkeypatch.setenv("SECRET_KEY", TEST_SECRET_KEY)
    monkeypatch.setenv("ADMIN_EMAILS", TEST_ADMIN_EMAIL)
    monkeypatch.setenv("REDIS_ENABLED", "false")
    monkeypatch.setenv("TELEMETRY_ENABLED", "false")
    monkeypatch.setenv("GOOGLE_API_KEY", "test-google-key")
    monkeypatch.setenv("NEXT_PUBLIC_FIREBASE_PROJECT_ID", "demo-project")
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_KEY", raising=False)
    monkeypatch.delenv("FIREBASE_SERVICE_ACCOUNT_PATH", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


@pytest.fixture
def firestore() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture
def translator() -> FakeTranslator:
    return FakeTranslator({"Bienvenida": "Welcome"})


@pytest.fixture
async def client(
    monkeypatch: pytest.MonkeyPatch,
    firestore: FakeFirestoreClient,
    translator: FakeTranslator,
) -> AsyncClient:
    """Async HTTP client against a fresh app backed by the in-memory Firestore."""
    from cms.api.v1.dependencies import get_translator
    from cms.core.limiter import limiter
    from cms.main import create_app

    monkeypatch.setattr(
        "cms.api.v1.dependencies.services.get_firestore_client", lambda: firestore
    )
    monkeypatch.setattr(
        "cms.api.v1.endpoints.health.get_firestore_client", lambda: firestore
    )
    monkeypatch.setattr(limiter, "enabled", False)

    app = create_app()
    app.dependency_overrides[get_translator] = lambda: translator
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(email=TEST_ADMIN_EMAIL)}"}


@pytest.fixture
def visitor_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {make_token(email='visitor@example.com')}"}


@pytest.fixture
async def live_firestore(monkeypatch: pytest.MonkeyPatch):
    """Real Firestore client. Skips when no service account is configured."""
    key = os.environ.get("LIVE_FIREBASE_SERVICE_ACCOUNT_KEY")
    path = os.environ.get("LIVE_FIREBASE_SERVICE_ACCOUNT_PATH")
    if not (key or path):
        pytest.skip(
            "Firestore not configured: set LIVE_FIREBASE_SERVICE_ACCOUNT_KEY or "
            "LIVE_FIREBASE_SERVICE_ACCOUNT_PATH to run against a real project"
        )
    from cms.infrastructure.firebase import (
        close_firebase,
        get_firestore_client,
        init_firebase,
    )

    if key:
        monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_KEY", key)
    else:
        monkeypatch.setenv("FIREBASE_SERVICE_ACCOUNT_PATH", path)
    get_settings.cache_clear()
    if not init_firebase():
        pytest.skip("Firestore client could not be initialized")
    yield get_firestore_client()
    await close_firebase()


@pytest.fixture
def token_factory():
    """Return make_token so tests can sign tokens with custom claims."""
    return make_token
