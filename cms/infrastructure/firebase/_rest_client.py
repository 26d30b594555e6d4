"""Thin Firestore REST API client (no firebase-admin).

Uses google-auth for service account tokens and Firestore REST v1.
All HTTP calls use httpx.AsyncClient so they do not block the event loop.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import AsyncIterator
from typing import Any

import httpx
from google.auth.exceptions import GoogleAuthError

from cms.infrastructure.firebase._rest_encoding import (
    decode_document,
    encode_document,
    merge_field_paths,
)

_FIRESTORE_SCOPE = "https://www.googleapis.com/auth/datastore"
_BASE = "https://firestore.googleapis.com/v1"
_LIST_PAGE_SIZE = 300

# What a call can raise when Firestore or the token endpoint is unreachable.
FIRESTORE_ERRORS = (httpx.HTTPError, GoogleAuthError)


def _get_credentials(key_dict: dict):
    """Return google.oauth2.service_account.Credentials for Firestore."""
    from google.oauth2 import service_account

    return service_account.Credentials.from_service_account_info(
        key_dict, scopes=[_FIRESTORE_SCOPE]
    )


def _get_access_token(credentials) -> str:
    from google.auth.transport.requests import Request

    if not credentials.valid:
        credentials.refresh(Request())
    return credentials.token


async def _request_async(
    client: httpx.AsyncClient,
    url: str,
    method: str = "GET",
    body: dict | None = None,
    access_token: str | None = None,
    params: list[tuple[str, str]] | None = None,
) -> dict | None:
    """Perform async HTTP request to Firestore REST API. 404 returns None."""
    headers = {"Content-Type": "application/json"}
    if access_token:
        headers["Authorization"] = f"Bearer {access_token}"
    if method == "GET":
        resp = await client.get(url, headers=headers, params=params)
    elif method == "PATCH":
        resp = await client.patch(url, headers=headers, json=body, params=params)
    elif method == "DELETE":
        resp = await client.delete(url, headers=headers)
    else:
        raise ValueError(f"Unsupported method: {method!r}")
    if resp.status_code == 404:
        return None
    if resp.status_code not in (200, 204):
        resp.raise_for_status()
    if method == "DELETE":
        return {}
    raw = resp.content
    return json.loads(raw.decode()) if raw else {}


def _doc_id(document: dict) -> str:
    name = document.get("name", "")
    return name.split("/")[-1] if name else ""


class DocumentReference:
    """Reference to a single document; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path

    @property
    def id(self) -> str:
        return self._path.split("/")[-1]

    async def set(self, data: dict[str, Any], merge: bool = False) -> None:
        """Create or overwrite the document.

        With merge=True only the leaf fields present in data are written
        (PATCH with updateMask); every other stored field is kept.
        """
        params = None
        if merge:
            params = [("updateMask.fieldPaths", p) for p in merge_field_paths(data)]
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="PATCH",
            body=encode_document(data),
            access_token=await self._client.get_token(),
            params=params,
        )

    async def get(self) -> DocumentSnapshot | None:
        """Fetch the document; returns None if not found."""
        out = await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            access_token=await self._client.get_token(),
        )
        if not out:
            return None
        return DocumentSnapshot(self.id, decode_document(out))

    async def delete(self) -> None:
        """Delete the document. Idempotent if document is already missing (404)."""
        await _request_async(
            self._client._http,
            f"{_BASE}/{self._path}",
            method="DELETE",
            access_token=await self._client.get_token(),
        )


class DocumentSnapshot:
    """Snapshot of a document (id + data)."""

    def __init__(self, id_: str, data: dict):
        self.id = id_
        self._data = data

    def to_dict(self) -> dict:
        return self._data


class CollectionReference:
    """Reference to a collection; matches firestore API style."""

    def __init__(self, client: "FirestoreRESTClient", path: str):
        self._client = client
        self._path = path.rstrip("/")

    def document(self, document_id: str) -> DocumentReference:
        return DocumentReference(self._client, f"{self._path}/{document_id}")

    async def stream(self) -> AsyncIterator[DocumentSnapshot]:
        """List every document in the collection, following nextPageToken."""
        page_token: str | None = None
        while True:
            params = [("pageSize", str(_LIST_PAGE_SIZE))]
            if page_token:
                params.append(("pageToken", page_token))
            out = await _request_async(
                self._client._http,
                f"{_BASE}/{self._path}",
                access_token=await self._client.get_token(),
                params=params,
            )
            if not out:
                return
            for doc in out.get("documents", []):
                yield DocumentSnapshot(_doc_id(doc), decode_document(doc))
            page_token = out.get("nextPageToken")
            if not page_token:
                return


class FirestoreRESTClient:
    """Lightweight Firestore client using REST API (no firebase-admin)."""

    def __init__(
        self,
        project_id: str,
        credentials,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._project_id = project_id
        self._credentials = credentials
        self._prefix = f"projects/{project_id}/databases/(default)/documents"
        self._http = http_client if http_client is not None else httpx.AsyncClient(timeout=30.0)
        self._owns_http = http_client is None

    async def aclose(self) -> None:
        """Close the HTTP client only if we created it (do not close injected client)."""
        if self._owns_http:
            await self._http.aclose()

    async def get_token(self) -> str:
        """Return a valid access token; refreshes in thread pool to avoid blocking."""
        return await asyncio.to_thread(_get_access_token, self._credentials)

    def collection(self, collection_id: str) -> CollectionReference:
        return CollectionReference(self, f"{self._prefix}/{collection_id}")
