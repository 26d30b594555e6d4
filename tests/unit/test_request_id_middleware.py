"""Tests for request id handling."""

import uuid

import pytest

from cms.middleware.request_id import resolve_request_id


@pytest.mark.parametrize("raw", ["abc-123", "A_b", "x" * 64])
def test_safe_ids_are_kept(raw: str) -> None:
    assert resolve_request_id(raw) == raw


@pytest.mark.parametrize("raw", [None, "", "has space", "x" * 65, "bad\nline", "semi;colon"])
def test_unsafe_ids_are_replaced(raw) -> None:
    generated = resolve_request_id(raw)
    assert generated != raw
    uuid.UUID(generated)
