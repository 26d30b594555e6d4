"""Tests for token verification and the admin edit flag."""

from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from cms.core.config import get_settings
from cms.infrastructure.security import is_admin_claims, verify_token


def test_verify_token_returns_claims(token_factory) -> None:
    payload = verify_token(token_factory(sub="u-1", email="a@b.test"))
    assert payload["sub"] == "u-1"
    assert payload["email"] == "a@b.test"


def test_expired_token_rejected(token_factory) -> None:
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token_factory(expires_in=timedelta(minutes=-1)))


def test_token_signed_with_other_secret_rejected() -> None:
    token = jwt.encode(
        {"sub": "u", "exp": datetime.now(UTC) + timedelta(minutes=5), "is_admin": True},
        "some-other-secret",
        algorithm="HS256",
    )
    with pytest.raises(ValueError, match="Invalid token"):
        verify_token(token)


def test_unconfigured_secret_rejects_everything(token_factory, monkeypatch) -> None:
    token = token_factory()
    monkeypatch.setenv("SECRET_KEY", "")
    get_settings.cache_clear()
    with pytest.raises(ValueError, match="not configured"):
        verify_token(token)


@pytest.mark.parametrize(
    "claims, expected",
    [
        ({"sub": "u", "is_admin": True}, True),
        ({"sub": "u", "is_admin": "true"}, False),
        ({"sub": "u", "email": "Admin@Example.com "}, True),
        ({"sub": "u", "email": "visitor@example.com"}, False),
        ({"sub": "u"}, False),
    ],
)
def test_is_admin_claims(claims, expected) -> None:
    assert is_admin_claims(claims) is expected
