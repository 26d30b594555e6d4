"""JWT verification for the admin edit flag.

Tokens are issued by the site's identity provider and signed with
SECRET_KEY. Uses cms.core.config for secret and algorithm.
"""

from typing import Any

from jose import JWTError, jwt

from cms.core.config import get_settings


def verify_token(token: str) -> dict[str, Any]:
    """Verify and decode a JWT. Returns the payload.

    Enforces presence of exp and sub.

    Args:
        token: JWT string (e.g. from Authorization header).

    Returns:
        Decoded payload dict.

    Raises:
        ValueError: If token is invalid, expired, or missing required claims.
    """
    settings = get_settings()
    secret = settings.secret_key.get_secret_value()
    if not secret:
        raise ValueError("Token verification is not configured")
    try:
        payload = jwt.decode(
            token,
            secret,
            algorithms=[settings.algorithm],
            options={"require_exp": True, "require_sub": True},
        )
    except JWTError as e:
        raise ValueError(f"Invalid token: {e!s}") from e
    if "sub" not in payload:
        raise ValueError("Token missing required claim: sub")
    return payload


def is_admin_claims(payload: dict[str, Any]) -> bool:
    """Return True if the decoded claims grant edit rights.

    Either an explicit ``is_admin`` claim or an ``email`` listed in
    ADMIN_EMAILS.
    """
    if payload.get("is_admin") is True:
        return True
    email = payload.get("email")
    if isinstance(email, str) and email.strip():
        return email.strip().lower() in get_settings().admin_email_set
    return False
