"""Security: JWT verification for the admin edit flag."""

from cms.infrastructure.security.jwt import is_admin_claims, verify_token

__all__ = [
    "is_admin_claims",
    "verify_token",
]
