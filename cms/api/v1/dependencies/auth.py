"""Admin flag dependencies.

Identity is established elsewhere; this service only verifies the bearer
token it is handed and derives the "may edit" flag from its claims.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from cms.domain.exceptions import AuthorizationException
from cms.infrastructure.security.jwt import is_admin_claims, verify_token

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


async def get_is_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> bool:
    """Return True if the bearer token grants edit rights; anonymous callers are not admins."""
    if credentials is None:
        return False
    try:
        payload = verify_token(credentials.credentials)
    except ValueError as e:
        logger.debug("Ignoring bearer token: %s", e)
        return False
    return is_admin_claims(payload)


async def require_admin(is_admin: Annotated[bool, Depends(get_is_admin)]) -> None:
    """Raise AuthorizationException unless the caller is an administrator."""
    if not is_admin:
        raise AuthorizationException("administer content")
