"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the
same instance without circular imports. Limit strings live here.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

limiter = Limiter(key_func=get_remote_address)

WRITE_ENDPOINT_LIMIT = "120/minute"

limit_writes = limiter.limit(WRITE_ENDPOINT_LIMIT)
