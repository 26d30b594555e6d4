"""Request ID middleware.

Forwards the caller's X-Request-ID (or generates one), exposes it as
request.state.request_id, and echoes it on the response. Client values
are restricted to a short safe alphabet so they can be logged verbatim.
Raw ASGI so streaming responses pass through untouched.
"""

import re
import uuid
from typing import Callable

REQUEST_ID_MAX_LENGTH = 64
REQUEST_ID_ALLOWED_PATTERN = re.compile(
    r"^[a-zA-Z0-9_-]{1," + str(REQUEST_ID_MAX_LENGTH) + r"}$"
)


def _header_value(scope: dict, name: str) -> str | None:
    """First value of header name (case-insensitive) from an ASGI scope."""
    want = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == want:
            return value.decode("utf-8", errors="replace")
    return None


def resolve_request_id(raw: str | None) -> str:
    """Return raw when it is a safe id, else a fresh UUID4."""
    candidate = (raw or "").strip()
    if REQUEST_ID_ALLOWED_PATTERN.match(candidate):
        return candidate
    return str(uuid.uuid4())


class RequestIDMiddleware:
    """Attach a request id to every HTTP request and response."""

    def __init__(self, app: Callable, header_name: str = "X-Request-ID") -> None:
        self.app = app
        self.header_name = header_name

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return
        request_id = resolve_request_id(_header_value(scope, self.header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        header = (self.header_name.lower().encode(), request_id.encode())

        async def send_with_id(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [*message.get("headers", []), header]
            await send(message)

        await self.app(scope, receive, send_with_id)
