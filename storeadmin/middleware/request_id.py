"""Request ID middleware.

Forwards a client X-Request-ID (or generates one), exposes it on
request.state.request_id and the current span, and echoes it on the response.
Raw ASGI so streaming responses are untouched.
"""

import re
import uuid
from typing import Callable

from storeadmin.shared.telemetry.tracing import add_span_attributes

REQUEST_ID_MAX_LENGTH = 64
# Only ids safe to write into log lines are forwarded.
_REQUEST_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def _header(scope: dict, name: str) -> str | None:
    wanted = name.lower().encode()
    for key, value in scope.get("headers", []):
        if key.lower() == wanted:
            return value.decode("latin-1")
    return None


def request_id_from_header(raw: str | None) -> str:
    """Return the client id when well-formed, otherwise a new UUID4."""
    if raw is not None:
        raw = raw.strip()
        if _REQUEST_ID_PATTERN.match(raw):
            return raw
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to each HTTP request and response."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = request_id_from_header(_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        add_span_attributes(**{"http.request_id": request_id})

        async def send_with_header(message: dict) -> None:
            if message["type"] == "http.response.start":
                message["headers"] = [
                    *message.get("headers", []),
                    (header_name.lower().encode(), request_id.encode()),
                ]
            await send(message)

        await app(scope, receive, send_with_header)

    return asgi_app
