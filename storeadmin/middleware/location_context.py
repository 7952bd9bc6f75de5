"""Location context middleware.

Sets the admin's current location from the X-Location-ID header so that
relation option queries are narrowed to that location. Cleared after the
request so the value never leaks into another request on the same worker.
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from storeadmin.core.config import get_settings
from storeadmin.core.location_context import set_location_id

logger = logging.getLogger(__name__)


def _location_id_from_request(request: Request) -> int | None:
    """Return location_id from the location header, or None when absent or not an integer."""
    settings = get_settings()
    raw = request.headers.get(settings.location_header_name)
    if raw is None or not raw.strip():
        return None
    raw = raw.strip()
    if not raw.isdigit():
        logger.warning("Ignoring invalid %s header: %r", settings.location_header_name, raw[:32])
        return None
    return int(raw)


def LocationContextMiddleware(app: Callable) -> Callable:
    """Set location context from header before route runs."""

    class _Middleware(BaseHTTPMiddleware):
        async def dispatch(self, request: Request, call_next: Callable) -> Response:
            set_location_id(_location_id_from_request(request))
            try:
                return await call_next(request)
            finally:
                set_location_id(None)

    return _Middleware(app)
