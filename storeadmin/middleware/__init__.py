"""HTTP middleware: request ID and location context.

Applied in main app; order matters (first added = outermost).
Import and use from storeadmin.main.
"""

from storeadmin.middleware.location_context import LocationContextMiddleware
from storeadmin.middleware.request_id import RequestIDMiddleware

__all__ = [
    "LocationContextMiddleware",
    "RequestIDMiddleware",
]
