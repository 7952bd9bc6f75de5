"""Location context for the admin panel.

Middleware sets the current location id in this context variable so that
relation queries can be restricted to the location the admin is working in.
When no location is set, the admin sees records of every location.
"""

from contextvars import ContextVar

# Current location ID for the request (set by middleware, read by location scoping).
current_location_id: ContextVar[int | None] = ContextVar(
    "current_location_id", default=None
)


def set_location_id(location_id: int | None) -> None:
    """Set the current location ID for this context (e.g. request)."""
    current_location_id.set(location_id)


def get_location_id() -> int | None:
    """Return the current location ID if set."""
    return current_location_id.get()
