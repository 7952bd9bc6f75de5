"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from storeadmin.application.interfaces.repositories import IRelationQuery


# Location (tenant) context interface
class ILocationContext(Protocol):
    """Protocol for the admin's current location (multi-tenant boundary)."""

    def is_active(self) -> bool:
        """Return True when the request is restricted to one location."""

    def current_location_id(self) -> Any:
        """Return the current location key (None when not active)."""

    def is_location_type(self, model: type) -> bool:
        """Return True if model is the location model itself."""

    def supports_location_scoping(self, model: type) -> bool:
        """Return True if model records can be attached to locations."""

    def apply_scope(self, query: IRelationQuery) -> IRelationQuery:
        """Restrict query to what the current location may select (no-op when inactive)."""
