"""Infrastructure implementations of application service interfaces."""

from storeadmin.infrastructure.services.location_scope import AdminLocation

__all__ = [
    "AdminLocation",
]
