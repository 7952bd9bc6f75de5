"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from storeadmin.domain.enums import RelationType, SelectionMode
from storeadmin.domain.exceptions import (
    RelationNotFoundException,
    ResourceNotFoundException,
    ScopeNotFoundException,
    SqlNotConfiguredException,
    StoreAdminException,
    ValidationException,
)

__all__ = [
    # Enums
    "RelationType",
    "SelectionMode",
    # Exceptions
    "RelationNotFoundException",
    "ResourceNotFoundException",
    "ScopeNotFoundException",
    "SqlNotConfiguredException",
    "StoreAdminException",
    "ValidationException",
]
