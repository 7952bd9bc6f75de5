"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from storeadmin.infrastructure or storeadmin.api.
"""

from storeadmin.application.interfaces.repositories import (
    IRelationQuery,
    IRelationRepository,
)
from storeadmin.application.interfaces.services import ILocationContext

__all__ = [
    "ILocationContext",
    "IRelationQuery",
    "IRelationRepository",
]
