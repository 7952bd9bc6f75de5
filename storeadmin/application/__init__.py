"""Application layer: interfaces, DTOs and services.

Depends only on domain and protocol definitions.
Infrastructure implements the interfaces (relation repository, location context).
"""

from storeadmin.application.interfaces import (
    ILocationContext,
    IRelationQuery,
    IRelationRepository,
)
from storeadmin.application.services.relation_resolver import RelationResolver
from storeadmin.application.services.relation_widget import RelationWidget

__all__ = [
    "ILocationContext",
    "IRelationQuery",
    "IRelationRepository",
    "RelationResolver",
    "RelationWidget",
]
