"""Application services: relation resolver and relation form widget."""

from storeadmin.application.services.relation_resolver import (
    SELECTION_COLUMN,
    RelationResolver,
)
from storeadmin.application.services.relation_widget import RelationWidget

__all__ = [
    "SELECTION_COLUMN",
    "RelationResolver",
    "RelationWidget",
]
