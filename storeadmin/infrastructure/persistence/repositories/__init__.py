"""Persistence repositories. Re-exports for dependency injection."""

from storeadmin.infrastructure.persistence.repositories.relation_repo import (
    RelationRepository,
)

__all__ = [
    "RelationRepository",
]
