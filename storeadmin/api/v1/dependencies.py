"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions and the relation resolver.
The resolver is built from infrastructure implementations here;
routes depend only on these dependencies, not on infra directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.application.services.relation_resolver import RelationResolver
from storeadmin.infrastructure.persistence.database import get_db
from storeadmin.infrastructure.persistence.repositories import RelationRepository
from storeadmin.infrastructure.services import AdminLocation


async def get_relation_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RelationRepository:
    """Relation repository bound to the request session."""
    return RelationRepository(db)


def get_location_context() -> AdminLocation:
    """Location scoping from the request's location context."""
    return AdminLocation()


async def get_relation_resolver(
    relations: Annotated[RelationRepository, Depends(get_relation_repo)],
    location: Annotated[AdminLocation, Depends(get_location_context)],
) -> RelationResolver:
    return RelationResolver(relations, location)
