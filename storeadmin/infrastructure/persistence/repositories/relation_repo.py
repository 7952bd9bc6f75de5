"""Relation repository: relationship introspection and option query execution."""

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import inspect as sa_inspect
from sqlalchemy.ext.asyncio import AsyncSession

from storeadmin.application.dtos.relation import RelationshipDescriptor
from storeadmin.infrastructure.persistence import relations, scopes
from storeadmin.infrastructure.persistence.relation_query import RelationQuery


class RelationRepository:
    """SQLAlchemy implementation of IRelationRepository.

    Introspection is delegated to the mapper (persistence.relations); the only
    database access is fetch_rows (one SELECT per resolve) and load_value.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    def has_relation(self, model: Any, name: str) -> bool:
        return relations.has_relation(model, name)

    def get_relation(self, model: Any, name: str) -> RelationshipDescriptor:
        return relations.get_relation(model, name)

    async def resolve_model_attribute(self, model: Any, attribute: str) -> tuple[Any, str]:
        return await relations.resolve_model_attribute(model, attribute)

    def new_query(self, relation: RelationshipDescriptor) -> RelationQuery:
        return RelationQuery.for_relation(relation)

    def has_scope(self, model: type, name: str) -> bool:
        return scopes.has_scope(model, name)

    def is_record(self, value: Any) -> bool:
        """Return True if value is an instance of a mapped model."""
        if isinstance(value, type):
            return False
        return sa_inspect(value, raiseerr=False) is not None

    def is_persisted(self, record: Any) -> bool:
        """Return True if record has an identity (loaded from or flushed to the DB)."""
        state = sa_inspect(record, raiseerr=False)
        return state is not None and state.has_identity

    def record_key(self, record: Any) -> Any:
        """Return the primary key value of record (first column if composite)."""
        mapper = sa_inspect(type(record))
        return mapper.primary_key_from_instance(record)[0]

    async def fetch_rows(self, query: RelationQuery) -> Sequence[Mapping[str, Any]]:
        result = await self.db.execute(query.build())
        return result.mappings().all()

    async def load_value(self, model: Any, attribute: str) -> Any:
        """Return the current value of a relation attribute, loading it if needed.

        Unsaved records return whatever is assigned in memory.
        """
        if model is None:
            return None
        if not self.is_persisted(model):
            return getattr(model, attribute, None)
        return await getattr(model.awaitable_attrs, attribute)

    async def get_record(self, model: type, key: Any) -> Any | None:
        """Return the record of `model` with primary key `key`, or None."""
        return await self.db.get(model, key)
