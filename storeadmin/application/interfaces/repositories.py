"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from storeadmin.application.dtos.relation import RelationshipDescriptor


# Relation query interface
class IRelationQuery(Protocol):
    """Protocol for a query over a relation's target model (no relation constraints)."""

    model: type
    key_name: str
    joins: list[Any]

    def select(self, *columns: Any) -> IRelationQuery:
        """Set the selected columns (names or SQL expressions)."""

    def select_raw(self, expression: str, alias: str) -> Any:
        """Return a raw SQL expression labelled `alias`, usable in select()."""

    def order_by_raw(self, expression: str) -> IRelationQuery:
        """Add a raw ORDER BY expression."""

    def where(self, column: str, op: str, value: Any) -> IRelationQuery:
        """Add `column <op> value`."""

    def where_key(self, key: Any) -> IRelationQuery:
        """Restrict to a primary key (or list of keys)."""

    def apply_scope(self, name: str, *args: Any) -> IRelationQuery:
        """Apply a registered scope; raise ScopeNotFoundException if undefined."""

    def strip_joins(self) -> IRelationQuery:
        """Remove every join clause from the query."""


# Relation repository interface
class IRelationRepository(Protocol):
    """Protocol for relationship introspection and option query execution."""

    def has_relation(self, model: Any, name: str) -> bool:
        """Return True if model defines a relationship called name."""

    def get_relation(self, model: Any, name: str) -> RelationshipDescriptor:
        """Return relationship metadata; raise RelationNotFoundException if undefined."""

    async def resolve_model_attribute(self, model: Any, attribute: str) -> tuple[Any, str]:
        """Return the final owner and attribute of a nested HTML array attribute, loading intermediates."""

    def new_query(self, relation: RelationshipDescriptor) -> IRelationQuery:
        """Return the unconstrained query over the relation's target model."""

    def has_scope(self, model: type, name: str) -> bool:
        """Return True if `name` is a registered scope of model."""

    def is_record(self, value: Any) -> bool:
        """Return True if value is a model instance (a Record)."""

    def is_persisted(self, record: Any) -> bool:
        """Return True if record exists in the database."""

    def record_key(self, record: Any) -> Any:
        """Return the primary key value of record."""

    async def fetch_rows(self, query: IRelationQuery) -> Sequence[Mapping[str, Any]]:
        """Execute query and return its rows as column-name mappings."""

    async def load_value(self, model: Any, attribute: str) -> Any:
        """Return the current value of a relation attribute on a record."""

    async def get_record(self, model: type, key: Any) -> Any | None:
        """Return the record of model with primary key key, or None."""
