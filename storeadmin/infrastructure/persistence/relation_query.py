"""RelationQuery: a mutable SELECT builder over a relation's target model.

Keeps selected columns, where clauses, order clauses and join clauses in
separate lists until build(), so callers (and scopes) can add predicates in
any order and join clauses can be inspected or stripped before execution.
"""

from __future__ import annotations

import operator
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

from sqlalchemy import FromClause, Select, literal_column, select, text
from sqlalchemy.sql.elements import ColumnElement

from storeadmin.application.dtos.relation import RelationshipDescriptor
from storeadmin.domain.exceptions import ValidationException
from storeadmin.infrastructure.persistence import scopes
from storeadmin.infrastructure.persistence.relations import primary_key_name

_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "=": operator.eq,
    "==": operator.eq,
    "<>": operator.ne,
    "!=": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "like": lambda col, value: col.like(value),
    "in": lambda col, value: col.in_(value),
    "not in": lambda col, value: col.not_in(value),
}


@dataclass(frozen=True)
class JoinClause:
    """A join added to the query: target table and ON condition."""

    target: FromClause
    onclause: ColumnElement[bool] | None = None


class RelationQuery:
    """Query over all rows of a model, built without relation constraints.

    Methods return self so calls can be chained; scopes mutate and return
    the same instance.
    """

    def __init__(self, model: type) -> None:
        self.model = model
        self.table: FromClause = model.__table__
        self.key_name = primary_key_name(model)
        self.columns: list[Any] = []
        self.joins: list[JoinClause] = []
        self.wheres: list[ColumnElement[bool]] = []
        self.orders: list[Any] = []

    @classmethod
    def for_relation(cls, relation: RelationshipDescriptor) -> RelationQuery:
        """Return the unconstrained query of a relation's target model.

        Traversing a many-to-many relation joins its pivot table to the
        target, so pivot columns are reachable. No owner constraint is applied:
        the query enumerates every candidate record.
        """
        query = cls(relation.target)
        if relation.secondary is not None:
            query.join(relation.secondary, relation.secondary_join)
        return query

    def column(self, name: str) -> Any:
        """Return the target table column called name."""
        try:
            return self.table.c[name]
        except KeyError:
            raise ValidationException(
                f"Column '{name}' does not exist on '{self.model.__name__}'",
                field=name,
            ) from None

    def select(self, *columns: Any) -> RelationQuery:
        """Set the selected columns (names or SQL expressions)."""
        self.columns = [self.column(c) if isinstance(c, str) else c for c in columns]
        return self

    def select_raw(self, expression: str, alias: str) -> Any:
        """Return a raw SQL expression labelled alias, e.g. select_raw("CONCAT(a, b)", "selection")."""
        return literal_column(expression).label(alias)

    def join(self, target: FromClause, onclause: ColumnElement[bool] | None = None) -> RelationQuery:
        self.joins.append(JoinClause(target, onclause))
        return self

    def strip_joins(self) -> RelationQuery:
        """Remove every join clause added so far."""
        self.joins = []
        return self

    def where(self, column: str, op: str, value: Any) -> RelationQuery:
        """Add `column <op> value`, e.g. where("status", "=", True)."""
        fn = _OPERATORS.get(op.lower())
        if fn is None:
            raise ValidationException(f"Unsupported operator '{op}'", field=column)
        self.wheres.append(fn(self.column(column), value))
        return self

    def where_key(self, key: Any) -> RelationQuery:
        """Restrict to one primary key, or to several when key is a list/tuple/set."""
        pk = self.column(self.key_name)
        if isinstance(key, (list, tuple, set)):
            self.wheres.append(pk.in_(list(key)))
        else:
            self.wheres.append(pk == key)
        return self

    def where_clause(self, clause: ColumnElement[bool]) -> RelationQuery:
        """Add an arbitrary SQLAlchemy boolean expression."""
        self.wheres.append(clause)
        return self

    def order_by(self, *clauses: Any) -> RelationQuery:
        self.orders.extend(clauses)
        return self

    def order_by_raw(self, expression: str) -> RelationQuery:
        """Add a raw ORDER BY expression (e.g. 'priority desc, name')."""
        self.orders.append(text(expression))
        return self

    def apply_scope(self, name: str, *args: Any) -> RelationQuery:
        """Apply the scope registered as name on the model (see scopes.query_scope)."""
        result = scopes.apply_scope(self, name, *args)
        return result if result is not None else self

    def build(self) -> Select[Any]:
        """Return the SQLAlchemy SELECT for the current state."""
        columns: Iterable[Any] = self.columns or list(self.table.c)
        stmt = select(*columns).select_from(self.table)
        for clause in self.joins:
            stmt = stmt.join(clause.target, clause.onclause)
        if self.wheres:
            stmt = stmt.where(*self.wheres)
        if self.orders:
            stmt = stmt.order_by(*self.orders)
        return stmt
