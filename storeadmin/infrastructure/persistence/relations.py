"""Relationship introspection over SQLAlchemy mappers.

Turns a model's ``relationship()`` definitions into RelationshipDescriptor
values the relation resolver works with. The relation kind is derived from
the relationship direction; polymorphic pivots (locationables, allergenables)
look like plain many-to-many to SQLAlchemy, so they declare their kind in
``info={"relation_type": ...}``.
"""

from __future__ import annotations

import re
from typing import Any

from sqlalchemy import Table
from sqlalchemy import inspect as sa_inspect
from sqlalchemy.orm import MANYTOMANY, MANYTOONE, RelationshipProperty

from storeadmin.application.dtos.relation import RelationshipDescriptor
from storeadmin.domain.enums import RelationType
from storeadmin.domain.exceptions import RelationNotFoundException

_ARRAY_SEGMENT_RE = re.compile(r"\[(.*?)\]")


def primary_key_name(model: type) -> str:
    """Return the primary key column name of a mapped model (first column if composite)."""
    return sa_inspect(model).primary_key[0].name


def relation_type(prop: RelationshipProperty[Any]) -> RelationType:
    """Return the relation kind of a SQLAlchemy relationship property."""
    explicit = prop.info.get("relation_type")
    if explicit:
        return RelationType(explicit)
    if prop.direction is MANYTOMANY:
        return RelationType.BELONGS_TO_MANY
    if prop.direction is MANYTOONE:
        return RelationType.BELONGS_TO
    return RelationType.HAS_MANY if prop.uselist else RelationType.HAS_ONE


def _relationship_property(model: Any, name: str) -> RelationshipProperty[Any] | None:
    if model is None:
        return None
    model_cls = model if isinstance(model, type) else type(model)
    mapper = sa_inspect(model_cls, raiseerr=False)
    if mapper is None or not hasattr(mapper, "relationships"):
        return None
    return mapper.relationships.get(name)


def has_relation(model: Any, name: str) -> bool:
    """Return True if model (class or instance) defines a relationship called name."""
    return _relationship_property(model, name) is not None


def get_relation(model: Any, name: str) -> RelationshipDescriptor:
    """Return the descriptor for relationship `name` on model (class or instance).

    Raises:
        RelationNotFoundException: model is None or has no such relationship.
    """
    prop = _relationship_property(model, name)
    if prop is None:
        model_name = "None" if model is None else _model_name(model)
        raise RelationNotFoundException(model_name, name)
    owner = prop.parent.class_
    target = prop.mapper.class_
    secondary = prop.secondary if isinstance(prop.secondary, Table) else None
    return RelationshipDescriptor(
        name=name,
        kind=relation_type(prop),
        owner=owner,
        target=target,
        key_name=primary_key_name(target),
        secondary=secondary,
        secondary_join=prop.secondaryjoin if secondary is not None else None,
    )


def name_to_array(name: str) -> list[str]:
    """Split an HTML array field name into its parts.

    ``"customer[group]"`` -> ``["customer", "group"]``; empty segments
    (``"items[]"``) are dropped.
    """
    head, _, rest = name.partition("[")
    parts = [head] if head else []
    if rest:
        parts.extend(seg for seg in _ARRAY_SEGMENT_RE.findall("[" + rest) if seg)
    return parts


async def resolve_model_attribute(model: Any, attribute: str) -> tuple[Any, str]:
    """Return the final owner and attribute name of a nested HTML array attribute.

    Every part but the last is read from the current owner (attribute, or key
    when the owner is a dict). Relationships of persisted records are loaded
    through ``awaitable_attrs``. The owner becomes None when a part is missing,
    which callers report as a missing relation.
    """
    parts = name_to_array(attribute)
    if not parts:
        return model, attribute
    owner = model
    for part in parts[:-1]:
        if owner is None:
            break
        owner = await _read_part(owner, part)
    return owner, parts[-1]


async def _read_part(owner: Any, part: str) -> Any:
    if isinstance(owner, dict):
        return owner.get(part)
    if not hasattr(type(owner), part):
        return getattr(owner, part, None)
    state = sa_inspect(owner, raiseerr=False)
    if state is not None and state.has_identity and hasattr(owner, "awaitable_attrs"):
        return await getattr(owner.awaitable_attrs, part)
    return getattr(owner, part)


def _model_name(model: Any) -> str:
    return model.__name__ if isinstance(model, type) else type(model).__name__
