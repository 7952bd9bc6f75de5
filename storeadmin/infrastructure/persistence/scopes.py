"""Query scope registry: named, reusable query predicates bound to a model type.

Scopes are registered per model class with @query_scope and looked up along
the model's MRO, so a scope registered on a mixin (e.g. Locationable) applies
to every model that uses it. A scope receives the RelationQuery plus any
extra arguments (the owner record for form-configured scopes) and returns
the query.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from storeadmin.domain.exceptions import ScopeNotFoundException

if TYPE_CHECKING:
    from storeadmin.infrastructure.persistence.relation_query import RelationQuery

ScopeFn = Callable[..., "RelationQuery"]

_registry: dict[tuple[type, str], ScopeFn] = {}


def query_scope(model: type, name: str) -> Callable[[ScopeFn], ScopeFn]:
    """Register the decorated function as scope `name` on `model`.

    Args:
        model: Model class (or mixin) the scope is bound to.
        name: Scope name used by form configuration and the resolver.

    Returns:
        Decorator that registers and returns the function unchanged.
    """

    def decorator(fn: ScopeFn) -> ScopeFn:
        _registry[(model, name)] = fn
        return fn

    return decorator


def find_scope(model: type, name: str) -> ScopeFn | None:
    """Return the scope registered for model (or a base class), or None."""
    for klass in model.__mro__:
        fn = _registry.get((klass, name))
        if fn is not None:
            return fn
    return None


def has_scope(model: type, name: str) -> bool:
    """Return True if `name` is a scope of model."""
    return find_scope(model, name) is not None


def get_scope(model: type, name: str) -> ScopeFn:
    """Return the scope function or raise ScopeNotFoundException."""
    fn = find_scope(model, name)
    if fn is None:
        raise ScopeNotFoundException(model.__name__, name)
    return fn


def apply_scope(query: RelationQuery, name: str, *args: Any) -> RelationQuery:
    """Look up scope `name` on the query model and apply it."""
    fn = get_scope(query.model, name)
    return fn(query, *args)
