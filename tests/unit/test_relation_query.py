"""RelationQuery builder and the query scope registry."""

import pytest

from storeadmin.domain.exceptions import ScopeNotFoundException, ValidationException
from storeadmin.infrastructure.persistence import scopes
from storeadmin.infrastructure.persistence.models import (
    Category,
    Customer,
    Location,
    Menu,
    Order,
    Staff,
)
from storeadmin.infrastructure.persistence.relation_query import RelationQuery
from storeadmin.infrastructure.persistence.relations import get_relation
from tests.conftest import compile_sql


def test_new_query_selects_all_columns() -> None:
    query = RelationQuery(Customer)
    sql = compile_sql(query.build())
    assert "FROM customers" in sql
    assert "customers.first_name" in sql
    assert "WHERE" not in sql


def test_for_relation_joins_pivot_for_many_to_many() -> None:
    query = RelationQuery.for_relation(get_relation(Menu, "categories"))
    assert query.model is Category
    assert len(query.joins) == 1
    sql = compile_sql(query.build())
    assert "JOIN menu_categories" in sql


def test_for_relation_has_no_joins_for_direct_relations() -> None:
    query = RelationQuery.for_relation(get_relation(Order, "customer"))
    assert query.joins == []
    assert query.key_name == "customer_id"


def test_strip_joins() -> None:
    query = RelationQuery.for_relation(get_relation(Menu, "locations"))
    assert query.joins
    query.strip_joins()
    assert query.joins == []
    assert "JOIN" not in compile_sql(query.build())


def test_for_relation_does_not_constrain_owner() -> None:
    """The query enumerates every candidate, not only linked records."""
    sql = compile_sql(RelationQuery.for_relation(get_relation(Order, "customer")).build())
    assert "WHERE" not in sql


@pytest.mark.parametrize(
    ("op", "expected"),
    [
        ("=", "categories.priority = 2"),
        ("<>", "categories.priority != 2"),
        ("!=", "categories.priority != 2"),
        (">", "categories.priority > 2"),
        (">=", "categories.priority >= 2"),
        ("<", "categories.priority < 2"),
        ("<=", "categories.priority <= 2"),
    ],
)
def test_where_operators(op: str, expected: str) -> None:
    query = RelationQuery(Category).where("priority", op, 2)
    assert expected in compile_sql(query.build())


def test_where_like() -> None:
    query = RelationQuery(Category).where("name", "like", "Pizza")
    assert "categories.name LIKE 'Pizza'" in compile_sql(query.build())


def test_where_unknown_operator() -> None:
    with pytest.raises(ValidationException):
        RelationQuery(Category).where("priority", "~~", 2)


def test_where_unknown_column() -> None:
    with pytest.raises(ValidationException) as exc_info:
        RelationQuery(Category).where("colour", "=", "red")
    assert exc_info.value.details == {"field": "colour"}


def test_where_key_single_and_many() -> None:
    single = compile_sql(RelationQuery(Location).where_key(3).build())
    assert "locations.location_id = 3" in single
    many = compile_sql(RelationQuery(Location).where_key([3, 4]).build())
    assert "locations.location_id IN (3, 4)" in many


def test_select_with_raw_label() -> None:
    query = RelationQuery(Customer)
    query.select("customer_id", query.select_raw("CONCAT(first_name, ' ', last_name)", "selection"))
    sql = compile_sql(query.build())
    assert sql.startswith("SELECT customers.customer_id, CONCAT(first_name, ' ', last_name) AS selection")


def test_order_by_raw() -> None:
    sql = compile_sql(RelationQuery(Category).order_by_raw("priority desc").build())
    assert sql.endswith("ORDER BY priority desc")


def test_apply_scope_sorted() -> None:
    sql = compile_sql(RelationQuery(Category).apply_scope("sorted").build())
    assert "ORDER BY categories.priority, categories.name" in sql


def test_apply_unknown_scope_raises() -> None:
    with pytest.raises(ScopeNotFoundException) as exc_info:
        RelationQuery(Category).apply_scope("is_featured")
    assert exc_info.value.details == {"model": "Category", "scope": "is_featured"}


def test_scope_registered_on_mixin_applies_to_subclasses() -> None:
    assert scopes.has_scope(Menu, "where_has_or_doesnt_have_location")
    assert scopes.has_scope(Staff, "where_has_or_doesnt_have_location")
    assert not scopes.has_scope(Customer, "where_has_or_doesnt_have_location")


def test_where_has_or_doesnt_have_location() -> None:
    query = RelationQuery(Menu).apply_scope("where_has_or_doesnt_have_location", 3)
    sql = compile_sql(query.build())
    assert "NOT (EXISTS" in sql or "NOT EXISTS" in sql
    assert "locationables.locationable_type = 'menus'" in sql
    assert "locations.location_id IN (3)" in sql


def test_excluding_children_of() -> None:
    owner = Category(category_id=5, name="Mains")
    sql = compile_sql(RelationQuery(Category).apply_scope("excluding_children_of", owner).build())
    assert "categories.parent_id IS NULL OR categories.parent_id != 5" in sql


def test_excluding_children_of_new_category_is_noop() -> None:
    sql = compile_sql(RelationQuery(Category).apply_scope("excluding_children_of", Category()).build())
    assert "WHERE" not in sql


def test_query_scope_decorator_registers() -> None:
    class Probe:
        pass

    @scopes.query_scope(Probe, "probe")
    def _probe(query):
        return query

    try:
        assert scopes.get_scope(Probe, "probe") is _probe
    finally:
        scopes._registry.pop((Probe, "probe"))
