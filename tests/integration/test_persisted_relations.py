"""Relation resolution on records loaded from a database session."""

from datetime import date, time

import pytest

from storeadmin.application.dtos.form import FormField, RelationWidgetConfig
from storeadmin.application.dtos.relation import RelationOptions
from storeadmin.application.services.relation_resolver import RelationResolver
from storeadmin.application.services.relation_widget import RelationWidget
from storeadmin.domain.enums import SelectionMode
from storeadmin.domain.exceptions import RelationNotFoundException
from storeadmin.infrastructure.persistence.models import (
    Customer,
    CustomerGroup,
    Location,
    Order,
)
from storeadmin.infrastructure.persistence.repositories.relation_repo import (
    RelationRepository,
)


def _order(order_id: int, customer: Customer | None, location: Location) -> Order:
    return Order(
        order_id=order_id,
        customer=customer,
        location=location,
        first_name="Ada",
        last_name="Lovelace",
        order_type="delivery",
        order_date=date(2024, 5, 1),
        order_time=time(12, 30),
    )


@pytest.fixture
async def store(db_session):
    """Orders 1 (customer in group VIP) and 2 (guest); the session starts empty."""
    vip = CustomerGroup(customer_group_id=2, group_name="VIP")
    regular = CustomerGroup(customer_group_id=3, group_name="Regular")
    customer = Customer(
        customer_id=3,
        first_name="Ada",
        last_name="Lovelace",
        email="ada@example.com",
        group=vip,
    )
    location = Location(location_id=1, location_name="Harbour")
    db_session.add_all([regular, _order(1, customer, location), _order(2, None, location)])
    await db_session.flush()
    db_session.expunge_all()
    return db_session


async def test_nested_attribute_on_loaded_order(store) -> None:
    resolver = RelationResolver(RelationRepository(store))
    order = await store.get(Order, 1)

    resolution = await resolver.resolve(
        order, "customer[group]", RelationOptions(name_from="group_name")
    )

    assert resolution.mode is SelectionMode.SINGLE
    assert resolution.relation.target is CustomerGroup
    assert list(resolution.option_list.options.items()) == [(3, "Regular"), (2, "VIP")]


async def test_nested_attribute_with_empty_intermediate_on_loaded_order(store) -> None:
    resolver = RelationResolver(RelationRepository(store))
    order = await store.get(Order, 2)

    with pytest.raises(RelationNotFoundException):
        await resolver.resolve(order, "customer[group]")


async def test_widget_loads_nested_value_of_loaded_order(store) -> None:
    resolver = RelationResolver(RelationRepository(store))
    order = await store.get(Order, 1)
    widget = RelationWidget(
        FormField(name="group", value_from="customer[group]"),
        order,
        resolver,
        RelationWidgetConfig(name_from="group_name"),
    )

    rendered = await widget.make_form_field()

    assert rendered.type == "selectlist"
    assert rendered.value == 2
    assert rendered.options == {3: "Regular", 2: "VIP"}


async def test_loaded_relation_value_normalizes_to_key(store) -> None:
    resolver = RelationResolver(RelationRepository(store))
    order = await store.get(Order, 1)
    widget = RelationWidget(
        FormField(name="customer"),
        order,
        resolver,
        RelationWidgetConfig(sql_select="first_name || ' ' || last_name"),
    )

    rendered = await widget.make_form_field()

    assert rendered.value == 3
    assert rendered.options == {3: "Ada Lovelace"}
