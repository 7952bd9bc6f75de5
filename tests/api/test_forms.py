"""Admin forms API tests. The relation resolver runs over a mocked session."""

import pytest
from httpx import AsyncClient
from sqlalchemy.orm import make_transient_to_detached

from storeadmin.api.v1.dependencies import get_relation_resolver
from storeadmin.api.v1.form_definitions import (
    FORMS,
    FormDefinition,
    RelationFieldDefinition,
)
from storeadmin.application.services.relation_resolver import RelationResolver
from storeadmin.infrastructure.persistence.models import Customer, Order
from storeadmin.infrastructure.persistence.repositories import RelationRepository
from storeadmin.infrastructure.services import AdminLocation
from storeadmin.main import app
from tests.conftest import executed_sql, make_session


@pytest.fixture
def use_session():
    """Route the forms API through a mocked session; returns a setup function."""

    def _use(rows=None, record=None):
        session = make_session(rows, record)
        resolver = RelationResolver(RelationRepository(session), AdminLocation())
        app.dependency_overrides[get_relation_resolver] = lambda: resolver
        return session

    yield _use
    app.dependency_overrides.clear()


async def test_options_for_new_record(client: AsyncClient, use_session) -> None:
    """GET options without record_id renders the field for a new order."""
    session = use_session(
        [
            {"customer_id": 1, "selection": "Ada Lovelace"},
            {"customer_id": 2, "selection": "Alan Turing"},
        ]
    )
    response = await client.get("/api/v1/forms/orders/fields/customer/options")
    assert response.status_code == 200
    data = response.json()
    assert data["field"] == "customer"
    assert data["label"] == "Customer"
    assert data["mode"] == "single"
    assert data["widget_mode"] == "radio"
    assert data["options"] == [
        {"value": 1, "label": "Ada Lovelace"},
        {"value": 2, "label": "Alan Turing"},
    ]
    assert data["value"] is None
    assert data["placeholder"] == "Guest"
    sql = executed_sql(session)
    assert "CONCAT(first_name, ' ', last_name) AS selection" in sql
    assert "customers.status = true" in sql


async def test_options_for_existing_record(client: AsyncClient, use_session) -> None:
    order = Order(order_id=10, customer=Customer(customer_id=2))
    make_transient_to_detached(order)
    session = use_session([{"customer_id": 2, "selection": "Alan Turing"}], record=order)
    response = await client.get(
        "/api/v1/forms/orders/fields/customer/options", params={"record_id": 10}
    )
    assert response.status_code == 200
    assert response.json()["value"] == 2
    session.get.assert_awaited_once_with(Order, 10)


async def test_options_multiple_mode(client: AsyncClient, use_session) -> None:
    use_session([{"category_id": 4, "name": "Pizza"}])
    response = await client.get("/api/v1/forms/menus/fields/categories/options")
    assert response.status_code == 200
    data = response.json()
    assert data["mode"] == "multiple"
    assert data["widget_mode"] == "checkbox"
    assert data["options"] == [{"value": 4, "label": "Pizza"}]


async def test_options_scoped_by_location_header(client: AsyncClient, use_session) -> None:
    session = use_session([{"location_id": 3, "location_name": "Harbour"}])
    response = await client.get(
        "/api/v1/forms/menus/fields/locations/options",
        headers={"X-Location-ID": "3"},
    )
    assert response.status_code == 200
    assert "locations.location_id = 3" in executed_sql(session)


async def test_invalid_location_header_is_ignored(client: AsyncClient, use_session) -> None:
    session = use_session()
    response = await client.get(
        "/api/v1/forms/menus/fields/locations/options",
        headers={"X-Location-ID": "harbour"},
    )
    assert response.status_code == 200
    assert "WHERE" not in executed_sql(session)


async def test_unknown_form_returns_404(client: AsyncClient, use_session) -> None:
    use_session()
    response = await client.get("/api/v1/forms/invoices/fields/customer/options")
    assert response.status_code == 404
    assert response.json()["error"] == "RESOURCE_NOT_FOUND"


async def test_unknown_field_returns_404(client: AsyncClient, use_session) -> None:
    use_session()
    response = await client.get("/api/v1/forms/orders/fields/voucher/options")
    assert response.status_code == 404
    assert response.json()["details"]["resource_id"] == "orders.voucher"


async def test_unknown_record_returns_404(client: AsyncClient, use_session) -> None:
    use_session(record=None)
    response = await client.get(
        "/api/v1/forms/orders/fields/customer/options", params={"record_id": 99}
    )
    assert response.status_code == 404


async def test_invalid_record_id_returns_422(client: AsyncClient, use_session) -> None:
    use_session()
    response = await client.get(
        "/api/v1/forms/orders/fields/customer/options", params={"record_id": 0}
    )
    assert response.status_code == 422


async def test_misconfigured_relation_returns_400(
    client: AsyncClient, use_session, monkeypatch: pytest.MonkeyPatch
) -> None:
    session = use_session()
    monkeypatch.setitem(
        FORMS,
        "broken",
        FormDefinition(
            name="broken",
            model=Order,
            fields={"voucher": RelationFieldDefinition(label="Voucher")},
        ),
    )
    response = await client.get("/api/v1/forms/broken/fields/voucher/options")
    assert response.status_code == 400
    data = response.json()
    assert data["error"] == "RELATION_NOT_FOUND"
    assert data["details"] == {"model": "Order", "attribute": "voucher"}
    session.execute.assert_not_awaited()


async def test_unknown_scope_returns_400(
    client: AsyncClient, use_session, monkeypatch: pytest.MonkeyPatch
) -> None:
    use_session()
    monkeypatch.setitem(
        FORMS,
        "broken",
        FormDefinition(
            name="broken",
            model=Order,
            fields={
                "customer": RelationFieldDefinition(
                    label="Customer", config={"scope": "is_featured"}
                )
            },
        ),
    )
    response = await client.get("/api/v1/forms/broken/fields/customer/options")
    assert response.status_code == 400
    assert response.json()["error"] == "SCOPE_NOT_FOUND"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("", None),
        ([], None),
        ([1, 2], [1, 2]),
        (5, 5),
    ],
)
async def test_save_value(client: AsyncClient, use_session, value, expected) -> None:
    use_session()
    response = await client.post(
        "/api/v1/forms/menus/fields/categories/save-value", json={"value": value}
    )
    assert response.status_code == 200
    assert response.json() == {"save": True, "value": expected}


async def test_save_value_of_disabled_field(client: AsyncClient, use_session) -> None:
    use_session()
    response = await client.post(
        "/api/v1/forms/locations/fields/staffs/save-value", json={"value": [1]}
    )
    assert response.status_code == 200
    assert response.json() == {"save": False, "value": None}
