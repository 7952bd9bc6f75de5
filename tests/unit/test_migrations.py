"""Alembic revision chain and the orders.order_time_is_asap column."""

import importlib.util
from pathlib import Path

from sqlalchemy import false

from storeadmin.infrastructure.persistence.models import Order

VERSIONS = (
    Path(__file__).resolve().parents[2]
    / "storeadmin/infrastructure/persistence/migrations/versions"
)


def _load(name: str):
    path = next(VERSIONS.glob(f"*_{name}.py"))
    spec = importlib.util.spec_from_file_location(path.stem, path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_revision_chain() -> None:
    initial = _load("initial_store_schema")
    asap = _load("add_order_time_is_asap_on_orders")
    assert initial.down_revision is None
    assert asap.down_revision == initial.revision


def test_order_time_is_asap_column() -> None:
    column = Order.__table__.c.order_time_is_asap
    assert column.nullable is False
    assert column.server_default is not None
    assert str(column.server_default.arg) == str(false())


def test_new_orders_default_to_not_asap() -> None:
    column = Order.__table__.c.order_time_is_asap
    assert column.default.arg is False
