"""Tests for domain exceptions (error_code, message, details)."""

from storeadmin.domain.exceptions import (
    RelationNotFoundException,
    ResourceNotFoundException,
    ScopeNotFoundException,
    SqlNotConfiguredException,
    StoreAdminException,
    ValidationException,
)


def test_store_admin_exception_default_error_code() -> None:
    """Base StoreAdminException uses class name as error_code when not provided."""
    exc = StoreAdminException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "StoreAdminException"
    assert exc.details == {}


def test_store_admin_exception_to_dict() -> None:
    exc = StoreAdminException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid column", field="nope")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "nope"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("form", "invoices")
    assert exc.message == "form not found: invoices"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "form", "resource_id": "invoices"}


def test_relation_not_found_exception() -> None:
    """RelationNotFoundException names the model and the attribute."""
    exc = RelationNotFoundException("Order", "voucher")
    assert exc.message == "Model 'Order' does not contain a definition for 'voucher'."
    assert exc.error_code == "RELATION_NOT_FOUND"
    assert exc.details == {"model": "Order", "attribute": "voucher"}


def test_scope_not_found_exception() -> None:
    exc = ScopeNotFoundException("Menu", "is_featured")
    assert exc.error_code == "SCOPE_NOT_FOUND"
    assert exc.details == {"model": "Menu", "scope": "is_featured"}
    assert "is_featured" in exc.message


def test_sql_not_configured_exception() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"


def test_domain_exceptions_share_base() -> None:
    for exc in (
        ValidationException("x"),
        ResourceNotFoundException("form", "x"),
        RelationNotFoundException("Order", "x"),
        ScopeNotFoundException("Order", "x"),
        SqlNotConfiguredException(),
    ):
        assert isinstance(exc, StoreAdminException)
