"""Domain exceptions for the store admin.

Defines domain-level exceptions that represent configuration or business
rule violations. These exceptions are independent of infrastructure
concerns. Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class StoreAdminException(Exception):
    """Base exception for all store admin errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. model, attribute).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON body used by the HTTP exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(StoreAdminException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(StoreAdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'order', 'form').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class RelationNotFoundException(StoreAdminException):
    """Raised when an attribute does not name a relationship on the resolved model.

    Rendering a field for a relationship that does not exist is a form
    configuration error; it is never replaced by an empty option list.
    """

    def __init__(self, model_name: str, attribute: str) -> None:
        """Initialize with the model and attribute that failed to resolve.

        Args:
            model_name: Class name of the owning model.
            attribute: Attribute (field name or relation_from) that was looked up.
        """
        super().__init__(
            f"Model '{model_name}' does not contain a definition for '{attribute}'.",
            "RELATION_NOT_FOUND",
            {"model": model_name, "attribute": attribute},
        )


class ScopeNotFoundException(StoreAdminException):
    """Raised when a configured scope name is not registered for the query model."""

    def __init__(self, model_name: str, scope: str) -> None:
        """Initialize with model and scope name.

        Args:
            model_name: Class name of the model the scope was looked up on.
            scope: The scope name that is not registered.
        """
        super().__init__(
            f"Scope '{scope}' is not defined on model '{model_name}'.",
            "SCOPE_NOT_FOUND",
            {"model": model_name, "scope": scope},
        )


class SqlNotConfiguredException(StoreAdminException):
    """Raised when an operation requires the database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
