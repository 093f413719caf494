"""Domain exceptions for searchhub.

Defines domain-level exceptions that represent invalid requests or missing
resources. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class SearchHubException(Exception):
    """Base exception for all searchhub errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. parameter, resource_id).
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
        """Return the JSON error body: error (message), error_code and details."""
        return {
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }


class MissingParameterException(SearchHubException):
    """Raised when a required request parameter is absent or blank."""

    def __init__(self, parameter: str) -> None:
        """Initialize with the missing parameter name.

        Args:
            parameter: Name of the parameter as the client sends it (e.g. 'userId').
        """
        super().__init__(
            f"Missing required parameter: {parameter}",
            "MISSING_PARAMETER",
            {"parameter": parameter},
        )


class ValidationException(SearchHubException):
    """Raised when input validation fails (e.g. unknown resource type)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(SearchHubException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'workspace_resource').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class DuplicateResourceException(SearchHubException):
    """Raised when a workspace is already linked to the same Microsoft 365 resource."""

    def __init__(self, workspace_id: str, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"Resource {resource_type}:{resource_id} is already linked to workspace {workspace_id}",
            "DUPLICATE_RESOURCE",
            {
                "workspace_id": workspace_id,
                "resource_type": resource_type,
                "resource_id": resource_id,
            },
        )


class SqlNotConfiguredException(SearchHubException):
    """Raised when an operation requires the SQL database but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
