"""Custom exception classes for the application.

Defines domain-specific exceptions that can be raised throughout the
application and handled consistently by exception handlers.
"""

import math
from typing import Optional, Any, Dict, List


class AppException(Exception):
    """Base exception class for all application exceptions.

    Attributes:
        message: Human-readable error message.
        status_code: HTTP status code to return.
        details: Optional additional error details.
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """Initialize application exception.

        Args:
            message: Error message.
            status_code: HTTP status code (default: 500).
            details: Optional dictionary with additional error context.
        """
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(AppException):
    """Exception raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: Any):
        """Initialize not found error.

        Args:
            resource: Type of resource (e.g., 'Client', 'TrainingPlan').
            identifier: ID or identifier that was not found.
        """
        message = f"{resource} with id '{identifier}' not found"
        super().__init__(message, status_code=404, details={"resource": resource, "id": identifier})


class ClientNotFoundError(NotFoundError):
    """Raised when a client id does not resolve to a client record."""

    def __init__(self, client_id: Any):
        super().__init__("Client", client_id)


class ValidationError(AppException):
    """Exception raised when input validation fails."""

    def __init__(self, message: str, field: Optional[str] = None):
        """Initialize validation error.

        Args:
            message: Validation error message.
            field: Optional field name that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, status_code=400, details=details)


class InvalidInputError(ValidationError):
    """Raised when biometric inputs cannot feed a BMR/TDEE calculation."""

    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        """Initialize invalid input error.

        Args:
            message: Error message.
            missing_fields: Optional list of absent or non-positive fields.
        """
        super().__init__(message)
        if missing_fields:
            self.details["missing_fields"] = missing_fields


class InvalidDistributionError(ValidationError):
    """Raised when a macro split or calorie total cannot be turned into grams."""

    def __init__(self, message: str, total: Optional[float] = None):
        super().__init__(message, field="distribution" if total is not None else "calories")
        if total is not None and math.isfinite(total):
            self.details["total"] = round(total, 4)


class DatabaseError(AppException):
    """Exception raised when database operations fail."""

    def __init__(self, message: str, operation: Optional[str] = None):
        """Initialize database error.

        Args:
            message: Database error message.
            operation: Optional operation that failed (e.g., 'create', 'update').
        """
        details = {"operation": operation} if operation else {}
        super().__init__(message, status_code=500, details=details)
