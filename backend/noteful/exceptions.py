"""
Noteful Backend: Custom Exception Hierarchy
============================================

What:  Application-specific exceptions for client-caused failures.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) turn them into
       `{"error": {"message": ...}}` JSON responses.
Who:   Raised by route handlers; caught by the global handlers.

Exception Hierarchy:
    NotefulError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found

Store faults are not wrapped here: SQLAlchemy exceptions propagate unmodified
and are answered with a generic 500 by the SQLAlchemyError handler.
"""

from typing import Any, Dict, Optional


class NotefulError(Exception):
    """
    Base exception for all Noteful application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotefulError):
    """
    Raised when a request body is missing a required field or carries nothing
    to update.

    Example response:
        {"error": {"message": "Missing content in request body"}}
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    @classmethod
    def missing_field(cls, field: str) -> "ValidationError":
        return cls(message=f"Missing {field} in request body", field=field)


class NotFoundError(NotefulError):
    """
    Raised when a path id does not resolve to a row.

    The store returns None for missing rows; route handlers convert that
    into this exception before any mutation is attempted.

    Example response:
        {"error": {"message": "Note doesn't exist"}}
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = str(resource_id)
        super().__init__(message=f"{resource} doesn't exist", context=ctx)
        self.resource = resource
