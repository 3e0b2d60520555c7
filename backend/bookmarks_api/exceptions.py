"""
Bookmarks API - Custom Exception Hierarchy
==========================================

What:  Application-specific exceptions for the error scenarios of the API.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them
       into `{"error": {"message": ...}}` JSON responses.
Who:   Raised by the validator, the storage gateway and the route handlers.

Exception Hierarchy:
    BookmarksError (base)
    ├── ValidationError   → 400 Bad Request (client can fix)
    ├── NotFoundError     → 404 Not Found
    └── DatabaseError     → 500 Internal Server Error

Unauthorized requests never reach this layer: the bearer-token middleware
answers 401 directly.
"""

from typing import Any, Dict, Optional


class BookmarksError(Exception):
    """
    Base exception for all Bookmarks API errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BookmarksError):
    """
    Raised when a request body fails the bookmark field rules.

    HTTP: 400 Bad Request

    Example response:
        {"error": {"message": "rating must be a number between 0 and 5"}}
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


class NotFoundError(BookmarksError):
    """
    Raised when a requested resource does not exist.

    The storage gateway returns None / False for missing rows; route
    handlers convert that into this exception.

    HTTP: 404 Not Found
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class DatabaseError(BookmarksError):
    """
    Raised when a database statement fails unexpectedly.

    HTTP: 500 Internal Server Error

    The handler always answers with a generic message; `message` and
    `context` are logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
