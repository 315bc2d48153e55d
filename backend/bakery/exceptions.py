"""
Bev's Bakery Backend - Custom Exception Hierarchy
==================================================

What:  The errors the order API and admin pages can raise.
How:   Every error has a customer-safe message and a context dict for logs.
       main.py maps each class to a status code and the shared JSON error
       body; the admin login page catches its two errors itself.
Who:   Raised by services, storage and routes.

Exception Hierarchy:
    BakeryError (base)
    ├── ValidationError          → 400 (empty admin login field)
    ├── AuthenticationError      → 401 (wrong admin credentials)
    │   (both rendered on the login page by routes/pages.py)
    ├── NotFoundError            → 404 (unknown order id)
    ├── DatabaseError            → 500 (storage failure, generic message)
    └── RateLimitExceededError   → 429 (too many requests from one IP)
"""

from typing import Any, Dict, Optional


class BakeryError(Exception):
    """
    Base exception for all bakery application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client
                  unless the handler chooses to expose it)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(BakeryError):
    """
    Raised when a form field the service checks itself is missing.

    When:    Admin login submitted with an empty username or password.
    HTTP:    400, the login page re-rendered with the message.

    Order bodies are checked by pydantic instead; those failures surface as
    RequestValidationError and share the 400 "validation_error" JSON body.
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


class AuthenticationError(BakeryError):
    """
    Raised when the admin login form is submitted with wrong credentials.

    HTTP:    401 Unauthorized
    """

    def __init__(
        self,
        message: str = "Invalid username or password.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(BakeryError):
    """
    Raised when a requested resource does not exist.

    When:    GET /api/orders/{id} with an unknown or malformed id.
    HTTP:    404 Not Found

    Storage returns None for missing orders; the service layer converts
    that into this exception.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        if message is None:
            message = f"The requested {resource} was not found"
            if resource_id:
                message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(BakeryError):
    """
    Raised when storage operations fail unexpectedly.

    When:    Connection lost mid-query, constraint violation, etc.
    HTTP:    500 Internal Server Error

    The message is generic ("Failed to create order"); the SQL error is
    logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RateLimitExceededError(BakeryError):
    """
    Raised when a client exceeds the per-IP request rate limit.

    HTTP:    429 Too Many Requests, with a Retry-After header.
    """

    def __init__(
        self,
        retry_after: int = 60,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = (
            f"Rate limit exceeded. Please wait {retry_after} seconds before making more requests."
        )
        ctx = context or {}
        ctx["retry_after"] = retry_after
        super().__init__(message=message, context=ctx)
        self.retry_after = retry_after
