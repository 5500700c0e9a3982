"""
Portfolio Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error cases the API reports.
Why:   Services raise a typed error; global handlers in main.py turn it into
       the matching HTTP status and a `{"success": false, ...}` body.
How:   Each exception carries a user-facing message and an optional context
       dict. Context is logged server-side and never returned to the client.

Exception Hierarchy:
    PortfolioError (base)
    ├── ConflictError        → 400 Bad Request (e.g. email already registered)
    ├── UnauthorizedError    → 401 Unauthorized (bad credentials)
    ├── NotFoundError        → 404 Not Found
    ├── DatabaseError        → 500 Internal Server Error
    └── ConfigurationError   → startup failure (never reaches a client)
"""

from typing import Any, Dict, Optional


class PortfolioError(Exception):
    """
    Base exception for all application errors.

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


class ConflictError(PortfolioError):
    """
    Raised when a create would duplicate an existing record's key.

    HTTP:    400 Bad Request. The portfolio frontend already expects 400 for a
             taken email, so 409 is not used.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class UnauthorizedError(PortfolioError):
    """
    Raised when login credentials do not check out.

    The same message is used for an unknown email and a wrong password so a
    caller cannot probe which emails are registered.
    """

    def __init__(
        self,
        message: str = "Invalid email or password",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(PortfolioError):
    """
    Raised when a record addressed by id does not exist.

    The message reads "<resource> not found"; the id goes into context only.
    """

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class DatabaseError(PortfolioError):
    """
    Raised when a store operation fails unexpectedly.

    Covers driver errors (connection loss, server errors) and identifiers
    that cannot be parsed into an ObjectId. The client only ever sees the
    generic message; the driver error is logged.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ConfigurationError(PortfolioError):
    """Raised at startup when required settings are missing or invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
