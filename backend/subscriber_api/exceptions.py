"""
Subscriber API — Custom Exception Hierarchy
=============================================

What:  Application-specific exceptions for the three outcomes a subscriber
       operation can fail with.
Why:   Services classify failures once; global handlers (registered in
       main.py) turn each class into its HTTP status code.
How:   Each exception class carries a message and optional context dict.
       The message is returned to the client verbatim as {"message": ...};
       the context is logged only.

Exception Hierarchy:
    SubscriberAPIError (base)
    ├── NotFoundError          → 404 Not Found
    ├── ValidationError        → 400 Bad Request (client can fix)
    └── StoreUnavailableError  → 500 Internal Server Error

Which class an operation raises is decided per operation, not per cause:
    list   read failure       → StoreUnavailableError
    create/update save failure → ValidationError
    delete remove failure     → StoreUnavailableError
"""

from typing import Any, Dict, Optional


class SubscriberAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
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


class NotFoundError(SubscriberAPIError):
    """
    Raised when no record matches the requested identifier.

    HTTP:    404 Not Found

    The repository returns None for a missing record; the service converts
    that into this exception so get, update and delete share one 404 path.
    """

    def __init__(
        self,
        resource: str = "Subscriber",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with id {resource_id} not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class ValidationError(SubscriberAPIError):
    """
    Raised when a write is rejected: missing required fields, an undecodable
    request body, or the store refusing a create/save.

    HTTP:    400 Bad Request
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


class StoreUnavailableError(SubscriberAPIError):
    """
    Raised when the store fails a read or a removal.

    HTTP:    500 Internal Server Error

    The store's own message is returned to the client unchanged.
    """

    def __init__(
        self,
        message: str = "The subscriber store is unavailable",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
