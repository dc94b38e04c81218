"""
Application exceptions.

Raised by the store and repository layers, translated into HTTP responses
by the handlers registered in ``main.register_exception_handlers``:

    SimpleNotesError (base)      -> 500
    ├── ValidationError          -> 400
    ├── MalformedIdentifierError -> 400
    └── NotFoundError            -> 404
"""

from typing import Any, Dict, Optional


class SimpleNotesError(Exception):
    """Base exception for all application errors.

    ``message`` is safe to return to the client, ``context`` is extra
    debugging info that only gets logged.
    """

    status_code = 500
    error_type = "InternalServerError"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SimpleNotesError):
    """Client sent a note that breaks a field constraint."""

    status_code = 400
    error_type = "ValidationError"

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


class MalformedIdentifierError(SimpleNotesError):
    """Identifier is not in the expected shape, so no lookup is attempted."""

    status_code = 400
    error_type = "MalformedIdentifier"

    def __init__(self, identifier: Any, context: Optional[Dict[str, Any]] = None):
        ctx = context or {}
        ctx["identifier"] = str(identifier)
        super().__init__(message="malformatted id", context=ctx)
        self.identifier = identifier


class NotFoundError(SimpleNotesError):
    """Well-formed identifier with no matching record."""

    status_code = 404
    error_type = "NotFound"

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
