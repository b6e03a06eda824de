"""
Domain exceptions raised by the request lifecycle engine.

Every error carries a stable ``code`` and the HTTP status it maps to. Routers
never translate them by hand: the handler registered in ``main`` renders
``{"detail": ..., "code": ...}`` for any ``CollabMateError``.

``PartialFailure`` is deliberately absent here. A side effect that fails after
the primary write committed is not an error for the caller; it is collected as
a ``SideEffectFault`` (see ``services.side_effects``) and returned alongside
the successful result.
"""

from typing import Any, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse


class CollabMateError(Exception):
    """Base exception for CollabMate application."""

    code = "error"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInput(CollabMateError):
    """Raised when input is malformed or missing."""

    code = "invalid"
    status_code = status.HTTP_400_BAD_REQUEST


class ResourceNotFound(CollabMateError):
    """Raised when a requested resource is not found."""

    code = "not_found"
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, resource_type: str, identifier: Any = None, message: str | None = None):
        if message is None:
            if identifier is not None:
                message = f"{resource_type} with id '{identifier}' not found"
            else:
                message = f"{resource_type} not found"
        super().__init__(message, {"resource": resource_type, "id": str(identifier)})


class PermissionDenied(CollabMateError):
    """Raised when the caller is not entitled to perform an action."""

    code = "forbidden"
    status_code = status.HTTP_403_FORBIDDEN

    def __init__(self, message: str | None = None, action: str | None = None):
        if message is None:
            message = f"You don't have permission to {action}" if action else "Permission denied"
        super().__init__(message)


class ConflictError(CollabMateError):
    """Raised when a uniqueness or membership invariant would be violated."""

    code = "conflict"
    status_code = status.HTTP_409_CONFLICT


class InvalidStateTransition(CollabMateError):
    """Raised when the entity is no longer in the state a transition requires."""

    code = "invalid_state"
    status_code = status.HTTP_409_CONFLICT

    def __init__(self, resource_type: str, identifier: Any, current: str | None, target: str):
        message = (
            f"{resource_type} '{identifier}' cannot move to '{target}' "
            f"from '{current}'; only pending requests can be decided"
        )
        super().__init__(message, {"current": current, "target": target})


async def collabmate_error_handler(request: Request, exc: CollabMateError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message, "code": exc.code},
    )
