# core/errors.py

from fastapi import HTTPException


class StoreError(Exception):
    """Base class for failures raised by the in-memory entity store."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StoreError):
    """Lookup by id (or email) did not resolve to a record."""


class InvalidTransitionError(StoreError):
    """Resident status change not allowed from the current status."""


class PendingApprovalError(StoreError):
    """Resident exists but has not been approved by the manager yet."""


class DuplicateError(StoreError):
    """A record with the same natural key already exists."""


class PermissionDeniedError(StoreError):
    """The session's role lacks the capability for this operation."""


def extract_store_error(error: Exception) -> str:
    """
    Safely extract a readable detail from an error.
    Store errors carry a .message; anything else falls back to str().
    """
    if isinstance(error, StoreError):
        return error.message

    if hasattr(error, "args") and error.args:
        return str(error.args[0])

    return str(error) or "Unknown error"


def handle_store_error(error: Exception, operation: str = "Operation", status_code: int = 500) -> HTTPException:
    """
    Map store errors onto HTTPExceptions with consistent formatting.
    Returns HTTPException (doesn't raise) so caller can customize or re-raise.

    Args:
        error: The exception that occurred
        operation: Description of what failed (e.g., "Failed to approve resident")
        status_code: Fallback HTTP status code for unexpected errors

    Returns:
        HTTPException with standardized error message
    """
    from core.logging_config import logger

    detail = extract_store_error(error)

    if isinstance(error, NotFoundError):
        logger.warning(f"{operation}: {detail}")
        return HTTPException(status_code=404, detail=detail)
    if isinstance(error, (PendingApprovalError, PermissionDeniedError)):
        logger.warning(f"{operation}: {detail}")
        return HTTPException(status_code=403, detail=detail)
    if isinstance(error, (InvalidTransitionError, DuplicateError)):
        logger.warning(f"{operation}: {detail}")
        return HTTPException(status_code=409, detail=detail)

    logger.error(f"{operation}: {detail}")
    return HTTPException(status_code=status_code, detail=f"{operation} failed")
