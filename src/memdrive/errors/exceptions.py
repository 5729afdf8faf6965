"""Exception hierarchy for memdrive."""

from __future__ import annotations

from typing import Any, Optional


class MemDriveError(Exception):
    """
    Base exception for memdrive.

    Attributes:
        details: Optional structured information (e.g., offending id, index).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class ValidationError(MemDriveError):
    """Raised when an operation receives invalid input. State is left untouched."""


class NotFoundError(ValidationError):
    """Raised when an entity id does not exist in the store."""


class ResourceError(MemDriveError):
    """Raised when a payload handle cannot be obtained or released."""


class InvalidStateError(MemDriveError):
    """Raised when the session is used without a required collaborator."""
