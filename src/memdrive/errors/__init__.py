"""Public error exports for memdrive."""

from __future__ import annotations

from .exceptions import (
    InvalidStateError,
    MemDriveError,
    NotFoundError,
    ResourceError,
    ValidationError,
)

__all__ = [
    "MemDriveError",
    "ValidationError",
    "NotFoundError",
    "ResourceError",
    "InvalidStateError",
]
