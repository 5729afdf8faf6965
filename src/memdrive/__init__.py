"""memdrive public API."""

from __future__ import annotations

from memdrive.boundary import BlobStore, DownloadTrigger, InMemoryBlobStore
from memdrive.config import DriveConfig, SampleFolder
from memdrive.errors import (
    InvalidStateError,
    MemDriveError,
    NotFoundError,
    ResourceError,
    ValidationError,
)
from memdrive.models import (
    ROOT,
    Breadcrumb,
    DeleteResult,
    DriveView,
    File,
    Folder,
    IngestRecord,
    Preview,
    UploadFailure,
    UploadPayload,
    UploadResult,
)
from memdrive.navigation import Navigator
from memdrive.search import search_children
from memdrive.selection import SelectionTracker
from memdrive.session import DriveSession
from memdrive.store import EntityStore
from memdrive.util import FileKind, PreviewKind, format_date, format_file_size

__all__ = [
    # High-level
    "DriveSession",
    "DriveConfig",
    "SampleFolder",
    # Core components
    "EntityStore",
    "Navigator",
    "SelectionTracker",
    "search_children",
    # Boundary
    "BlobStore",
    "InMemoryBlobStore",
    "DownloadTrigger",
    # Models
    "ROOT",
    "Folder",
    "File",
    "Breadcrumb",
    "UploadPayload",
    "IngestRecord",
    "UploadFailure",
    "UploadResult",
    "DeleteResult",
    "DriveView",
    "Preview",
    "PreviewKind",
    "FileKind",
    "format_file_size",
    "format_date",
    # Errors
    "MemDriveError",
    "ValidationError",
    "NotFoundError",
    "ResourceError",
    "InvalidStateError",
]
