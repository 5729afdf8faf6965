"""Public model exports for memdrive."""

from __future__ import annotations

from .breadcrumb import Breadcrumb
from .entities import ROOT, Entity, File, Folder
from .payloads import IngestRecord, UploadPayload
from .results import DeleteResult, UploadFailure, UploadResult
from .view import DriveView, Preview

__all__ = [
    "ROOT",
    "Entity",
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
]
