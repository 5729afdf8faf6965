"""Contracts for the collaborators memdrive talks to."""

from __future__ import annotations

from .blobs import HANDLE_PREFIX, BlobStore, InMemoryBlobStore
from .download import DownloadTrigger

__all__ = [
    "BlobStore",
    "InMemoryBlobStore",
    "DownloadTrigger",
    "HANDLE_PREFIX",
]
