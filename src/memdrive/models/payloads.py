"""Input models for upload and ingestion."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class UploadPayload:
    """
    A raw payload picked by the user.

    `data` is handed to the blob store as-is; size and mime_type are taken on
    trust (no validation).
    """

    name: str
    size: int
    mime_type: str
    data: Any


@dataclass(slots=True, frozen=True)
class IngestRecord:
    """Metadata plus an already-obtained payload handle, ready to become a File."""

    name: str
    size: int
    mime_type: str
    handle: str
