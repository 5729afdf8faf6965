"""Result models for upload/delete operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from .entities import File


@dataclass(slots=True)
class UploadFailure:
    """A payload that was skipped during upload."""

    index: int
    name: str
    error_type: str
    error_message: str
    error_details: Optional[dict[str, Any]] = None


@dataclass(slots=True)
class UploadResult:
    """Files created by an upload (input order) and the payloads that failed."""

    files: list[File] = field(default_factory=list)
    failures: list[UploadFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures


@dataclass(slots=True)
class DeleteResult:
    """What a delete actually removed, descendants included."""

    folder_ids: list[str] = field(default_factory=list)
    file_ids: list[str] = field(default_factory=list)
    released_handles: list[str] = field(default_factory=list)

    @property
    def removed_ids(self) -> set[str]:
        return set(self.folder_ids) | set(self.file_ids)

    @property
    def empty(self) -> bool:
        return not self.folder_ids and not self.file_ids
