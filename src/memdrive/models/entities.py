"""Data model for drive entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Final, Union

from memdrive.util.mime import PreviewKind

ROOT: Final[str] = "root"
"""Parent id of top-level entities and location id of the drive root."""


@dataclass(slots=True, frozen=True)
class Folder:
    """
    A folder in the drive tree.

    Notes:
        - parent_id is ROOT or the id of an existing Folder.
        - Instances are immutable; EntityStore.rename_folder swaps in a renamed
          copy, so objects handed out earlier keep their old name.
    """

    folder_id: str
    name: str
    parent_id: str
    created_at: datetime

    @property
    def entity_id(self) -> str:
        return self.folder_id


@dataclass(slots=True, frozen=True)
class File:
    """
    An uploaded file.

    Metadata is a snapshot taken at ingestion time. The File owns `handle`
    exclusively; the handle is released when the File is deleted.
    """

    file_id: str
    name: str
    size: int
    mime_type: str
    parent_id: str
    created_at: datetime
    handle: str
    preview_kind: PreviewKind = PreviewKind.GENERIC

    @property
    def entity_id(self) -> str:
        return self.file_id


Entity = Union[Folder, File]
