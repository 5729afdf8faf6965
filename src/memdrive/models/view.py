"""Read-only projections handed to the rendering layer."""

from __future__ import annotations

from dataclasses import dataclass

from memdrive.util.mime import PreviewKind

from .breadcrumb import Breadcrumb
from .entities import File, Folder


@dataclass(slots=True, frozen=True)
class DriveView:
    """
    Consistent snapshot of everything the renderer needs.

    folders/files are the current location's children after search filtering,
    in insertion order.
    """

    location_id: str
    trail: tuple[Breadcrumb, ...]
    folders: tuple[Folder, ...]
    files: tuple[File, ...]
    selection: frozenset[str]
    query: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.folders and not self.files


@dataclass(slots=True, frozen=True)
class Preview:
    """How to present a file: the rendering mode plus the payload handle."""

    file: File
    kind: PreviewKind

    @property
    def handle(self) -> str:
        return self.file.handle

    @property
    def has_inline_preview(self) -> bool:
        return self.kind is not PreviewKind.GENERIC
