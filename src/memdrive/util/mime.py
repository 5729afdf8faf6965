from __future__ import annotations

from enum import Enum


class PreviewKind(str, Enum):
    """Closed set of preview rendering modes."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    GENERIC = "generic"


class FileKind(str, Enum):
    """Coarse file category used for icons and listings."""

    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    PDF = "pdf"
    DOCUMENT = "document"
    SPREADSHEET = "spreadsheet"
    OTHER = "other"


_MEDIA_PREFIXES: tuple[tuple[str, PreviewKind], ...] = (
    ("image/", PreviewKind.IMAGE),
    ("video/", PreviewKind.VIDEO),
    ("audio/", PreviewKind.AUDIO),
)


def classify_preview(mime_type: str | None) -> PreviewKind:
    """
    Return the preview mode for a MIME type.

    Only the top-level media prefixes get a dedicated mode; everything else,
    including an empty or unknown type, falls back to GENERIC. The type is
    matched as given: "IMAGE/PNG" is GENERIC.
    """
    if not mime_type:
        return PreviewKind.GENERIC
    for prefix, kind in _MEDIA_PREFIXES:
        if mime_type.startswith(prefix):
            return kind
    return PreviewKind.GENERIC


def file_kind(mime_type: str | None) -> FileKind:
    """
    Return the icon category for a MIME type.

    Checks are ordered: media prefixes first, then substring checks for pdf,
    document/text and spreadsheet/excel. An OOXML spreadsheet type contains
    "document" and is therefore reported as DOCUMENT. Matching is
    case-sensitive, like classify_preview.
    """
    preview = classify_preview(mime_type)
    if preview is not PreviewKind.GENERIC:
        return FileKind(preview.value)
    if not mime_type:
        return FileKind.OTHER

    if "pdf" in mime_type:
        return FileKind.PDF
    if "document" in mime_type or "text" in mime_type:
        return FileKind.DOCUMENT
    if "spreadsheet" in mime_type or "excel" in mime_type:
        return FileKind.SPREADSHEET
    return FileKind.OTHER
