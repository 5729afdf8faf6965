from .ids import new_file_id, new_folder_id, new_uuid
from .mime import FileKind, PreviewKind, classify_preview, file_kind
from .size import format_file_size
from .time import format_date, normalize_dt, now_utc

__all__ = [
    "new_uuid",
    "new_folder_id",
    "new_file_id",
    "PreviewKind",
    "FileKind",
    "classify_preview",
    "file_kind",
    "format_file_size",
    "now_utc",
    "normalize_dt",
    "format_date",
]
