"""Name filter over the current location's children."""

from __future__ import annotations

from typing import Sequence

from memdrive.models import File, Folder


def matches(name: str, query: str) -> bool:
    """Case-insensitive substring match; an empty query matches everything."""
    if not query:
        return True
    return query.casefold() in name.casefold()


def search_children(
    folders: Sequence[Folder],
    files: Sequence[File],
    query: str,
) -> tuple[list[Folder], list[File]]:
    """
    Filter children by name, keeping their relative order.

    Only the sequences passed in are searched; there is no cross-folder
    search.
    """
    if not query:
        return list(folders), list(files)
    return (
        [f for f in folders if matches(f.name, query)],
        [f for f in files if matches(f.name, query)],
    )
