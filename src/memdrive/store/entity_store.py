"""EntityStore: the single source of truth for folders and files."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Iterator, Optional, Sequence

from memdrive.boundary import BlobStore
from memdrive.errors import NotFoundError, ResourceError
from memdrive.models import ROOT, DeleteResult, Entity, File, Folder, IngestRecord
from memdrive.util.ids import new_file_id, new_folder_id
from memdrive.util.mime import classify_preview
from memdrive.util.time import normalize_dt, now_utc

from .index import EntityIndex
from .validators import (
    validate_exists,
    validate_is_folder,
    validate_location,
    validate_name,
)

logger = logging.getLogger(__name__)


class EntityStore:
    """
    In-memory collection of Folders and Files plus their parent/child links.

    The store owns the payload handle of every File it holds: deleting a File
    releases its handle through `blob_store`, exactly once.
    """

    def __init__(self, blob_store: BlobStore) -> None:
        self._blob_store = blob_store
        self._index = EntityIndex()

    # ----------------------------
    # Read APIs
    # ----------------------------
    def has(self, entity_id: str) -> bool:
        return self._index.has(entity_id)

    def get(self, entity_id: str) -> Entity:
        validate_exists(self._index, entity_id, "Entity")
        return self._index.get(entity_id)  # type: ignore[return-value]

    def get_folder(self, folder_id: str) -> Folder:
        validate_exists(self._index, folder_id, "Folder")
        validate_is_folder(self._index, folder_id, "Entity")
        return self._index.folders_by_id[folder_id]

    def get_file(self, file_id: str) -> File:
        file = self._index.files_by_id.get(file_id)
        if file is None:
            raise NotFoundError(f"File does not exist: {file_id}", details={"id": file_id})
        return file

    def children(self, folder_id: str) -> tuple[list[Folder], list[File]]:
        """Direct children of a location, split by kind, in insertion order."""
        validate_location(self._index, folder_id, "Location")

        folders: list[Folder] = []
        files: list[File] = []
        for child_id in self._index.list_children_ids(folder_id):
            if child_id in self._index.folders_by_id:
                folders.append(self._index.folders_by_id[child_id])
            else:
                files.append(self._index.files_by_id[child_id])
        return folders, files

    def child_ids(self, folder_id: str) -> set[str]:
        validate_location(self._index, folder_id, "Location")
        return set(self._index.list_children_ids(folder_id))

    def ancestors(self, folder_id: str) -> list[Folder]:
        """
        Folders from the top level down to `folder_id` (inclusive).

        Returns an empty list for ROOT.
        """
        validate_location(self._index, folder_id, "Location")

        chain: list[Folder] = []
        seen: set[str] = set()
        cur = folder_id
        while cur != ROOT and cur not in seen:
            seen.add(cur)
            folder = self._index.folders_by_id.get(cur)
            if folder is None:
                break
            chain.append(folder)
            cur = folder.parent_id
        chain.reverse()
        return chain

    def iter_folders(self) -> Iterator[Folder]:
        return iter(list(self._index.folders_by_id.values()))

    def iter_files(self) -> Iterator[File]:
        return iter(list(self._index.files_by_id.values()))

    @property
    def folder_count(self) -> int:
        return len(self._index.folders_by_id)

    @property
    def file_count(self) -> int:
        return len(self._index.files_by_id)

    # ----------------------------
    # Mutation APIs
    # ----------------------------
    def create_folder(
        self,
        parent_id: str,
        name: str,
        *,
        created_at: Optional[datetime] = None,
    ) -> Folder:
        validate_name(name, "Folder")
        validate_location(self._index, parent_id, "Parent")
        created_at = normalize_dt(created_at) if created_at is not None else now_utc()

        folder = Folder(
            folder_id=new_folder_id(),
            name=name,
            parent_id=parent_id,
            created_at=created_at,
        )
        self._index.add_folder(folder)
        logger.debug("Created folder %r (%s) under %s", name, folder.folder_id, parent_id)
        return folder

    def rename_folder(self, folder_id: str, name: str) -> Folder:
        validate_name(name, "Folder")
        folder = replace(self.get_folder(folder_id), name=name)
        # Same id and parent, so the adjacency index is unchanged.
        self._index.folders_by_id[folder_id] = folder
        logger.debug("Renamed folder %s to %r", folder_id, name)
        return folder

    def ingest_files(self, parent_id: str, records: Sequence[IngestRecord]) -> list[File]:
        """
        Create one File per record, in input order.

        Size and MIME type are accepted as given. The parent is checked before
        anything is created.
        """
        validate_location(self._index, parent_id, "Parent")

        created_at = now_utc()
        files: list[File] = []
        for record in records:
            file = File(
                file_id=new_file_id(),
                name=record.name,
                size=record.size,
                mime_type=record.mime_type or "",
                parent_id=parent_id,
                created_at=created_at,
                handle=record.handle,
                preview_kind=classify_preview(record.mime_type),
            )
            self._index.add_file(file)
            files.append(file)

        logger.debug("Ingested %d file(s) under %s", len(files), parent_id)
        return files

    def delete_entities(self, entity_ids: Iterable[str]) -> DeleteResult:
        """
        Delete entities and everything below them.

        Unknown ids are ignored, so repeating a delete is a no-op. All removals
        finish before any payload handle is released; a failed release is
        logged and reported as ResourceError once the store is consistent.
        """
        doomed = self._index.closure(entity_ids)
        result = DeleteResult()
        if not doomed:
            return result

        # Arena order keeps the result deterministic.
        result.folder_ids = [fid for fid in self._index.folders_by_id if fid in doomed]
        result.file_ids = [fid for fid in self._index.files_by_id if fid in doomed]

        removed_files: list[File] = []
        for file_id in result.file_ids:
            removed_files.append(self._index.remove(file_id))  # type: ignore[arg-type]
        for folder_id in result.folder_ids:
            self._index.remove(folder_id)

        logger.info(
            "Deleted %d folder(s) and %d file(s)",
            len(result.folder_ids),
            len(result.file_ids),
        )

        failed: list[str] = []
        first_exc: BaseException | None = None
        for file in removed_files:
            try:
                self._blob_store.release_handle(file.handle)
            except Exception as exc:
                logger.exception("Failed to release handle %s of file %s", file.handle, file.file_id)
                failed.append(file.handle)
                first_exc = first_exc or exc
                continue
            result.released_handles.append(file.handle)

        if failed:
            raise ResourceError(
                f"Failed to release {len(failed)} payload handle(s)",
                details={"handles": failed, "result": result},
                cause=first_exc,
            ) from first_exc

        return result

    # ----------------------------
    # Integrity
    # ----------------------------
    def check_integrity(self) -> list[str]:
        """
        Return ids of entities that break the tree invariant.

        An entity is broken when its parent is neither ROOT nor an existing
        Folder, or when following parent links from a Folder never reaches
        ROOT. Violations are logged, never raised.
        """
        broken: list[str] = []

        for entity_id, entity in self._iter_entities():
            parent_id = entity.parent_id
            if parent_id != ROOT and parent_id not in self._index.folders_by_id:
                logger.warning("Dangling parent %s on %s", parent_id, entity_id)
                broken.append(entity_id)
                continue
            if isinstance(entity, Folder) and not self._reaches_root(entity):
                logger.warning("Folder %s does not reach root (cycle)", entity_id)
                broken.append(entity_id)

        return broken

    # ----------------------------
    # Internals
    # ----------------------------
    def _iter_entities(self) -> Iterator[tuple[str, Entity]]:
        yield from self._index.folders_by_id.items()
        yield from self._index.files_by_id.items()

    def _reaches_root(self, folder: Folder) -> bool:
        seen: set[str] = set()
        cur = folder.parent_id
        while cur != ROOT:
            if cur in seen or cur == folder.folder_id:
                return False
            seen.add(cur)
            parent = self._index.folders_by_id.get(cur)
            if parent is None:
                return False
            cur = parent.parent_id
        return True
