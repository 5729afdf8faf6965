"""DriveSession: the explicit state object tying store, navigation and selection together."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from memdrive.boundary import BlobStore, DownloadTrigger, InMemoryBlobStore
from memdrive.config import DriveConfig
from memdrive.errors import InvalidStateError, ResourceError
from memdrive.models import (
    ROOT,
    Breadcrumb,
    DeleteResult,
    DriveView,
    File,
    Folder,
    IngestRecord,
    Preview,
    UploadFailure,
    UploadPayload,
    UploadResult,
)
from memdrive.navigation import Navigator
from memdrive.search import search_children
from memdrive.selection import SelectionTracker
from memdrive.store import EntityStore

logger = logging.getLogger(__name__)


class DriveSession:
    """
    Single-user, in-memory drive.

    A new session holds only ROOT (plus sample folders when configured).
    Every public method runs to completion synchronously; `view()` returns an
    immutable snapshot, so a renderer never sees a half-applied change.
    """

    def __init__(
        self,
        config: Optional[DriveConfig] = None,
        *,
        blob_store: Optional[BlobStore] = None,
        download_trigger: Optional[DownloadTrigger] = None,
    ) -> None:
        self._config = config or DriveConfig()
        self._blob_store = blob_store if blob_store is not None else InMemoryBlobStore()
        self._download_trigger = download_trigger

        self._store = EntityStore(self._blob_store)
        self._navigator = Navigator(root_name=self._config.root_name)
        self._selection = SelectionTracker()
        self._query = ""

        if self._config.seed_samples:
            for sample in self._config.sample_folders:
                self._store.create_folder(ROOT, sample.name, created_at=sample.created_at)

    # ----------------------------
    # State accessors
    # ----------------------------
    @property
    def config(self) -> DriveConfig:
        return self._config

    @property
    def store(self) -> EntityStore:
        return self._store

    @property
    def blob_store(self) -> BlobStore:
        return self._blob_store

    @property
    def location_id(self) -> str:
        return self._navigator.location_id

    @property
    def trail(self) -> tuple[Breadcrumb, ...]:
        return self._navigator.trail

    @property
    def selection(self) -> frozenset[str]:
        return self._selection.selected

    @property
    def query(self) -> str:
        return self._query

    def visible_items(self) -> tuple[list[Folder], list[File]]:
        """Children of the current location after applying the search query."""
        folders, files = self._store.children(self.location_id)
        return search_children(folders, files, self._query)

    def view(self) -> DriveView:
        folders, files = self.visible_items()
        return DriveView(
            location_id=self.location_id,
            trail=self.trail,
            folders=tuple(folders),
            files=tuple(files),
            selection=self._selection.selected,
            query=self._query,
        )

    # ----------------------------
    # Navigation
    # ----------------------------
    def enter(self, folder_id: str) -> None:
        folder = self._store.get_folder(folder_id)
        self._navigator.enter(folder)
        self._selection.clear()

    def jump_to(self, index: int) -> None:
        self._navigator.jump_to(index)
        self._selection.clear()

    def go_home(self) -> None:
        self.jump_to(0)

    # ----------------------------
    # Search / selection
    # ----------------------------
    def set_query(self, query: str) -> None:
        self._query = query or ""

    def toggle(self, entity_id: str) -> bool:
        """Toggle selection of a direct child of the current location."""
        return self._selection.toggle(entity_id, self._store.child_ids(self.location_id))

    def clear_selection(self) -> None:
        self._selection.clear()

    # ----------------------------
    # Mutations
    # ----------------------------
    def create_folder(self, name: str) -> Folder:
        return self._store.create_folder(self.location_id, name)

    def rename_folder(self, folder_id: str, name: str) -> Folder:
        folder = self._store.rename_folder(folder_id, name)
        self._navigator.relabel(folder_id, folder.name)
        return folder

    def upload(self, payloads: Sequence[UploadPayload]) -> UploadResult:
        """
        Store payloads as Files under the current location.

        Payloads whose handle cannot be obtained are skipped and reported in
        `UploadResult.failures`; the rest keep their input order. Any other
        error releases the handles obtained so far and propagates.
        """
        parent_id = self.location_id
        result = UploadResult()
        records: list[IngestRecord] = []

        try:
            for index, payload in enumerate(payloads):
                try:
                    handle = self._blob_store.obtain_handle(payload.data)
                except ResourceError as exc:
                    logger.warning("Skipping upload of %r: %s", payload.name, exc)
                    result.failures.append(_failed_upload(index, payload, exc))
                    continue

                records.append(
                    IngestRecord(
                        name=payload.name,
                        size=payload.size,
                        mime_type=payload.mime_type,
                        handle=handle,
                    )
                )

            result.files = self._store.ingest_files(parent_id, records)
        except Exception:
            for record in records:
                self._blob_store.release_handle(record.handle)
            raise

        return result

    def delete_selected(self) -> DeleteResult:
        """Delete every selected entity (and its descendants), then clear the selection."""
        try:
            return self._store.delete_entities(self._selection.selected)
        finally:
            self._selection.clear()

    def delete_entities(self, entity_ids: Iterable[str]) -> DeleteResult:
        """Delete arbitrary entities, keeping selection and location valid afterwards."""
        try:
            return self._store.delete_entities(entity_ids)
        finally:
            self._after_delete()

    # ----------------------------
    # Materialization
    # ----------------------------
    def download(self, file_id: str) -> None:
        if self._download_trigger is None:
            raise InvalidStateError("No download trigger configured for this session")
        file = self._store.get_file(file_id)
        self._download_trigger.trigger(file.handle, file.name)

    def preview(self, file_id: str) -> Preview:
        file = self._store.get_file(file_id)
        return Preview(file=file, kind=file.preview_kind)

    # ----------------------------
    # Internals
    # ----------------------------
    def _after_delete(self) -> None:
        trail = self._navigator.trail
        for pos, crumb in enumerate(trail):
            if pos and not self._store.has(crumb.folder_id):
                surviving = trail[pos - 1].folder_id
                logger.warning(
                    "Current location %s was deleted; falling back to %s",
                    self.location_id,
                    surviving,
                )
                self._navigator.reset(self._store.ancestors(surviving))
                self._selection.clear()
                return

        self._selection.prune(self._store.child_ids(self.location_id))


def _failed_upload(index: int, payload: UploadPayload, exc: ResourceError) -> UploadFailure:
    return UploadFailure(
        index=index,
        name=payload.name,
        error_type=exc.__class__.__name__,
        error_message=str(exc),
        error_details=exc.details or None,
    )
