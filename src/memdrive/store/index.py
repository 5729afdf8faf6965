"""Arena + adjacency indexes backing the EntityStore."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Iterable, Optional

from memdrive.models import ROOT, Entity, File, Folder


@dataclass(slots=True)
class EntityIndex:
    """
    In-memory representation of the drive tree.

    Indexes:
        - folders_by_id / files_by_id: the arena, keyed by entity id
        - children_by_parent_id: parent id -> ordered set of child ids
          (dict keys, insertion order preserved, values unused)

    Every mutation goes through add_*/remove so the indexes never disagree.
    """

    folders_by_id: dict[str, Folder] = field(default_factory=dict)
    files_by_id: dict[str, File] = field(default_factory=dict)
    children_by_parent_id: dict[str, dict[str, None]] = field(
        default_factory=lambda: {ROOT: {}}
    )

    # ----------------------------
    # Query helpers
    # ----------------------------
    def has(self, entity_id: str) -> bool:
        return entity_id in self.folders_by_id or entity_id in self.files_by_id

    def is_folder(self, entity_id: str) -> bool:
        return entity_id in self.folders_by_id

    def get(self, entity_id: str) -> Optional[Entity]:
        folder = self.folders_by_id.get(entity_id)
        if folder is not None:
            return folder
        return self.files_by_id.get(entity_id)

    def list_children_ids(self, parent_id: str) -> list[str]:
        return list(self.children_by_parent_id.get(parent_id, {}))

    def closure(self, entity_ids: Iterable[str]) -> set[str]:
        """
        Return the given ids plus every descendant (BFS over the adjacency).

        Unknown ids are dropped.
        """
        found: set[str] = set()
        q: deque[str] = deque(eid for eid in entity_ids if self.has(eid))

        while q:
            cur = q.popleft()
            if cur in found:
                continue
            found.add(cur)
            for child_id in self.children_by_parent_id.get(cur, {}):
                if child_id not in found:
                    q.append(child_id)

        return found

    # ----------------------------
    # Mutation helpers (keep indexes consistent)
    # ----------------------------
    def add_folder(self, folder: Folder) -> None:
        self.folders_by_id[folder.folder_id] = folder
        self.children_by_parent_id.setdefault(folder.folder_id, {})
        self._add_child_index(folder.parent_id, folder.folder_id)

    def add_file(self, file: File) -> None:
        self.files_by_id[file.file_id] = file
        self._add_child_index(file.parent_id, file.file_id)

    def remove(self, entity_id: str) -> Optional[Entity]:
        """Remove one entity from the arena and indexes. Children are untouched."""
        entity = self.folders_by_id.pop(entity_id, None)
        if entity is None:
            entity = self.files_by_id.pop(entity_id, None)
        if entity is None:
            return None

        self._remove_child_index(entity.parent_id, entity_id)
        self.children_by_parent_id.pop(entity_id, None)
        return entity

    # ----------------------------
    # Internal index maintenance
    # ----------------------------
    def _add_child_index(self, parent_id: str, child_id: str) -> None:
        self.children_by_parent_id.setdefault(parent_id, {})[child_id] = None

    def _remove_child_index(self, parent_id: str, child_id: str) -> None:
        siblings = self.children_by_parent_id.get(parent_id)
        if siblings is not None:
            siblings.pop(child_id, None)
