"""Multi-selection scoped to the current location."""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterator

logger = logging.getLogger(__name__)


class SelectionTracker:
    """
    Set of selected entity ids.

    Members are always direct children of the current location. The session
    clears the tracker whenever the location changes.
    """

    def __init__(self) -> None:
        self._selected: set[str] = set()

    @property
    def selected(self) -> frozenset[str]:
        return frozenset(self._selected)

    def toggle(self, entity_id: str, visible_ids: AbstractSet[str]) -> bool:
        """
        Flip membership of `entity_id` and return whether it is now selected.

        Ids outside `visible_ids` are ignored.
        """
        if entity_id not in visible_ids:
            logger.debug("Ignoring toggle of non-visible id %s", entity_id)
            return False
        if entity_id in self._selected:
            self._selected.discard(entity_id)
            return False
        self._selected.add(entity_id)
        return True

    def clear(self) -> None:
        self._selected.clear()

    def prune(self, valid_ids: AbstractSet[str]) -> None:
        """Drop ids that are no longer valid."""
        self._selected &= valid_ids

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._selected

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._selected))

    def __len__(self) -> int:
        return len(self._selected)
