"""Navigator: current location and breadcrumb trail."""

from __future__ import annotations

import logging
from typing import Sequence

from memdrive.errors import ValidationError
from memdrive.models import ROOT, Breadcrumb, Folder

logger = logging.getLogger(__name__)


class Navigator:
    """
    Tracks where the user is.

    The trail always starts with the root crumb and ends at the current
    location; it only grows on `enter` and only shrinks from the tail on
    `jump_to`.
    """

    def __init__(self, root_name: str = "My Drive") -> None:
        self._root = Breadcrumb(folder_id=ROOT, name=root_name)
        self._trail: list[Breadcrumb] = [self._root]

    @property
    def location_id(self) -> str:
        return self._trail[-1].folder_id

    @property
    def trail(self) -> tuple[Breadcrumb, ...]:
        return tuple(self._trail)

    @property
    def at_root(self) -> bool:
        return len(self._trail) == 1

    def enter(self, folder: Folder) -> None:
        """Move into a direct child folder of the current location."""
        if folder.parent_id != self.location_id:
            raise ValidationError(
                f"Folder is not a child of the current location: {folder.folder_id}",
                details={"folder_id": folder.folder_id, "location_id": self.location_id},
            )
        self._trail.append(Breadcrumb(folder_id=folder.folder_id, name=folder.name))
        logger.debug("Entered %s (depth %d)", folder.folder_id, len(self._trail) - 1)

    def jump_to(self, index: int) -> None:
        """Go back to the crumb at `index`, dropping everything after it."""
        if not isinstance(index, int) or not 0 <= index < len(self._trail):
            raise ValidationError(
                f"Trail index out of range: {index}",
                details={"index": index, "length": len(self._trail)},
            )
        del self._trail[index + 1 :]
        logger.debug("Jumped to %s", self.location_id)

    def relabel(self, folder_id: str, name: str) -> None:
        """Refresh the display name of a crumb after its folder was renamed."""
        for pos, crumb in enumerate(self._trail):
            if pos and crumb.folder_id == folder_id:
                self._trail[pos] = Breadcrumb(folder_id=folder_id, name=name)

    def reset(self, path: Sequence[Folder] = ()) -> None:
        """
        Rebuild the trail from a top-down folder path.

        `path` must be a literal ancestor chain starting under ROOT.
        """
        trail = [self._root]
        for folder in path:
            if folder.parent_id != trail[-1].folder_id:
                raise ValidationError(
                    "Path is not an ancestor chain",
                    details={"folder_id": folder.folder_id},
                )
            trail.append(Breadcrumb(folder_id=folder.folder_id, name=folder.name))
        self._trail = trail
