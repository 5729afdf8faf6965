"""Blob subsystem contract and the in-memory implementation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from memdrive.errors import NotFoundError, ResourceError
from memdrive.util.ids import new_uuid

logger = logging.getLogger(__name__)

HANDLE_PREFIX = "blob:memdrive/"


class BlobStore(ABC):
    """
    Source of ephemeral payload handles.

    Every handle obtained here consumes memory until it is released. The
    EntityStore releases a File's handle exactly once, when the File is deleted.
    """

    @abstractmethod
    def obtain_handle(self, data: Any) -> str:
        """
        Register a binary payload and return an opaque handle for it.

        :raises ResourceError: if the payload cannot be read.
        """

    @abstractmethod
    def release_handle(self, handle: str) -> None:
        """Release a handle. Releasing an unknown or released handle is a no-op."""


class InMemoryBlobStore(BlobStore):
    """Keeps payload bytes in a dict keyed by `blob:memdrive/<uuid>` handles."""

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def obtain_handle(self, data: Any) -> str:
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise ResourceError(
                "Payload is not readable as bytes",
                details={"type": type(data).__name__},
            )

        handle = f"{HANDLE_PREFIX}{new_uuid()}"
        self._blobs[handle] = bytes(data)
        logger.debug("Obtained handle %s (%d bytes)", handle, len(self._blobs[handle]))
        return handle

    def release_handle(self, handle: str) -> None:
        if self._blobs.pop(handle, None) is not None:
            logger.debug("Released handle %s", handle)

    def read(self, handle: str) -> bytes:
        """Return the payload behind a live handle."""
        try:
            return self._blobs[handle]
        except KeyError as exc:
            raise NotFoundError(
                f"Handle is not live: {handle}",
                details={"handle": handle},
                cause=exc,
            ) from exc

    @property
    def live_handles(self) -> frozenset[str]:
        return frozenset(self._blobs)

    def __len__(self) -> int:
        return len(self._blobs)
