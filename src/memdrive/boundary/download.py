"""Download trigger contract."""

from __future__ import annotations

from abc import ABC, abstractmethod


class DownloadTrigger(ABC):
    """Hands a payload handle to whatever actually saves it (fire-and-forget)."""

    @abstractmethod
    def trigger(self, handle: str, suggested_name: str) -> None:
        """Start a download of `handle`, proposing `suggested_name` as file name."""
