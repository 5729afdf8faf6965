"""Session configuration for memdrive."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from memdrive.util.time import normalize_dt

DEFAULT_ROOT_NAME = "My Drive"


@dataclass(slots=True, frozen=True)
class SampleFolder:
    """
    A folder created under ROOT when sample seeding is on.

    created_at:
        Fixed creation time; None stamps the folder with the current time.
    """

    name: str
    created_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("SampleFolder.name must be a non-empty string")
        if self.created_at is not None:
            normalize_dt(self.created_at)


DEFAULT_SAMPLE_FOLDERS: tuple[SampleFolder, ...] = (
    SampleFolder("Documents", datetime(2025, 1, 15, tzinfo=timezone.utc)),
    SampleFolder("Images", datetime(2025, 2, 10, tzinfo=timezone.utc)),
    SampleFolder("Work Projects", datetime(2025, 3, 5, tzinfo=timezone.utc)),
)


@dataclass(slots=True, frozen=True)
class DriveConfig:
    """
    Settings for a DriveSession.

    root_name:
        Display name of the root crumb.
    seed_samples:
        Create `sample_folders` under ROOT when the session starts.
    """

    root_name: str = DEFAULT_ROOT_NAME
    seed_samples: bool = False
    sample_folders: tuple[SampleFolder, ...] = DEFAULT_SAMPLE_FOLDERS

    def __post_init__(self) -> None:
        if not isinstance(self.root_name, str) or not self.root_name.strip():
            raise ValueError("DriveConfig.root_name must be a non-empty string")

        if not isinstance(self.sample_folders, tuple):
            raise TypeError("DriveConfig.sample_folders must be a tuple")

        for sample in self.sample_folders:
            if not isinstance(sample, SampleFolder):
                raise TypeError("DriveConfig.sample_folders must hold SampleFolder items")
