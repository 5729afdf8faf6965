"""Breadcrumb trail element."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Breadcrumb:
    """One step of the ancestor chain from ROOT to the current location."""

    folder_id: str
    name: str
