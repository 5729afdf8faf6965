"""Public store exports for memdrive."""

from __future__ import annotations

from .entity_store import EntityStore
from .index import EntityIndex

__all__ = ["EntityStore", "EntityIndex"]
