"""Public selection exports for memdrive."""

from __future__ import annotations

from .tracker import SelectionTracker

__all__ = ["SelectionTracker"]
