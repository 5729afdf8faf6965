"""Public search exports for memdrive."""

from __future__ import annotations

from .filter import matches, search_children

__all__ = ["matches", "search_children"]
