"""Public navigation exports for memdrive."""

from __future__ import annotations

from .navigator import Navigator

__all__ = ["Navigator"]
