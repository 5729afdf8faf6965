"""Strict validation helpers for EntityStore."""

from __future__ import annotations

from memdrive.errors import NotFoundError, ValidationError
from memdrive.models import ROOT

from .index import EntityIndex


def validate_name(name: str, what: str) -> str:
    """Return the name unchanged if it has visible characters."""
    if not isinstance(name, str) or not name.strip():
        raise ValidationError(f"{what} name must not be empty", details={"name": name})
    return name


def validate_exists(index: EntityIndex, entity_id: str, what: str) -> None:
    if not index.has(entity_id):
        raise NotFoundError(f"{what} does not exist: {entity_id}", details={"id": entity_id})


def validate_is_folder(index: EntityIndex, entity_id: str, what: str) -> None:
    if not index.is_folder(entity_id):
        raise ValidationError(f"{what} must be a folder: {entity_id}", details={"id": entity_id})


def validate_location(index: EntityIndex, location_id: str, what: str) -> None:
    """A location is ROOT or an existing Folder."""
    if location_id == ROOT:
        return
    validate_exists(index, location_id, what)
    validate_is_folder(index, location_id, what)
