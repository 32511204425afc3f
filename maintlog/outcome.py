"""Outcome enums reported by MaintenanceIndex operations."""

from enum import Enum


class InsertOutcome(Enum):
    """Result of inserting a record."""

    INSERTED = 1
    DUPLICATE_KEY = 2  # Date already present, stored record left as-is


class UpdateOutcome(Enum):
    """Result of updating a record in place."""

    UPDATED = 1
    NOT_FOUND = 2


class DeleteOutcome(Enum):
    """Result of deleting a record."""

    DELETED = 1
    NOT_FOUND = 2
