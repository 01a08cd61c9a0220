"""Core data contracts shared by the store and the memoizer."""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class NotFound(Enum):
    """Marker type for lookups that miss."""

    NOT_FOUND = "not-found"

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound.NOT_FOUND


class InvalidCapacityError(ValueError):
    """Raised when a cache is configured with a capacity that cannot hold entries."""


def validate_capacity(capacity: object) -> int:
    """Return capacity unchanged if it is a positive integer, else raise."""
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(f"capacity must be an integer, got {type(capacity).__name__}")
    if capacity <= 0:
        raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
    return capacity


@dataclass(slots=True, eq=False)
class Entry:
    """One cached mapping linked into the recency chain.

    ``next`` points toward the least-recently-used end, ``prev`` toward the
    most-recently-used end.
    """

    key: Hashable
    value: Any
    next: Entry | None = field(default=None, repr=False)
    prev: Entry | None = field(default=None, repr=False)
