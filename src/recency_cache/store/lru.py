"""Fixed-capacity key-value store with least-recently-used eviction."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterator
from typing import Any

from recency_cache.contracts import NOT_FOUND, Entry, NotFound, validate_capacity

logger = logging.getLogger(__name__)


class LRUStore:
    """Doubly linked recency chain plus a key index.

    The chain runs from ``head`` (most recently used) to ``tail`` (least
    recently used). Every ``put`` and every successful ``get`` moves the
    touched entry to ``head``; a ``put`` of a new key into a full store evicts
    ``tail`` first. All single-key operations are O(1).

    Not thread-safe: callers sharing one instance must serialize access.
    """

    def __init__(self, capacity: int) -> None:
        """Initialize an empty store holding at most ``capacity`` entries."""
        self._capacity = validate_capacity(capacity)
        self._index: dict[Hashable, Entry] = {}
        self._head: Entry | None = None
        self._tail: Entry | None = None

    @property
    def capacity(self) -> int:
        """Maximum number of entries held at once."""
        return self._capacity

    @property
    def head(self) -> Entry | None:
        """Most recently used entry, or None when empty."""
        return self._head

    @property
    def tail(self) -> Entry | None:
        """Least recently used entry, or None when empty."""
        return self._tail

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def __iter__(self) -> Iterator[Hashable]:
        node = self._head
        while node is not None:
            yield node.key
            node = node.next

    def __reversed__(self) -> Iterator[Hashable]:
        node = self._tail
        while node is not None:
            yield node.key
            node = node.prev

    def __repr__(self) -> str:
        return f"LRUStore(capacity={self._capacity}, size={len(self)})"

    def keys(self) -> list[Hashable]:
        """Return keys ordered from most to least recently used."""
        return list(self)

    def items(self) -> list[tuple[Hashable, Any]]:
        """Return (key, value) pairs ordered from most to least recently used."""
        pairs: list[tuple[Hashable, Any]] = []
        node = self._head
        while node is not None:
            pairs.append((node.key, node.value))
            node = node.next
        return pairs

    def snapshot(self) -> list[Any]:
        """Return stored values from most to least recently used."""
        return [value for _, value in self.items()]

    def put(self, key: Hashable, value: Any) -> None:
        """Store ``value`` under ``key`` and mark it most recently used.

        An existing key is relocated to the head with its value replaced. A new
        key arriving at full capacity evicts the tail entry first.
        """
        entry = self._index.get(key)
        if entry is not None:
            self._unlink(entry)
            entry.value = value
        else:
            if len(self._index) >= self._capacity:
                self.evict()
            entry = Entry(key=key, value=value)
            self._index[key] = entry
        self._push_front(entry)

    def get(self, key: Hashable, default: Any = NOT_FOUND) -> Any:
        """Return the value for ``key`` and promote it, or ``default`` on a miss."""
        entry = self._index.get(key)
        if entry is None:
            return default
        if entry is not self._head:
            self._unlink(entry)
            self._push_front(entry)
        return entry.value

    def remove(self, key: Hashable) -> None:
        """Drop ``key`` from the store; absent keys are ignored."""
        entry = self._index.pop(key, None)
        if entry is None:
            return
        self._unlink(entry)

    def evict(self) -> Hashable | NotFound:
        """Remove the least recently used entry and return its key."""
        if self._tail is None:
            return NOT_FOUND
        key = self._tail.key
        self.remove(key)
        logger.debug("Evicted key=%r capacity=%d", key, self._capacity)
        return key

    def clear(self) -> None:
        """Release every entry."""
        node = self._head
        while node is not None:
            following = node.next
            node.next = node.prev = None
            node = following
        self._index.clear()
        self._head = self._tail = None

    def _unlink(self, entry: Entry) -> None:
        if entry.next is not None:
            entry.next.prev = entry.prev
        else:
            self._tail = entry.prev

        if entry.prev is not None:
            entry.prev.next = entry.next
        else:
            self._head = entry.next

        entry.next = entry.prev = None

    def _push_front(self, entry: Entry) -> None:
        entry.prev = None
        entry.next = self._head
        if self._head is not None:
            self._head.prev = entry
        else:
            self._tail = entry
        self._head = entry
