"""Memoizing wrapper backed by an LRUStore."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from recency_cache.config import load_settings
from recency_cache.contracts import NOT_FOUND
from recency_cache.memo.keys import argument_key
from recency_cache.store.lru import LRUStore

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def wrap(func: F, capacity: int | None = None) -> F:
    """Return ``func`` wrapped with a private LRU cache of results.

    ``func`` must be pure: on a hit it is not called, so side effects run only
    on the first call for each distinct argument list. Exceptions propagate and
    leave nothing cached. ``capacity`` defaults to the configured
    ``default_capacity``.
    """
    if capacity is None:
        capacity = load_settings().default_capacity
    store = LRUStore(capacity)

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        key = argument_key(args, kwargs)
        cached = store.get(key)
        if cached is not NOT_FOUND:
            logger.debug("Cache hit for %s key=%s", func.__qualname__, key)
            return cached

        logger.debug("Cache miss for %s key=%s", func.__qualname__, key)
        result = func(*args, **kwargs)
        store.put(key, result)
        return result

    wrapper.cache = store  # type: ignore[attr-defined]
    wrapper.cache_clear = store.clear  # type: ignore[attr-defined]
    return wrapper  # type: ignore[return-value]


def memoize(func: F | None = None, *, capacity: int | None = None) -> Any:
    """Decorator form of :func:`wrap`, usable bare or as ``@memoize(capacity=n)``."""
    if func is None:
        return functools.partial(wrap, capacity=capacity)
    return wrap(func, capacity=capacity)
