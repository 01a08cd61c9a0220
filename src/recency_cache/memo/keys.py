"""Canonical cache keys for memoized call arguments."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from typing import Any

_SCALARS = (str, int, float, type(None))


def _tagged(value: Any) -> Any:
    """Rewrite a value into JSON-safe form that keeps container and key types."""
    if isinstance(value, _SCALARS):
        return value
    if isinstance(value, tuple):
        return {"tuple": [_tagged(item) for item in value]}
    if isinstance(value, list):
        return {"list": [_tagged(item) for item in value]}
    if isinstance(value, dict):
        pairs = [[_tagged(key), _tagged(item)] for key, item in value.items()]
        pairs.sort(key=lambda pair: json.dumps(pair[0], sort_keys=True))
        return {"dict": pairs}
    raise TypeError(f"unsupported argument type {type(value).__name__}")


def argument_key(args: Sequence[Any], kwargs: Mapping[str, Any] | None = None) -> str:
    """Serialize call arguments into a deterministic, order-sensitive key.

    Positional order and value type are preserved, so ``(1, 2)``, ``(2, 1)`` and
    ``(1, "2")`` map to different keys, as do a tuple and a list with the same
    items, or dicts keyed by ``1`` and ``"1"``. Keyword arguments are sorted by
    name. Arguments that JSON cannot encode are rejected with ``TypeError``.
    """
    try:
        payload = {
            "args": [_tagged(arg) for arg in args],
            "kwargs": {name: _tagged(value) for name, value in (kwargs or {}).items()},
        }
        return json.dumps(payload, sort_keys=True, separators=(",", ":"))
    except (TypeError, ValueError) as exc:
        raise TypeError(f"memoized arguments must be JSON-serializable: {exc}") from exc
