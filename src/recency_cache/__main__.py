"""Command-line entrypoint for recency_cache."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass

from pydantic import ValidationError

from recency_cache.config import CacheSettings, load_settings
from recency_cache.contracts import NOT_FOUND
from recency_cache.log_setup import configure_logging
from recency_cache.store.lru import LRUStore


@dataclass(frozen=True)
class ReplayOp:
    """One parsed store operation from the command line."""

    action: str
    key: str
    value: str | None = None


def _parse_op(value: str) -> ReplayOp:
    """Parse ``put:KEY=VALUE``, ``get:KEY`` or ``remove:KEY``."""
    action, sep, rest = value.partition(":")
    if not sep or not rest:
        raise argparse.ArgumentTypeError(f"invalid operation: {value}")
    if action == "put":
        key, eq, stored = rest.partition("=")
        if not eq or not key:
            raise argparse.ArgumentTypeError(f"put requires KEY=VALUE: {value}")
        return ReplayOp(action="put", key=key, value=stored)
    if action in {"get", "remove"}:
        return ReplayOp(action=action, key=rest)
    raise argparse.ArgumentTypeError(f"unknown action {action!r} in: {value}")


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid capacity: {value}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"capacity must be positive: {value}")
    return parsed


def _log_level(value: str) -> str:
    try:
        return CacheSettings(log_level=value).log_level
    except ValidationError as exc:
        raise argparse.ArgumentTypeError(f"invalid log level: {value}") from exc


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="recency_cache",
        description="Recency cache command-line interface.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )

    subparsers = parser.add_subparsers(dest="command")
    replay = subparsers.add_parser(
        "replay",
        help="Apply put/get/remove operations to a fresh store and print its final order.",
    )
    replay.add_argument("--capacity", type=_positive_int, default=None)
    replay.add_argument("--log-level", type=_log_level, default=None)
    replay.add_argument("ops", nargs="+", type=_parse_op, metavar="OP")

    return parser


def replay_ops(store: LRUStore, ops: Sequence[ReplayOp]) -> list[str]:
    """Apply ops to store and return the report lines."""
    lines: list[str] = []
    for op in ops:
        if op.action == "put":
            store.put(op.key, op.value)
        elif op.action == "remove":
            store.remove(op.key)
        else:
            found = store.get(op.key)
            shown = "<not found>" if found is NOT_FOUND else found
            lines.append(f"get {op.key} -> {shown}")

    head = store.head.value if store.head is not None else "<empty>"
    tail = store.tail.value if store.tail is not None else "<empty>"
    lines.append("snapshot: " + " ".join(str(value) for value in store.snapshot()))
    lines.append(f"head: {head}")
    lines.append(f"tail: {tail}")
    return lines


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "replay":
        settings = load_settings()
        configure_logging(args.log_level or settings.log_level)
        capacity = args.capacity if args.capacity is not None else settings.default_capacity
        for line in replay_ops(LRUStore(capacity), args.ops):
            print(line)
        return 0

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
