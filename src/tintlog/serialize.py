"""Cycle-safe rendering of log arguments."""

from __future__ import annotations

import dataclasses
import json
from typing import Any, Dict, Iterable, List

CIRCULAR_MARKER = "[Circular ~]"
TRUNCATED_MARKER = "[Truncated]"
# Upper bound on values visited per argument; shared references count each time.
MAX_NODES = 5000

_SCALARS = (str, int, float, bool, type(None))


def _fallback(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<{type(value).__name__}>"


def _dict_members(value: Dict[Any, Any]) -> Dict[str, Any]:
    members: Dict[str, Any] = {}
    for key, nested in value.items():
        name = key if isinstance(key, str) else _fallback(key)
        if name in members:
            name = repr(key)
        members[name] = nested
    return members


def _members(value: Any) -> Any:
    """Return the own structure of ``value`` or None when it has none."""
    if isinstance(value, dict):
        return _dict_members(value)
    if isinstance(value, (list, tuple)):
        return list(value)
    if isinstance(value, (set, frozenset)):
        return sorted(value, key=repr)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: getattr(value, field.name) for field in dataclasses.fields(value)}
    attrs = getattr(value, "__dict__", None)
    if isinstance(attrs, dict) and attrs and not isinstance(value, type):
        return _dict_members(attrs)
    return None


class _Walk:
    """Converts one argument into JSON-ready data within a node budget."""

    def __init__(self, budget: int = MAX_NODES) -> None:
        self.remaining = budget
        self.stack: List[int] = []
        self.keys: List[str] = []

    def _circular(self, target: int) -> str:
        depth = self.stack.index(target)
        if depth == 0:
            return CIRCULAR_MARKER
        return f"[Circular ~.{'.'.join(self.keys[:depth])}]"

    def visit(self, value: Any) -> Any:
        if self.remaining <= 0:
            return TRUNCATED_MARKER
        self.remaining -= 1
        if isinstance(value, _SCALARS):
            return value
        if id(value) in self.stack:
            return self._circular(id(value))
        members = _members(value)
        if members is None:
            return _fallback(value)

        self.stack.append(id(value))
        try:
            if isinstance(members, dict):
                plain = {}
                for key, nested in members.items():
                    self.keys.append(key)
                    plain[key] = self.visit(nested)
                    self.keys.pop()
                return plain
            items = []
            for index, nested in enumerate(members):
                self.keys.append(str(index))
                items.append(self.visit(nested))
                self.keys.pop()
            return items
        finally:
            self.stack.pop()


def serialize(value: Any) -> str:
    """Render ``value`` for humans; cyclic references become a marker.

    Values past ``MAX_NODES`` are replaced by ``TRUNCATED_MARKER``.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, _SCALARS):
        return str(value)
    try:
        plain = _Walk().visit(value)
        if isinstance(plain, str):
            return plain
        return json.dumps(plain, indent=2, ensure_ascii=False)
    except Exception:
        return _fallback(value)


def join_message(args: Iterable[Any]) -> str:
    return "".join(serialize(arg) for arg in args)
