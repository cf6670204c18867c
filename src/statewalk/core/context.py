"""Context for data shared between action callbacks and guard predicates.

The Context is a caller-owned mutable store bound to a StateMachine. Action
callbacks write to it, guard predicates read from it, which makes the data
dependency between an action and another action's guard explicit.

Usage:
    def click_log_in(context):
        context.set("logged_in", True)

    def can_view_content(context):
        return context.get("logged_in", False)

The walk engine never snapshots or isolates the context between steps:
guards always see whatever the most recent action left behind.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TypeVar, overload

T = TypeVar("T")


@dataclass
class Context:
    """Mutable key/value store shared by actions and guards."""

    _data: dict[str, Any] = field(default_factory=dict)

    def set(self, key: str, value: Any) -> None:
        """Set a value in the context."""
        self._data[key] = value

    @overload
    def get(self, key: str) -> Any | None: ...

    @overload
    def get(self, key: str, default: T) -> T: ...

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value from the context."""
        return self._data.get(key, default)

    def has(self, key: str) -> bool:
        return key in self._data

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def keys(self) -> list[str]:
        return list(self._data.keys())

    def to_dict(self) -> dict[str, Any]:
        """Get a copy of all context data."""
        return dict(self._data)

    def update(self, data: dict[str, Any]) -> None:
        self._data.update(data)

    def __contains__(self, key: str) -> bool:
        return key in self._data

    def __repr__(self) -> str:
        return f"Context({self._data})"

