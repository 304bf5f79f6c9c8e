"""Type-keyed global storage for shared game data."""

from __future__ import annotations

from typing import Any, TypeVar

__all__ = ["Storage", "store", "get", "try_get"]

T = TypeVar("T")


class Storage:
    """Holds at most one value per type; values are looked up by their type."""

    def __init__(self) -> None:
        self._items: dict[type, Any] = {}

    def store(self, data: Any) -> None:
        """Store ``data`` under its type, replacing any earlier value."""
        self._items[type(data)] = data

    def get(self, kind: type[T]) -> T:
        """Return the value stored for ``kind``; raise KeyError if there is none."""
        try:
            return self._items[kind]
        except KeyError:
            raise KeyError(f"no value of type {kind.__name__} in storage") from None

    def try_get(self, kind: type[T]) -> T | None:
        """Return the value stored for ``kind``, or None."""
        return self._items.get(kind)


_default = Storage()


def store(data: Any) -> None:
    """Store ``data`` in the shared storage."""
    _default.store(data)


def get(kind: type[T]) -> T:
    """Fetch a value from the shared storage; raise KeyError if absent."""
    return _default.get(kind)


def try_get(kind: type[T]) -> T | None:
    """Fetch a value from the shared storage, or None if absent."""
    return _default.try_get(kind)