"""
Generic registry for named components (algorithms, benchmark functions).
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any, Callable, Generic, TypeVar

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Name -> item mapping with decorator-style registration.

    Keys are case-insensitive; they are stored lower-cased.
    """

    def __init__(self, name: str = "Registry") -> None:
        self._name = name
        self._items: dict[str, T] = {}

    def register(self, key: str, item: T | None = None, *, override: bool = False) -> Callable[[T], T] | T:
        """
        Register an item under ``key``.

        Works as a plain call or, when ``item`` is omitted, as a decorator.
        Raises ValueError on duplicate keys unless ``override`` is set.
        """
        normalized = key.lower()

        def _do_register(obj: T) -> T:
            if normalized in self._items and not override:
                raise ValueError(f"Key '{normalized}' already exists in registry '{self._name}'")
            self._items[normalized] = obj
            return obj

        if item is None:
            return _do_register
        return _do_register(item)

    def get(self, key: str, default: Any = ...) -> T:
        normalized = key.lower()
        if normalized not in self._items:
            if default is not ...:
                return default
            raise KeyError(f"Key '{key}' not found in registry '{self._name}'")
        return self._items[normalized]

    def suggest(self, key: str, n: int = 3) -> list[str]:
        """Closest registered keys to ``key`` (for error messages)."""
        return get_close_matches(key.lower(), list(self._items), n=n, cutoff=0.6)

    def list(self) -> list[str]:
        """Return a sorted list of registered keys."""
        return sorted(self._items.keys())

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.lower() in self._items

    def __getitem__(self, key: str) -> T:
        return self.get(key)

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["Registry"]
