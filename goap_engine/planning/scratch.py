"""Heterogeneous stores keyed by value type.

``ScratchStore`` is the agent-local cache sensors and actions use to carry
perception results that are too rich for a single fact (a resolved target
location and its distance, for instance). ``Resources`` is the host's global
bag (elapsed time, the physics controller) shared by all agents.
"""

from __future__ import annotations

from typing import Any, TypeVar

T = TypeVar("T")


class TypedBag:
    """Holds at most one value per concrete type."""

    def __init__(self, *values: Any):
        self._values: dict[type, Any] = {}
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Store value, replacing any previous value of the same type."""
        self._values[type(value)] = value

    def get(self, cls: type[T]) -> T | None:
        return self._values.get(cls)

    def get_mut(self, cls: type[T]) -> T | None:
        """Same object as ``get``; named for call sites that mutate in place."""
        return self._values.get(cls)

    def take(self, cls: type[T]) -> T | None:
        """Remove and return the value of the given type, if any."""
        return self._values.pop(cls, None)

    def contains(self, cls: type) -> bool:
        return cls in self._values

    def clear(self) -> None:
        self._values.clear()

    def __contains__(self, cls: object) -> bool:
        return cls in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        names = ", ".join(sorted(cls.__name__ for cls in self._values))
        return f"{type(self).__name__}({names})"


class ScratchStore(TypedBag):
    """Agent-local cache owned by exactly one planner entry."""


class Resources(TypedBag):
    """Global resource bag of the host simulation."""
