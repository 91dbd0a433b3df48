"""Typed fact store used as both search key and effect target.

A blackboard maps fact names to tagged values (bool, unsigned number or
string). Two blackboards are equal when they hold exactly the same keys with
the same tagged values, and the hash is independent of insertion order, so a
blackboard can sit in the planner's closed set.
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass


class FactKind(enum.Enum):
    """Tag carried by every fact."""

    BOOL = "bool"
    NUMBER = "number"
    STRING = "string"


@dataclass(frozen=True)
class Fact:
    """A tagged fact value."""

    kind: FactKind
    value: bool | int | str


class Blackboard:
    """Unordered mapping from fact name to tagged fact."""

    __slots__ = ("_facts",)

    def __init__(self, facts: dict[str, Fact] | None = None):
        self._facts: dict[str, Fact] = dict(facts) if facts else {}

    # ------------------------------------------------------------------
    # Writers
    # ------------------------------------------------------------------

    def set_bool(self, key: str, value: bool) -> None:
        self._facts[key] = Fact(FactKind.BOOL, bool(value))

    def set_number(self, key: str, value: int) -> None:
        """Store an unsigned number fact.

        Raises:
            ValueError: if value is negative or not an integer.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Number fact {key!r} must be an int, got {value!r}")
        if value < 0:
            raise ValueError(f"Number fact {key!r} must be unsigned, got {value}")
        self._facts[key] = Fact(FactKind.NUMBER, value)

    def set_string(self, key: str, value: str) -> None:
        self._facts[key] = Fact(FactKind.STRING, str(value))

    def remove(self, key: str) -> bool | int | str | None:
        """Remove a fact, returning its value or None if absent."""
        fact = self._facts.pop(key, None)
        return fact.value if fact is not None else None

    take = remove

    # ------------------------------------------------------------------
    # Readers (absent or mistyped keys read as None)
    # ------------------------------------------------------------------

    def _get(self, key: str, kind: FactKind) -> bool | int | str | None:
        fact = self._facts.get(key)
        if fact is None or fact.kind is not kind:
            return None
        return fact.value

    def get_bool(self, key: str) -> bool | None:
        return self._get(key, FactKind.BOOL)  # type: ignore[return-value]

    def get_number(self, key: str) -> int | None:
        return self._get(key, FactKind.NUMBER)  # type: ignore[return-value]

    def get_string(self, key: str) -> str | None:
        return self._get(key, FactKind.STRING)  # type: ignore[return-value]

    def get_fact(self, key: str) -> Fact | None:
        return self._facts.get(key)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: Blackboard) -> bool:
        """Structural equality checked in both directions."""
        if len(self._facts) != len(other._facts):
            return False
        for key, fact in self._facts.items():
            if other._facts.get(key) != fact:
                return False
        return True

    def hash(self) -> int:
        return hash(frozenset(self._facts.items()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blackboard):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        return self.hash()

    # ------------------------------------------------------------------
    # Container helpers
    # ------------------------------------------------------------------

    def copy(self) -> Blackboard:
        """Return an independent copy (facts are immutable, so shallow is enough)."""
        return Blackboard(self._facts)

    def keys(self) -> list[str]:
        return list(self._facts)

    def items(self) -> Iterator[tuple[str, bool | int | str]]:
        for key, fact in self._facts.items():
            yield key, fact.value

    def __contains__(self, key: object) -> bool:
        return key in self._facts

    def __len__(self) -> int:
        return len(self._facts)

    def __repr__(self) -> str:
        body = ", ".join(f"{key}={self._facts[key].value!r}" for key in sorted(self._facts))
        return f"Blackboard({body})"
