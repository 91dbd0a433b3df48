"""Entity store for the host simulation.

Entities are integer ids holding at most one component per type. Queries
yield entities in spawn order, which keeps planning passes deterministic.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterator
from typing import Any

from goap_engine.errors import EntityNotFoundError

logger = logging.getLogger(__name__)


class EntityId(int):
    """Opaque entity identifier, stable for the entity's lifetime."""

    def __repr__(self) -> str:
        return f"EntityId({int(self)})"

    def __str__(self) -> str:
        return f"entity-{int(self)}"


class World:
    """In-memory entity/component store."""

    def __init__(self):
        self._entities: dict[EntityId, dict[type, Any]] = {}
        self._ids = itertools.count(1)
        self._despawn_listeners: list[Callable[[EntityId], None]] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def spawn(self, *components: Any) -> EntityId:
        """Create an entity carrying the given components."""
        entity = EntityId(next(self._ids))
        self._entities[entity] = {type(component): component for component in components}
        return entity

    def despawn(self, entity: EntityId) -> None:
        """Remove an entity and notify despawn listeners.

        Raises:
            EntityNotFoundError: if the entity is not alive.
        """
        if entity not in self._entities:
            raise EntityNotFoundError(entity)
        del self._entities[entity]
        for listener in self._despawn_listeners:
            listener(entity)

    def on_despawn(self, callback: Callable[[EntityId], None]) -> None:
        self._despawn_listeners.append(callback)

    def contains(self, entity: EntityId) -> bool:
        return entity in self._entities

    def entities(self) -> list[EntityId]:
        return list(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    def add_component(self, entity: EntityId, component: Any) -> None:
        if entity not in self._entities:
            raise EntityNotFoundError(entity)
        self._entities[entity][type(component)] = component

    def remove_component(self, entity: EntityId, cls: type) -> Any | None:
        components = self._entities.get(entity)
        if components is None:
            return None
        return components.pop(cls, None)

    def get_component(self, entity: Any, cls: type) -> Any | None:
        """Component of type ``cls`` on the entity, or None."""
        components = self._entities.get(entity)
        if components is None:
            return None
        return components.get(cls)

    def get_components(self, entity: Any, *classes: type) -> tuple[Any, ...] | None:
        """All requested components, or None unless the entity has every one."""
        components = self._entities.get(entity)
        if components is None:
            return None
        found = tuple(components.get(cls) for cls in classes)
        if any(component is None for component in found):
            return None
        return found

    def query(self, *classes: type) -> Iterator[tuple[EntityId, tuple[Any, ...]]]:
        """Yield ``(entity, components)`` for entities carrying every class."""
        for entity, components in list(self._entities.items()):
            if all(cls in components for cls in classes):
                yield entity, tuple(components[cls] for cls in classes)
