"""Host simulation: entity store, global resources and the tick loop."""

from __future__ import annotations

from goap_engine.simulation.components import (
    BranchComponent,
    FireComponent,
    GoalComponent,
    Inventory,
    Movement,
    Physics,
    PlayerComponent,
    Transform,
    vec3,
)
from goap_engine.simulation.resources import PhysicsController, Time
from goap_engine.simulation.world import EntityId, World

__all__ = [
    "BranchComponent",
    "EntityId",
    "FireComponent",
    "GoalComponent",
    "Inventory",
    "Movement",
    "Physics",
    "PhysicsController",
    "PlayerComponent",
    "Time",
    "Transform",
    "World",
    "vec3",
]
