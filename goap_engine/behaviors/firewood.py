"""Foraging behaviour: gather branches until the firewood quota is carried.

The goal's target is computed from the agent's live inventory, so the same
planner asks for fewer branches as the agent fills up and is satisfied once
the quota is reached.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from goap_engine.planning.blackboard import Blackboard
from goap_engine.planning.capabilities import Action, Goal, Sensor
from goap_engine.simulation.components import (
    BranchComponent,
    Inventory,
    Movement,
    Physics,
    Transform,
)
from goap_engine.simulation.resources import PhysicsController

if TYPE_CHECKING:
    from goap_engine.planning.scratch import Resources, ScratchStore
    from goap_engine.simulation.world import EntityId, World

FIREWOOD_COLLECTED = "FirewoodCollected"


@dataclass
class BranchesNearby:
    """Branches within sensing range and the closest of them."""

    count: int
    nearest: EntityId
    location: np.ndarray
    distance: float


class SenseBranches(Sensor):
    """Counts branches within ``max_distance`` and caches the nearest."""

    name = "SenseBranches"

    def __init__(self, max_distance: float):
        self.max_distance = max_distance

    def sense(
        self,
        agent: Any,
        world: World,
        resources: Resources,
        scratch: ScratchStore,
        facts: Blackboard,
    ) -> None:
        own = world.get_component(agent, Transform)
        if own is None:
            scratch.take(BranchesNearby)
            return

        count = 0
        nearest: BranchesNearby | None = None
        for entity, (transform, _branch) in world.query(Transform, BranchComponent):
            distance = own.distance_to(transform)
            if distance >= self.max_distance:
                continue
            count += 1
            if nearest is None or distance < nearest.distance:
                nearest = BranchesNearby(0, entity, transform.translation.copy(), distance)

        if nearest is None:
            scratch.take(BranchesNearby)
            return
        nearest.count = count
        scratch.insert(nearest)


class CollectFirewood(Goal):
    """Carry ``quota`` pieces of firewood.

    The target counts the pieces still missing. A full inventory yields an
    empty target, which the empty initial blackboard already satisfies.
    """

    name = "CollectFirewood"

    def __init__(self, quota: int):
        self.quota = quota

    def target_state(self, agent: Any, world: World, scratch: ScratchStore) -> Blackboard:
        inventory = world.get_component(agent, Inventory)
        held = inventory.firewood if inventory is not None else 0
        target = Blackboard()
        missing = self.quota - held
        if missing > 0:
            target.set_number(FIREWOOD_COLLECTED, missing)
        return target


class CollectBranches(Action):
    """Walk to the nearest branch and pick it up.

    Planned once per branch; the search never collects more branches than
    were sensed.
    """

    name = "CollectBranches"

    def __init__(self, pickup_distance: float):
        self.pickup_distance = pickup_distance

    def cost(self, facts: Blackboard) -> int:
        return 8

    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        branches = scratch.get(BranchesNearby)
        if branches is None:
            return False
        return (facts.get_number(FIREWOOD_COLLECTED) or 0) < branches.count

    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        facts.set_number(FIREWOOD_COLLECTED, (facts.get_number(FIREWOOD_COLLECTED) or 0) + 1)

    def execute(self, agent: Any, world: World, resources: Resources, scratch: ScratchStore) -> None:
        branches = scratch.get(BranchesNearby)
        controller = resources.get_mut(PhysicsController)
        components = world.get_components(agent, Transform, Physics, Movement)
        if branches is None or controller is None or components is None:
            return
        transform, physics, movement = components

        if branches.distance > self.pickup_distance:
            controller.move_towards(physics, transform.translation, branches.location, movement.run_speed)
            return

        controller.set_linvel(physics, np.zeros(3))
        if not world.contains(branches.nearest):
            return
        inventory = world.get_component(agent, Inventory)
        if inventory is None:
            inventory = Inventory()
            world.add_component(agent, inventory)
        world.despawn(branches.nearest)
        inventory.firewood += 1
        scratch.take(BranchesNearby)
