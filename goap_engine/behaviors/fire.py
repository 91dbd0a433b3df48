"""Keep-warm behaviour: find the nearest fire and settle beside it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from goap_engine.planning.blackboard import Blackboard
from goap_engine.planning.capabilities import Action, Goal, Sensor
from goap_engine.simulation.components import FireComponent, Movement, Physics, Transform
from goap_engine.simulation.resources import PhysicsController

if TYPE_CHECKING:
    from goap_engine.planning.scratch import Resources, ScratchStore
    from goap_engine.simulation.world import World

NEARBY_FIRE = "NearbyFire"
LOCATED_FIRE = "LocatedFire"


@dataclass
class FireLocation:
    """Nearest sensed fire and the agent's distance to it."""

    location: np.ndarray
    distance: float


class SenseFire(Sensor):
    """Caches the nearest fire within ``max_distance``."""

    name = "SenseFire"

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
            scratch.take(FireLocation)
            return

        nearest: FireLocation | None = None
        for _, (transform, _fire) in world.query(Transform, FireComponent):
            distance = own.distance_to(transform)
            if nearest is None or distance < nearest.distance:
                nearest = FireLocation(transform.translation.copy(), distance)

        if nearest is not None and nearest.distance < self.max_distance:
            scratch.insert(nearest)
        else:
            scratch.take(FireLocation)


class StayWarm(Goal):
    """Be next to a fire."""

    name = "StayWarm"

    def target_state(self, agent: Any, world: Any, scratch: ScratchStore) -> Blackboard:
        target = Blackboard()
        target.set_bool(NEARBY_FIRE, True)
        return target


class SearchForFire(Action):
    """Head for the cached fire."""

    name = "SearchForFire"

    def cost(self, facts: Blackboard) -> int:
        return 3

    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        return scratch.contains(FireLocation)

    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        facts.set_bool(LOCATED_FIRE, True)

    def execute(self, agent: Any, world: World, resources: Resources, scratch: ScratchStore) -> None:
        fire = scratch.get(FireLocation)
        controller = resources.get_mut(PhysicsController)
        components = world.get_components(agent, Transform, Physics, Movement)
        if fire is None or controller is None or components is None:
            return
        transform, physics, movement = components
        controller.move_towards(physics, transform.translation, fire.location, movement.run_speed)


class Chill(Action):
    """Stop and warm up once close enough to a fire.

    Arriving consumes the located-fire fact, so a search that first locates
    the fire ends in exactly the ``StayWarm`` target state.
    """

    name = "Chill"

    def __init__(self, max_distance: float):
        self.max_distance = max_distance

    def cost(self, facts: Blackboard) -> int:
        return 3

    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        fire = scratch.get(FireLocation)
        if fire is not None and fire.distance < self.max_distance:
            return True
        return facts.get_bool(LOCATED_FIRE) is True

    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        facts.remove(LOCATED_FIRE)
        facts.set_bool(NEARBY_FIRE, True)

    def execute(self, agent: Any, world: World, resources: Resources, scratch: ScratchStore) -> None:
        controller = resources.get_mut(PhysicsController)
        physics = world.get_component(agent, Physics)
        if controller is None or physics is None:
            return
        controller.set_linvel(physics, np.zeros(3))
