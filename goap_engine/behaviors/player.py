"""Aggressive behaviour: track the player and close in on them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

from goap_engine.planning.blackboard import Blackboard
from goap_engine.planning.capabilities import Action, Goal, Sensor
from goap_engine.simulation.components import Movement, Physics, PlayerComponent, Transform
from goap_engine.simulation.resources import PhysicsController

if TYPE_CHECKING:
    from goap_engine.planning.scratch import Resources, ScratchStore
    from goap_engine.simulation.world import World

NEARBY_PLAYER = "NearbyPlayer"
KNOW_PLAYER_LOCATION = "KnowPlayerLocation"


@dataclass
class PlayerLocation:
    """Nearest sensed player and the agent's distance to them."""

    location: np.ndarray
    distance: float


class SensePlayer(Sensor):
    name = "SensePlayer"

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
            scratch.take(PlayerLocation)
            return

        nearest: PlayerLocation | None = None
        for entity, (transform, _player) in world.query(Transform, PlayerComponent):
            if entity == agent:
                continue
            distance = own.distance_to(transform)
            if nearest is None or distance < nearest.distance:
                nearest = PlayerLocation(transform.translation.copy(), distance)

        if nearest is not None and nearest.distance < self.max_distance:
            scratch.insert(nearest)
        else:
            scratch.take(PlayerLocation)


class AggroCharacter(Goal):
    name = "AggroCharacter"

    def target_state(self, agent: Any, world: Any, scratch: ScratchStore) -> Blackboard:
        target = Blackboard()
        target.set_bool(NEARBY_PLAYER, True)
        return target


class Patrol(Action):
    """Chase the cached player location."""

    name = "Patrol"

    def cost(self, facts: Blackboard) -> int:
        return 1

    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        return scratch.contains(PlayerLocation)

    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        facts.set_bool(KNOW_PLAYER_LOCATION, True)

    def execute(self, agent: Any, world: World, resources: Resources, scratch: ScratchStore) -> None:
        player = scratch.get(PlayerLocation)
        controller = resources.get_mut(PhysicsController)
        components = world.get_components(agent, Transform, Physics, Movement)
        if player is None or controller is None or components is None:
            return
        transform, physics, movement = components
        controller.move_towards(physics, transform.translation, player.location, movement.run_speed)


class Attack(Action):
    """Hold position next to the player."""

    name = "Attack"

    def __init__(self, max_distance: float):
        self.max_distance = max_distance

    def cost(self, facts: Blackboard) -> int:
        return 1

    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        player = scratch.get(PlayerLocation)
        if player is not None and player.distance < self.max_distance:
            return True
        return facts.get_bool(KNOW_PLAYER_LOCATION) is True

    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        facts.remove(KNOW_PLAYER_LOCATION)
        facts.set_bool(NEARBY_PLAYER, True)

    def execute(self, agent: Any, world: World, resources: Resources, scratch: ScratchStore) -> None:
        controller = resources.get_mut(PhysicsController)
        physics = world.get_component(agent, Physics)
        if controller is None or physics is None:
            return
        controller.set_linvel(physics, np.zeros(3))
