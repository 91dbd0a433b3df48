"""Built-in capability sets and the goal groups the engine registers."""

from __future__ import annotations

from goap_engine.behaviors.fire import (
    Chill,
    FireLocation,
    SearchForFire,
    SenseFire,
    StayWarm,
)
from goap_engine.behaviors.firewood import (
    BranchesNearby,
    CollectBranches,
    CollectFirewood,
    SenseBranches,
)
from goap_engine.behaviors.player import (
    AggroCharacter,
    Attack,
    Patrol,
    PlayerLocation,
    SensePlayer,
)
from goap_engine.config import GoapConfig
from goap_engine.planning.planner import Planner


def build_default_planner(config: GoapConfig | None = None) -> Planner:
    """Planner with the keep-warm and aggro goal sets and their sensors."""
    config = config or GoapConfig()
    planner = Planner(max_iterations=config.max_iterations)

    planner.insert_goal(StayWarm())
    planner.insert_action(SearchForFire())
    planner.insert_action(Chill(config.chill_distance))

    planner.insert_goal(AggroCharacter())
    planner.insert_action(Patrol())
    planner.insert_action(Attack(config.attack_distance))

    planner.insert_sensor(SenseFire(config.fire_sense_distance))
    planner.insert_sensor(SensePlayer(config.player_sense_distance))
    return planner


def build_forager_planner(config: GoapConfig | None = None) -> Planner:
    """Planner that gathers branches until the firewood quota is carried."""
    config = config or GoapConfig()
    planner = Planner(max_iterations=config.max_iterations)
    planner.insert_goal(CollectFirewood(config.firewood_quota))
    planner.insert_action(CollectBranches(config.pickup_distance))
    planner.insert_sensor(SenseBranches(config.branch_sense_distance))
    return planner


__all__ = [
    "AggroCharacter",
    "Attack",
    "BranchesNearby",
    "Chill",
    "CollectBranches",
    "CollectFirewood",
    "FireLocation",
    "Patrol",
    "PlayerLocation",
    "SearchForFire",
    "SenseBranches",
    "SenseFire",
    "SensePlayer",
    "StayWarm",
    "build_default_planner",
    "build_forager_planner",
]
