"""Tests for the built-in fire and player behaviours."""

from __future__ import annotations

import numpy as np
import pytest

from goap_engine.behaviors import build_default_planner
from goap_engine.behaviors.fire import (
    LOCATED_FIRE,
    NEARBY_FIRE,
    Chill,
    FireLocation,
    SearchForFire,
    SenseFire,
    StayWarm,
)
from goap_engine.behaviors.player import (
    KNOW_PLAYER_LOCATION,
    AggroCharacter,
    Attack,
    Patrol,
    PlayerLocation,
    SensePlayer,
)
from goap_engine.config import GoapConfig
from goap_engine.planning.blackboard import Blackboard
from goap_engine.planning.planner import Planner, SearchStatus
from goap_engine.simulation.components import FireComponent, Physics, PlayerComponent, Transform, vec3


def fire_planner(chill_distance: float = 2.0, sense_distance: float = 100.0) -> Planner:
    planner = Planner()
    planner.insert_goal(StayWarm())
    planner.insert_action(SearchForFire())
    planner.insert_action(Chill(chill_distance))
    planner.insert_sensor(SenseFire(sense_distance))
    return planner


def spawn_fire(world, x: float, z: float = 0.0):
    return world.spawn(Transform(translation=vec3(x, 0.0, z)), FireComponent())


class TestSenseFire:
    """Test fire perception and cache refresh."""

    def test_caches_nearest_fire(self, world, agent, resources, scratch):
        spawn_fire(world, 8.0)
        spawn_fire(world, 3.0)

        SenseFire(100.0).sense(agent, world, resources, scratch, Blackboard())

        fire = scratch.get(FireLocation)
        assert fire is not None
        assert fire.distance == pytest.approx(3.0)
        np.testing.assert_allclose(fire.location, vec3(3.0))

    def test_fire_out_of_range_clears_stale_cache(self, world, agent, resources, scratch):
        scratch.insert(FireLocation(vec3(1.0), 1.0))
        spawn_fire(world, 50.0)

        SenseFire(10.0).sense(agent, world, resources, scratch, Blackboard())

        assert scratch.get(FireLocation) is None

    def test_no_fire_clears_stale_cache(self, world, agent, resources, scratch):
        scratch.insert(FireLocation(vec3(1.0), 1.0))

        SenseFire(10.0).sense(agent, world, resources, scratch, Blackboard())

        assert FireLocation not in scratch

    def test_writes_no_facts(self, world, agent, resources, scratch):
        spawn_fire(world, 1.0)
        facts = Blackboard()
        SenseFire(10.0).sense(agent, world, resources, scratch, facts)
        assert len(facts) == 0

    def test_agent_without_transform_is_ignored(self, world, resources, scratch):
        spawn_fire(world, 1.0)
        faceless = world.spawn(Physics())
        SenseFire(10.0).sense(faceless, world, resources, scratch, Blackboard())
        assert len(scratch) == 0

    def test_losing_transform_clears_cached_fire(self, world, agent, resources, scratch):
        spawn_fire(world, 1.0)
        planner = fire_planner()
        planner.sense(agent, world, resources, scratch)
        assert FireLocation in scratch

        world.remove_component(agent, Transform)
        outcome = planner.plan(agent, world, resources, scratch)

        assert FireLocation not in scratch
        assert outcome.idle


class TestFireActions:
    """Test action contracts in isolation."""

    def test_stay_warm_target(self, world, agent, scratch):
        target = StayWarm().target_state(agent, world, scratch)
        assert target.get_bool(NEARBY_FIRE) is True
        assert len(target) == 1

    def test_search_ready_only_with_cached_fire(self, world, agent, scratch):
        action = SearchForFire()
        assert not action.readiness(agent, world, scratch, Blackboard())
        scratch.insert(FireLocation(vec3(5.0), 5.0))
        assert action.readiness(agent, world, scratch, Blackboard())

    def test_chill_ready_when_close_or_located(self, world, agent, scratch):
        action = Chill(2.0)
        located = Blackboard()
        located.set_bool(LOCATED_FIRE, True)

        assert not action.readiness(agent, world, scratch, Blackboard())
        assert action.readiness(agent, world, scratch, located)
        scratch.insert(FireLocation(vec3(1.0), 1.0))
        assert action.readiness(agent, world, scratch, Blackboard())

    def test_chill_effect_consumes_located_fire(self, scratch):
        facts = Blackboard()
        facts.set_bool(LOCATED_FIRE, True)
        Chill(2.0).apply_effect(scratch, facts)
        assert facts.get_bool(NEARBY_FIRE) is True
        assert LOCATED_FIRE not in facts

    def test_search_executes_move_towards_fire(self, world, agent, resources, scratch):
        scratch.insert(FireLocation(vec3(0.0, 0.0, 10.0), 10.0))

        SearchForFire().execute(agent, world, resources, scratch)

        velocity = world.get_component(agent, Physics).velocity
        np.testing.assert_allclose(velocity, vec3(0.0, 0.0, 3.0))

    def test_search_without_cache_does_nothing(self, world, agent, resources, scratch):
        SearchForFire().execute(agent, world, resources, scratch)
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, vec3(1.0))


class TestFireScenario:
    """End-to-end keep-warm planning."""

    def test_no_fire_no_plan(self, world, agent, resources, scratch):
        outcome = fire_planner().plan(agent, world, resources, scratch)

        assert outcome.searches[0].status is SearchStatus.EXHAUSTED
        assert outcome.idle
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, vec3(1.0))

    def test_fire_within_threshold_chills(self, world, agent, resources, scratch):
        spawn_fire(world, 1.5)

        outcome = fire_planner().plan(agent, world, resources, scratch)

        assert outcome.chosen.actions == ["Chill"]
        assert outcome.chosen.cost == 3
        assert outcome.executed == "Chill"
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, np.zeros(3))

    def test_distant_fire_searches_first(self, world, agent, resources, scratch):
        spawn_fire(world, 10.0)

        outcome = fire_planner().plan(agent, world, resources, scratch)

        assert outcome.chosen.actions == ["SearchForFire", "Chill"]
        assert outcome.chosen.cost == 6
        assert outcome.executed == "SearchForFire"
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, vec3(3.0))

    def test_replanning_twice_is_stable(self, world, agent, resources, scratch):
        spawn_fire(world, 1.0)
        planner = fire_planner()

        first = planner.plan(agent, world, resources, scratch)
        second = planner.plan(agent, world, resources, scratch)

        assert first.executed == second.executed == "Chill"


class TestPlayerBehaviour:
    """Test the aggro goal set."""

    def aggro_planner(self) -> Planner:
        planner = Planner()
        planner.insert_goal(AggroCharacter())
        planner.insert_action(Patrol())
        planner.insert_action(Attack(5.0))
        planner.insert_sensor(SensePlayer(10.0))
        return planner

    def spawn_player(self, world, x: float):
        return world.spawn(Transform(translation=vec3(x)), Physics(), PlayerComponent())

    def test_sense_player_caches_and_clears(self, world, agent, resources, scratch):
        player = self.spawn_player(world, 4.0)
        SensePlayer(10.0).sense(agent, world, resources, scratch, Blackboard())
        assert scratch.get(PlayerLocation).distance == pytest.approx(4.0)

        world.despawn(player)
        SensePlayer(10.0).sense(agent, world, resources, scratch, Blackboard())
        assert scratch.get(PlayerLocation) is None

    def test_sense_player_without_transform_clears_cache(self, world, agent, resources, scratch):
        scratch.insert(PlayerLocation(vec3(2.0), 2.0))
        world.remove_component(agent, Transform)

        SensePlayer(10.0).sense(agent, world, resources, scratch, Blackboard())

        assert PlayerLocation not in scratch

    def test_player_does_not_sense_itself(self, world, resources, scratch):
        player = self.spawn_player(world, 0.0)
        SensePlayer(10.0).sense(player, world, resources, scratch, Blackboard())
        assert PlayerLocation not in scratch

    def test_close_player_attacked(self, world, agent, resources, scratch):
        self.spawn_player(world, 3.0)
        outcome = self.aggro_planner().plan(agent, world, resources, scratch)

        assert outcome.chosen.actions == ["Attack"]
        assert outcome.chosen.cost == 1
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, np.zeros(3))

    def test_far_player_patrolled_towards(self, world, agent, resources, scratch):
        self.spawn_player(world, 8.0)
        outcome = self.aggro_planner().plan(agent, world, resources, scratch)

        assert outcome.chosen.actions == ["Patrol", "Attack"]
        assert outcome.executed == "Patrol"
        np.testing.assert_allclose(world.get_component(agent, Physics).velocity, vec3(3.0))

    def test_attack_effect_consumes_known_location(self, scratch):
        facts = Blackboard()
        facts.set_bool(KNOW_PLAYER_LOCATION, True)
        Attack(5.0).apply_effect(scratch, facts)
        assert KNOW_PLAYER_LOCATION not in facts


class TestDefaultPlanner:
    """Test the default goal group assembly."""

    def test_registers_both_goal_sets(self):
        planner = build_default_planner(GoapConfig(max_iterations=7))

        assert [g.name for g in planner.goals] == ["StayWarm", "AggroCharacter"]
        assert [a.name for a in planner.actions] == ["SearchForFire", "Chill", "Patrol", "Attack"]
        assert [s.name for s in planner.sensors] == ["SenseFire", "SensePlayer"]
        assert planner.max_iterations == 7

    def test_aggro_preferred_when_cheaper(self, world, agent, resources, scratch):
        spawn_fire(world, 1.0)
        world.spawn(Transform(translation=vec3(3.0)), PlayerComponent())

        outcome = build_default_planner().plan(agent, world, resources, scratch)

        assert outcome.chosen.goal == "AggroCharacter"
        assert outcome.executed == "Attack"
