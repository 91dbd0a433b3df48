"""Shared test fixtures for the goap_engine test suite."""

from __future__ import annotations

import pytest

from goap_engine.config import GoapConfig
from goap_engine.planning.monitor import PlanMonitor
from goap_engine.planning.planner import Planner
from goap_engine.planning.registry import PlannerRegistry
from goap_engine.planning.scratch import Resources, ScratchStore
from goap_engine.simulation.components import Movement, Physics, Transform, vec3
from goap_engine.simulation.engine import SimulationEngine
from goap_engine.simulation.resources import PhysicsController, Time
from goap_engine.simulation.world import EntityId, World


@pytest.fixture
def config() -> GoapConfig:
    """Small deterministic config for fast tests."""
    return GoapConfig(
        seed=42,
        max_ticks=20,
        num_agents=3,
        num_fires=2,
        num_players=1,
        num_foragers=1,
        num_branches=3,
        world_size=30.0,
    )


@pytest.fixture
def world() -> World:
    """An empty entity store."""
    return World()


@pytest.fixture
def resources() -> Resources:
    """Global resources with a clock and physics controller."""
    return Resources(Time(), PhysicsController())


@pytest.fixture
def scratch() -> ScratchStore:
    """A fresh agent-local scratch store."""
    return ScratchStore()


@pytest.fixture
def agent(world: World) -> EntityId:
    """An agent at the origin, already moving along +x."""
    return world.spawn(
        Transform(translation=vec3()),
        Physics(velocity=vec3(1.0, 0.0, 0.0)),
        Movement(run_speed=3.0),
    )


@pytest.fixture
def planner() -> Planner:
    """An empty planner with the default expansion budget."""
    return Planner()


@pytest.fixture
def monitor() -> PlanMonitor:
    return PlanMonitor()


@pytest.fixture
def registry(monitor: PlanMonitor) -> PlannerRegistry:
    """A registry reporting to the monitor fixture."""
    return PlannerRegistry(monitor=monitor)


@pytest.fixture
def engine(config: GoapConfig) -> SimulationEngine:
    """A fresh, unpopulated simulation engine."""
    return SimulationEngine(config)
