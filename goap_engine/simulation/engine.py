"""Simulation engine hosting goal-driven agents.

Manages the tick loop: advance the clock, run one planning pass for every
entity carrying a ``GoalComponent``, then integrate physics.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Hashable
from dataclasses import dataclass, field

import numpy as np

from goap_engine.behaviors import build_default_planner, build_forager_planner
from goap_engine.config import GoapConfig
from goap_engine.errors import EngineStateError, UnknownGoalGroupError
from goap_engine.planning.monitor import PlanMonitor
from goap_engine.planning.planner import PlanOutcome
from goap_engine.planning.registry import PlannerRegistry
from goap_engine.planning.scratch import Resources
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

logger = logging.getLogger(__name__)


@dataclass
class AgentTickRecord:
    """Record of one agent's planning pass in a tick."""

    agent_id: EntityId
    goal_group: Hashable
    outcome: PlanOutcome
    position: tuple[float, float, float]

    @property
    def action(self) -> str | None:
        return self.outcome.executed


@dataclass
class TickRecord:
    """Record of a single simulation tick."""

    tick: int
    agent_records: list[AgentTickRecord] = field(default_factory=list)


@dataclass
class SimulationState:
    """Current state of the simulation."""

    tick: int = 0
    history: list[TickRecord] = field(default_factory=list)
    last_actions: dict[EntityId, str | None] = field(default_factory=dict)


class SimulationEngine:
    """Core simulation engine.

    Agents are planned strictly one after another in spawn order; each owns
    its planner and scratch store through the registry.
    """

    def __init__(self, config: GoapConfig | None = None):
        self.config = config or GoapConfig()
        self.world = World()
        self.resources = Resources(Time(delta=self.config.tick_delta), PhysicsController())
        self.monitor = PlanMonitor()
        self.registry = PlannerRegistry(monitor=self.monitor)
        self.state = SimulationState()
        self._rng = np.random.default_rng(self.config.seed)

        self.default_goal_group = uuid.uuid5(uuid.NAMESPACE_OID, "goap_engine.default")
        self.registry.register_group(
            self.default_goal_group, lambda: build_default_planner(self.config)
        )
        self.forager_goal_group = uuid.uuid5(uuid.NAMESPACE_OID, "goap_engine.forager")
        self.registry.register_group(
            self.forager_goal_group, lambda: build_forager_planner(self.config)
        )
        self.world.on_despawn(self._on_despawn)

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------

    def spawn_agent(
        self,
        position: np.ndarray,
        goal_group: uuid.UUID | None = None,
        run_speed: float | None = None,
    ) -> EntityId:
        """Spawn a planned-for agent at ``position``."""
        return self.world.spawn(
            Transform(translation=np.asarray(position, dtype=float).copy()),
            Physics(),
            Movement(run_speed=self.config.run_speed if run_speed is None else run_speed),
            GoalComponent(id=goal_group or self.default_goal_group),
        )

    def spawn_forager(self, position: np.ndarray) -> EntityId:
        """Spawn an agent in the forager goal group with an empty inventory."""
        agent = self.spawn_agent(position, goal_group=self.forager_goal_group)
        self.world.add_component(agent, Inventory())
        return agent

    def spawn_fire(self, position: np.ndarray) -> EntityId:
        return self.world.spawn(
            Transform(translation=np.asarray(position, dtype=float).copy()),
            FireComponent(),
        )

    def spawn_player(self, position: np.ndarray) -> EntityId:
        return self.world.spawn(
            Transform(translation=np.asarray(position, dtype=float).copy()),
            Physics(),
            PlayerComponent(),
        )

    def spawn_branch(self, position: np.ndarray) -> EntityId:
        return self.world.spawn(
            Transform(translation=np.asarray(position, dtype=float).copy()),
            BranchComponent(),
        )

    def setup(self) -> None:
        """Populate the world with randomly placed entities, counts taken from the config."""
        if len(self.world) > 0:
            raise EngineStateError("World is already populated")
        for _ in range(self.config.num_fires):
            self.spawn_fire(self._random_position())
        for _ in range(self.config.num_branches):
            self.spawn_branch(self._random_position())
        for _ in range(self.config.num_players):
            self.spawn_player(self._random_position())
        for _ in range(self.config.num_agents):
            self.spawn_agent(self._random_position())
        for _ in range(self.config.num_foragers):
            self.spawn_forager(self._random_position())

    def _random_position(self) -> np.ndarray:
        half = self.config.world_size / 2
        x, z = self._rng.uniform(-half, half, size=2)
        return vec3(float(x), 0.0, float(z))

    # ------------------------------------------------------------------
    # Tick loop
    # ------------------------------------------------------------------

    @property
    def time(self) -> Time:
        clock = self.resources.get(Time)
        if clock is None:
            raise EngineStateError("Time resource missing")
        return clock

    def tick(self) -> TickRecord:
        """Advance the simulation by one tick."""
        self.time.advance()
        self.state.tick = self.time.tick
        record = TickRecord(tick=self.state.tick)

        # collect first: executing an action may change the world
        planned = [
            (entity, goal.id) for entity, (goal,) in self.world.query(GoalComponent)
        ]
        for entity, goal_group in planned:
            if not self.world.contains(entity):
                continue
            try:
                outcome = self.registry.run(entity, goal_group, self.world, self.resources)
            except UnknownGoalGroupError:
                logger.warning(f"tick {self.state.tick}: {entity} has unknown goal group {goal_group}, skipped")
                continue
            transform = self.world.get_component(entity, Transform)
            position = tuple(float(v) for v in transform.translation) if transform else (0.0, 0.0, 0.0)
            record.agent_records.append(
                AgentTickRecord(
                    agent_id=entity,
                    goal_group=goal_group,
                    outcome=outcome,
                    position=position,  # type: ignore[arg-type]
                )
            )
            if outcome.executed != self.state.last_actions.get(entity):
                logger.info(f"tick {self.state.tick}: {entity} -> {outcome.executed or 'idle'}")
            self.state.last_actions[entity] = outcome.executed

        controller = self.resources.get_mut(PhysicsController)
        if controller is not None:
            controller.step(self.world, self.time.delta)

        self.state.history.append(record)
        return record

    def run(self, max_ticks: int | None = None) -> list[TickRecord]:
        """Run ``max_ticks`` ticks (config default) and return their records."""
        ticks = self.config.max_ticks if max_ticks is None else max_ticks
        return [self.tick() for _ in range(ticks)]

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    def despawn(self, entity: EntityId) -> None:
        self.world.despawn(entity)

    def _on_despawn(self, entity: EntityId) -> None:
        self.registry.evict(entity)
        self.state.last_actions.pop(entity, None)
