"""Per-agent planner registry: one planner and scratch store per agent and goal group."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from goap_engine.errors import UnknownGoalGroupError
from goap_engine.planning.scratch import ScratchStore

if TYPE_CHECKING:
    from goap_engine.planning.monitor import PlanMonitor
    from goap_engine.planning.planner import PlanOutcome, Planner
    from goap_engine.planning.scratch import Resources

logger = logging.getLogger(__name__)

PlannerFactory = Callable[[], "Planner"]


@dataclass
class PlannerEntry:
    """A planner owned by one agent, with that agent's scratch store."""

    planner: Planner
    scratch: ScratchStore = field(default_factory=ScratchStore)


class PlannerRegistry:
    """Maps (agent id, goal group id) to an owned planner entry.

    Entries are created lazily the first time an agent is seen and reused on
    every later tick, so state cached inside capabilities or the scratch store
    stays agent-local. ``evict`` drops an agent's entries when it despawns.
    """

    def __init__(self, monitor: PlanMonitor | None = None):
        self._entries: dict[tuple[Hashable, Hashable], PlannerEntry] = {}
        self._factories: dict[Hashable, PlannerFactory] = {}
        self.monitor = monitor

    def register_group(self, goal_group_id: Hashable, factory: PlannerFactory) -> None:
        """Register the factory that assembles planners for a goal group."""
        if goal_group_id in self._factories:
            logger.warning(f"Replacing planner factory for goal group {goal_group_id}")
        self._factories[goal_group_id] = factory

    def get_or_create(
        self,
        agent_id: Hashable,
        goal_group_id: Hashable,
        factory: PlannerFactory | None = None,
    ) -> PlannerEntry:
        """Look up the agent's entry, building it from the group factory on first sight.

        Raises:
            UnknownGoalGroupError: no factory was given or registered for the group.
        """
        key = (agent_id, goal_group_id)
        entry = self._entries.get(key)
        if entry is not None:
            return entry

        factory = factory or self._factories.get(goal_group_id)
        if factory is None:
            raise UnknownGoalGroupError(goal_group_id)

        entry = PlannerEntry(planner=factory())
        self._entries[key] = entry
        logger.debug(f"Created planner for agent {agent_id} (goal group {goal_group_id})")
        return entry

    def run(
        self,
        agent_id: Hashable,
        goal_group_id: Hashable,
        world: Any,
        resources: Resources,
        factory: PlannerFactory | None = None,
    ) -> PlanOutcome:
        """Run one planning pass for the agent."""
        entry = self.get_or_create(agent_id, goal_group_id, factory)
        outcome = entry.planner.plan(agent_id, world, resources, entry.scratch)
        if self.monitor is not None:
            self.monitor.record(outcome)
        return outcome

    def evict(self, agent_id: Hashable) -> int:
        """Drop every entry owned by the agent; returns how many were removed."""
        keys = [key for key in self._entries if key[0] == agent_id]
        for key in keys:
            del self._entries[key]
        if keys:
            logger.debug(f"Evicted {len(keys)} planner(s) for agent {agent_id}")
        return len(keys)

    def clear(self) -> None:
        self._entries.clear()

    def agents(self) -> list[Hashable]:
        """Agent ids with at least one entry, in creation order."""
        return list(dict.fromkeys(agent_id for agent_id, _ in self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
