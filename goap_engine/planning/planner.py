"""GOAP planner: senses, searches every goal, executes one action per pass."""

from __future__ import annotations

import enum
import heapq
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from goap_engine.errors import RegistrationError
from goap_engine.planning.arena import NodeArena
from goap_engine.planning.blackboard import Blackboard

if TYPE_CHECKING:
    from goap_engine.planning.capabilities import Action, Goal, Sensor
    from goap_engine.planning.scratch import Resources, ScratchStore

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITERATIONS = 50


class SearchStatus(enum.Enum):
    """How a single goal search ended."""

    FOUND = "found"  # non-empty path reaches the target
    SATISFIED = "satisfied"  # root already equals the target
    EXHAUSTED = "exhausted"  # open set ran dry
    CAPPED = "capped"  # expansion budget spent


@dataclass
class GoalSearch:
    """Result of searching for one goal."""

    goal: str
    status: SearchStatus
    actions: list[str] = field(default_factory=list)
    action_indices: list[int] = field(default_factory=list)
    cost: int = 0
    expansions: int = 0
    nodes: int = 0

    @property
    def first_action(self) -> int | None:
        """Index of the action leaving the root, or None for an empty path."""
        return self.action_indices[0] if self.action_indices else None


@dataclass
class PlanOutcome:
    """Everything one planning pass decided."""

    facts: Blackboard
    searches: list[GoalSearch] = field(default_factory=list)
    chosen: GoalSearch | None = None
    executed: str | None = None

    @property
    def idle(self) -> bool:
        return self.executed is None


class Planner:
    """Plans for a single agent.

    Each pass:
    1. Runs every sensor once to build the initial blackboard
    2. Runs a bounded uniform-cost search per goal from that same snapshot
    3. Keeps the cheapest path any goal produced
    4. Executes only the first action of that path

    Nothing from the search survives the pass; the next call senses and
    searches again from scratch.
    """

    def __init__(self, max_iterations: int = DEFAULT_MAX_ITERATIONS):
        if max_iterations < 0:
            raise ValueError(f"max_iterations must be >= 0, got {max_iterations}")
        self.max_iterations = max_iterations
        self._sensors: list[Sensor] = []
        self._actions: list[Action] = []
        self._goals: list[Goal] = []

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def insert_sensor(self, sensor: Sensor) -> None:
        self._sensors.append(sensor)

    def insert_action(self, action: Action) -> None:
        """Register an action; names identify actions so they must be unique."""
        if any(existing.name == action.name for existing in self._actions):
            raise RegistrationError(f"Action {action.name!r} is already registered")
        self._actions.append(action)

    def insert_goal(self, goal: Goal) -> None:
        self._goals.append(goal)

    @property
    def sensors(self) -> tuple[Sensor, ...]:
        return tuple(self._sensors)

    @property
    def actions(self) -> tuple[Action, ...]:
        return tuple(self._actions)

    @property
    def goals(self) -> tuple[Goal, ...]:
        return tuple(self._goals)

    # ------------------------------------------------------------------
    # Planning pass
    # ------------------------------------------------------------------

    def sense(
        self,
        agent: Any,
        world: Any,
        resources: Resources,
        scratch: ScratchStore,
    ) -> Blackboard:
        """Run every sensor in registration order into a fresh blackboard."""
        facts = Blackboard()
        for sensor in self._sensors:
            sensor.sense(agent, world, resources, scratch, facts)
        return facts

    def plan(
        self,
        agent: Any,
        world: Any,
        resources: Resources,
        scratch: ScratchStore,
    ) -> PlanOutcome:
        """Sense, search each goal, execute the first step of the best path."""
        facts = self.sense(agent, world, resources, scratch)
        outcome = PlanOutcome(facts=facts)

        for goal in self._goals:
            search = self.search(goal, agent, world, scratch, facts)
            outcome.searches.append(search)
            logger.debug(
                f"{agent}: goal {search.goal} {search.status.value} "
                f"path={search.actions} cost={search.cost} expansions={search.expansions}"
            )

        candidates = [s for s in outcome.searches if s.status is SearchStatus.FOUND]
        if not candidates:
            logger.debug(f"{agent}: no goal produced a plan, idling")
            return outcome

        # min() keeps the first of equal costs, i.e. goal registration order
        best = min(candidates, key=lambda s: s.cost)
        outcome.chosen = best
        first = best.first_action
        if first is not None:
            action = self._actions[first]
            action.execute(agent, world, resources, scratch)
            outcome.executed = action.name
        return outcome

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(
        self,
        goal: Goal,
        agent: Any,
        world: Any,
        scratch: ScratchStore,
        facts: Blackboard,
    ) -> GoalSearch:
        """Bounded uniform-cost search from ``facts`` to the goal's target state.

        The open set is ordered by accumulated cost, then by push order so
        that equal costs resolve in action registration order. The closed
        set holds already-expanded blackboards.
        """
        target = goal.target_state(agent, world, scratch)
        arena = NodeArena()
        sequence = 0
        open_set: list[tuple[int, int, int]] = [(0, sequence, arena.root(facts))]
        closed: set[Blackboard] = set()
        expansions = 0

        while open_set:
            cost, _, index = heapq.heappop(open_set)
            node = arena[index]

            if node.facts == target:
                indices = arena.path(index)
                return GoalSearch(
                    goal=goal.name,
                    status=SearchStatus.FOUND if indices else SearchStatus.SATISFIED,
                    actions=[self._actions[i].name for i in indices],
                    action_indices=indices,
                    cost=cost,
                    expansions=expansions,
                    nodes=len(arena),
                )

            if node.facts in closed:
                continue

            if expansions >= self.max_iterations:
                return GoalSearch(
                    goal=goal.name,
                    status=SearchStatus.CAPPED,
                    expansions=expansions,
                    nodes=len(arena),
                )

            closed.add(node.facts)
            expansions += 1

            for action_index, action in enumerate(self._actions):
                if not action.readiness(agent, world, scratch, node.facts):
                    continue
                successor = node.facts.copy()
                next_cost = cost + action.cost(successor)
                action.apply_effect(scratch, successor)
                if successor in closed:
                    continue
                child = arena.child(index, action_index, action.name, successor, next_cost)
                sequence += 1
                heapq.heappush(open_set, (next_cost, sequence, child))

        return GoalSearch(
            goal=goal.name,
            status=SearchStatus.EXHAUSTED,
            expansions=expansions,
            nodes=len(arena),
        )
