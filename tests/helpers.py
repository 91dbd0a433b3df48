"""Shared test doubles for the GOAP engine test suites.

Provides capability doubles driven by plain fact dictionaries so planner
tests can describe small state graphs declaratively. These are
dataclass-based test doubles, not unittest.mock.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from goap_engine.planning.blackboard import Blackboard
from goap_engine.planning.capabilities import Action, Goal, Sensor

ABSENT = object()


def write_facts(board: Blackboard, facts: dict) -> None:
    """Set each value, picking the fact type from the Python type."""
    for key, value in facts.items():
        if isinstance(value, bool):
            board.set_bool(key, value)
        elif isinstance(value, int):
            board.set_number(key, value)
        else:
            board.set_string(key, value)


def make_blackboard(facts: dict | None = None) -> Blackboard:
    board = Blackboard()
    write_facts(board, facts or {})
    return board


def _matches(facts: Blackboard, key: str, expected: object) -> bool:
    if expected is ABSENT:
        return key not in facts
    if isinstance(expected, bool):
        return facts.get_bool(key) is expected
    if isinstance(expected, int):
        return facts.get_number(key) == expected
    return facts.get_string(key) == expected


# ============================================================================
# Capability doubles
# ============================================================================


@dataclass(eq=False)
class StubSensor(Sensor):
    """Writes fixed facts and records each call."""

    name: str = "StubSensor"
    facts: dict = field(default_factory=dict)
    calls: int = 0
    log: list | None = None

    def sense(self, agent, world, resources, scratch, facts):
        self.calls += 1
        if self.log is not None:
            self.log.append(self.name)
        write_facts(facts, self.facts)


@dataclass(eq=False)
class StubGoal(Goal):
    """Targets a fixed fact state."""

    name: str = "StubGoal"
    target: dict = field(default_factory=dict)

    def target_state(self, agent, world, scratch):
        return make_blackboard(self.target)


@dataclass(eq=False)
class StubAction(Action):
    """Ready when ``requires`` matches; effect sets ``sets`` and drops ``removes``."""

    name: str = "StubAction"
    step_cost: int = 1
    requires: dict = field(default_factory=dict)
    sets: dict = field(default_factory=dict)
    removes: list = field(default_factory=list)
    executed: int = 0
    readiness_calls: int = 0
    effect_calls: int = 0

    def cost(self, facts):
        return self.step_cost

    def readiness(self, agent, world, scratch, facts):
        self.readiness_calls += 1
        return all(_matches(facts, key, value) for key, value in self.requires.items())

    def apply_effect(self, scratch, facts):
        self.effect_calls += 1
        for key in self.removes:
            facts.remove(key)
        write_facts(facts, self.sets)

    def execute(self, agent, world, resources, scratch):
        self.executed += 1


@dataclass(eq=False)
class CounterAction(Action):
    """Increments a number fact forever, producing an unbounded state space."""

    name: str = "Count"
    key: str = "Count"
    executed: int = 0

    def cost(self, facts):
        return 1

    def readiness(self, agent, world, scratch, facts):
        return True

    def apply_effect(self, scratch, facts):
        facts.set_number(self.key, (facts.get_number(self.key) or 0) + 1)

    def execute(self, agent, world, resources, scratch):
        self.executed += 1
