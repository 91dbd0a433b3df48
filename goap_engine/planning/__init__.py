"""Goal-oriented action planning for simulated agents.

This package implements:
- A typed fact store (blackboard) used as search key and effect target
- Sensor, goal and action capability roles
- A bounded uniform-cost search over hypothetical blackboards
- A per-agent planner registry that re-plans every tick
"""

from __future__ import annotations

from goap_engine.planning.arena import NodeArena, SearchNode
from goap_engine.planning.blackboard import Blackboard, Fact, FactKind
from goap_engine.planning.capabilities import Action, Goal, Sensor
from goap_engine.planning.monitor import PlanMonitor
from goap_engine.planning.planner import GoalSearch, PlanOutcome, Planner, SearchStatus
from goap_engine.planning.registry import PlannerEntry, PlannerRegistry
from goap_engine.planning.scratch import Resources, ScratchStore, TypedBag

__all__ = [
    "Action",
    "Blackboard",
    "Fact",
    "FactKind",
    "Goal",
    "GoalSearch",
    "NodeArena",
    "PlanMonitor",
    "PlanOutcome",
    "Planner",
    "PlannerEntry",
    "PlannerRegistry",
    "Resources",
    "ScratchStore",
    "SearchNode",
    "SearchStatus",
    "Sensor",
    "TypedBag",
]
