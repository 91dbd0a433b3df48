"""Capability roles a planner is assembled from: sensors, goals and actions.

Each role is an abstract base class so new capabilities can be registered
without touching the planner. Identity (equality and hashing) is the declared
name, never the object.

Capability objects may keep mutable per-agent state, which is why every agent
owns its own planner instance (see ``PlannerRegistry``).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from goap_engine.planning.blackboard import Blackboard
    from goap_engine.planning.scratch import Resources, ScratchStore


class _Named(ABC):
    """Shared name-based identity."""

    name: str = ""
    _role: str = ""

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Named):
            return NotImplemented
        return self._role == other._role and self.name == other.name

    def __hash__(self) -> int:
        return hash((self._role, self.name))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Sensor(_Named):
    """Perceives the live world before planning.

    A sensor must not mutate ``world`` or ``resources``. It writes derived
    facts into ``facts`` and richer values into ``scratch``, and must clear
    any scratch entry it previously wrote when nothing qualifies this tick.
    """

    _role = "sensor"

    @abstractmethod
    def sense(
        self,
        agent: Any,
        world: Any,
        resources: Resources,
        scratch: ScratchStore,
        facts: Blackboard,
    ) -> None: ...


class Goal(_Named):
    """Produces the target fact state a plan must reach."""

    _role = "goal"

    @abstractmethod
    def target_state(self, agent: Any, world: Any, scratch: ScratchStore) -> Blackboard:
        """Build the target blackboard; re-derived on every planning pass."""
        ...


class Action(_Named):
    """A candidate capability the planner can chain and execute."""

    _role = "action"

    @abstractmethod
    def cost(self, facts: Blackboard) -> int:
        """Edge weight from the given hypothetical state; must be pure."""
        ...

    @abstractmethod
    def readiness(self, agent: Any, world: Any, scratch: ScratchStore, facts: Blackboard) -> bool:
        """Whether the action may be taken from ``facts``.

        Consulted speculatively during search, so it may read ``world`` and
        ``scratch`` but must mutate neither.
        """
        ...

    @abstractmethod
    def apply_effect(self, scratch: ScratchStore, facts: Blackboard) -> None:
        """Predict the post-condition by mutating a copy of the state."""
        ...

    @abstractmethod
    def execute(self, agent: Any, world: Any, resources: Resources, scratch: ScratchStore) -> None:
        """Perform the real-world side effect. Called at most once per pass."""
        ...
