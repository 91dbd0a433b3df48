"""Planning pass monitoring and metrics tracking."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from goap_engine.planning.planner import SearchStatus

if TYPE_CHECKING:
    from goap_engine.planning.planner import PlanOutcome


class PlanMonitor:
    """Tracks planning outcomes across agents and ticks."""

    def __init__(self):
        self._passes: int = 0
        self._idle_passes: int = 0
        self._executed: Counter[str] = Counter()
        self._search_status: Counter[SearchStatus] = Counter()
        self._expansions: int = 0

    def record(self, outcome: PlanOutcome) -> None:
        """Record one planning pass."""
        self._passes += 1
        if outcome.idle:
            self._idle_passes += 1
        else:
            self._executed[outcome.executed] += 1  # type: ignore[index]

        for search in outcome.searches:
            self._search_status[search.status] += 1
            self._expansions += search.expansions

    def executed_count(self, action_name: str) -> int:
        return self._executed[action_name]

    @property
    def planning_stats(self) -> dict:
        """Summary stats for reporting."""
        searches = sum(self._search_status.values())
        return {
            "passes": self._passes,
            "idle_passes": self._idle_passes,
            "idle_rate": self._idle_passes / self._passes if self._passes > 0 else 0.0,
            "actions_executed": dict(self._executed),
            "searches": searches,
            "search_status": {status.value: self._search_status[status] for status in SearchStatus},
            "avg_expansions": self._expansions / searches if searches > 0 else 0.0,
        }
