"""Rich terminal renderer for the GOAP simulation."""

from __future__ import annotations

import io
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from goap_engine.planning.planner import SearchStatus

if TYPE_CHECKING:
    from goap_engine.simulation.engine import SimulationEngine, TickRecord


def _make_console() -> Console:
    """Create a Rich Console that works on Windows (force UTF-8)."""
    if sys.platform == "win32" and hasattr(sys.stdout, "buffer"):
        utf8_stdout = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", errors="replace")
        return Console(file=utf8_stdout, force_terminal=True)
    return Console()


STATUS_STYLE = {
    SearchStatus.FOUND: "green",
    SearchStatus.SATISFIED: "cyan",
    SearchStatus.EXHAUSTED: "grey50",
    SearchStatus.CAPPED: "red",
}


class Renderer:
    """Renders per-agent planning decisions as a table."""

    def __init__(self, console: Console | None = None):
        self.console = console or _make_console()

    def build_table(self, record: TickRecord) -> Table:
        table = Table(title=f"Tick {record.tick}")
        table.add_column("Agent")
        table.add_column("Position", justify="right")
        table.add_column("Action")
        table.add_column("Goals")

        for agent in record.agent_records:
            x, y, z = agent.position
            goals = ", ".join(
                f"[{STATUS_STYLE[s.status]}]{s.goal}:{s.status.value}[/]"
                for s in agent.outcome.searches
            )
            table.add_row(
                str(agent.agent_id),
                f"({x:.1f}, {y:.1f}, {z:.1f})",
                agent.action or "[dim]idle[/]",
                goals,
            )
        return table

    def render_tick(self, record: TickRecord) -> None:
        self.console.print(self.build_table(record))

    def render_summary(self, engine: SimulationEngine) -> None:
        stats = engine.monitor.planning_stats
        self.console.print(f"[bold]Ticks:[/] {engine.state.tick}")
        self.console.print(f"[bold]Planning passes:[/] {stats['passes']}")
        self.console.print(f"[bold]Idle rate:[/] {stats['idle_rate']:.0%}")
        self.console.print(f"[bold]Avg expansions/search:[/] {stats['avg_expansions']:.1f}")
        for name, count in sorted(stats["actions_executed"].items()):
            self.console.print(f"  {name}: {count}")
