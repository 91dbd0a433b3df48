"""Global resources the host exposes to sensors and actions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from goap_engine.simulation.components import Physics, Transform

if TYPE_CHECKING:
    from goap_engine.simulation.world import World


@dataclass
class Time:
    """Simulation clock, in seconds."""

    elapsed: float = 0.0
    delta: float = 1.0 / 60.0
    tick: int = 0

    def advance(self) -> None:
        self.tick += 1
        self.elapsed += self.delta


class PhysicsController:
    """Command interface for rigid bodies.

    Actions issue velocity commands; ``step`` integrates them once per tick.
    """

    def set_linvel(self, physics: Physics, velocity: np.ndarray) -> None:
        physics.velocity = np.asarray(velocity, dtype=float).copy()

    def move_towards(
        self,
        physics: Physics,
        origin: np.ndarray,
        target: np.ndarray,
        speed: float,
    ) -> None:
        """Head from ``origin`` to ``target`` at ``speed``; stop when already there."""
        offset = np.asarray(target, dtype=float) - np.asarray(origin, dtype=float)
        distance = float(np.linalg.norm(offset))
        if distance == 0.0:
            self.set_linvel(physics, np.zeros(3))
            return
        self.set_linvel(physics, offset / distance * speed)

    def step(self, world: World, dt: float) -> None:
        """Integrate velocities of every body with a transform."""
        for _, (transform, physics) in world.query(Transform, Physics):
            transform.translation = transform.translation + physics.velocity * dt
