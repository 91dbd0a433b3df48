"""Components attached to simulation entities.

Vectors are float numpy arrays of shape (3,).
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field

import numpy as np


def _zeros() -> np.ndarray:
    return np.zeros(3, dtype=float)


def vec3(x: float = 0.0, y: float = 0.0, z: float = 0.0) -> np.ndarray:
    return np.array([x, y, z], dtype=float)


@dataclass
class Transform:
    """Spatial placement of an entity."""

    translation: np.ndarray = field(default_factory=_zeros)
    rotation: np.ndarray = field(default_factory=_zeros)  # euler angles, radians

    def distance_to(self, other: Transform) -> float:
        return float(np.linalg.norm(self.translation - other.translation))


@dataclass
class Physics:
    """Rigid body state driven by the physics controller."""

    velocity: np.ndarray = field(default_factory=_zeros)


@dataclass
class Movement:
    """Locomotion limits."""

    run_speed: float = 3.0


@dataclass
class GoalComponent:
    """Marks an entity as planned for; ``id`` selects the goal group."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class FireComponent:
    """A fire agents can warm themselves at."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class PlayerComponent:
    """The player character, target of aggressive agents."""

    name: str = "player"


@dataclass
class BranchComponent:
    """A fallen branch that can be picked up as firewood."""

    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class Inventory:
    """What an agent carries."""

    firewood: int = 0
