"""Configuration settings for the GOAP engine and its demo simulation.

Uses Pydantic Settings for validation and environment variable support.
All settings can be overridden via GOAP_* environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class GoapConfig(BaseSettings):
    """Global configuration for planning and the host simulation."""

    # Planner
    max_iterations: int = Field(default=50, ge=0)  # expansions per goal before giving up

    # Fire behaviour
    fire_sense_distance: float = 100.0
    chill_distance: float = 2.0

    # Player behaviour
    player_sense_distance: float = 10.0
    attack_distance: float = 5.0

    # Firewood behaviour
    firewood_quota: int = Field(default=3, ge=0)
    branch_sense_distance: float = 20.0
    pickup_distance: float = 1.0

    # Movement
    run_speed: float = 3.0

    # Tick
    tick_delta: float = 1.0 / 60.0
    max_ticks: int = 600

    # World
    seed: int = 42
    world_size: float = 50.0
    num_agents: int = 3
    num_fires: int = 2
    num_players: int = 1
    num_foragers: int = 1
    num_branches: int = 6

    model_config = {"env_prefix": "GOAP_"}
