"""Structured error hierarchy for the GOAP engine.

Planning outcomes (no plan found, no winning goal) are not errors and never
raise; these exceptions cover programming mistakes at the boundaries.
"""


class GoapError(Exception):
    """Base for all GOAP engine errors."""

    pass


class RegistrationError(GoapError):
    """A capability could not be registered with a planner."""

    pass


class UnknownGoalGroupError(GoapError):
    """No planner factory is known for the requested goal group."""

    def __init__(self, goal_group_id: object):
        self.goal_group_id = goal_group_id
        super().__init__(f"No planner factory registered for goal group {goal_group_id}")


class EntityNotFoundError(GoapError):
    """Entity id is not alive in the world."""

    def __init__(self, entity: object):
        self.entity = entity
        super().__init__(f"Entity {entity} does not exist")


class EngineStateError(GoapError):
    """Engine in invalid state for requested operation."""

    pass
