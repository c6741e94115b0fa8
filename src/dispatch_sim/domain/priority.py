# domain/priority.py
from enum import Enum


class PriorityClass(str, Enum):
    CRITICAL = "critical"
    MODERATE = "moderate"
    MINOR = "minor"

    @property
    def multiplier(self) -> float:
        return PRIORITY_MULTIPLIERS[self]


PRIORITY_MULTIPLIERS: dict[PriorityClass, float] = {
    PriorityClass.CRITICAL: 0.85,
    PriorityClass.MODERATE: 1.0,
    PriorityClass.MINOR: 1.15,
}

DEFAULT_MULTIPLIER = 1.0


def priority_multiplier(priority: PriorityClass | str | None) -> float:
    """Edge-cost multiplier for a dispatch priority; unrecognised tags map to 1.0."""
    try:
        return PriorityClass(priority).multiplier
    except ValueError:
        return DEFAULT_MULTIPLIER
