"""Domain models for nutrition goals and user profiles."""

from dataclasses import dataclass
from enum import StrEnum

GOAL_FIELDS = ("calories", "protein", "carbs", "fat")


class WeightGoal(StrEnum):
    """Stated body-weight objective."""

    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


@dataclass(frozen=True)
class NutritionGoals:
    """Daily nutrition targets. Macros are in grams."""

    calories: float
    protein: float
    carbs: float
    fat: float

    def as_dict(self) -> dict[str, float]:
        """Return goal values keyed by field name."""
        return {name: getattr(self, name) for name in GOAL_FIELDS}


@dataclass(frozen=True)
class UserProfile:
    """Profile data needed to review goals."""

    goals: NutritionGoals
    stated_goal: WeightGoal
