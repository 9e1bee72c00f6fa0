"""Domain models for logged food and weight."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class FoodLogEntry:
    """A single logged consumption event with per-serving nutrients."""

    logged_at: datetime
    calories: float
    protein: float
    carbs: float
    fat: float
    servings: float = 1.0


@dataclass(frozen=True)
class WeightEntry:
    """Body weight recorded for a calendar day."""

    day: date
    weight: float


@dataclass(frozen=True)
class DailyTotals:
    """Nutrient totals for one calendar day."""

    day: date
    calories: float
    protein: float
    carbs: float
    fat: float
