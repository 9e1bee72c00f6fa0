"""Domain models for goal reviews and recommendations."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from types import MappingProxyType
from uuid import UUID

from goal_review.domain.goals import GOAL_FIELDS, NutritionGoals
from goal_review.domain.logs import DailyTotals

ADHERENCE_CAP = 150.0


class Period(StrEnum):
    """Symbolic review period."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"

    @property
    def days(self) -> int:
        """Return the number of days the period spans."""
        return _PERIOD_DAYS[self]


_PERIOD_DAYS = {Period.WEEKLY: 7, Period.MONTHLY: 30, Period.QUARTERLY: 90}


@dataclass(frozen=True)
class PeriodWindow:
    """Concrete inclusive time range for a review."""

    period: Period
    start: datetime
    end: datetime


@dataclass(frozen=True)
class AdherenceMetrics:
    """Average intake as a capped percentage of each goal."""

    calories: float
    protein: float
    carbs: float
    fat: float


class TrendDirection(StrEnum):
    """Weight trend relative to the stated goal."""

    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


@dataclass(frozen=True)
class ProgressAnalysis:
    """Adherence, weight and logging signals for a review period."""

    calorie_adherence: float
    protein_adherence: float
    carbs_adherence: float
    fat_adherence: float
    weight_progress: float
    consistency_score: float
    trend_direction: TrendDirection
    days_logged: int
    period_days: int
    weight_entries: int
    average_intake: DailyTotals


class Priority(StrEnum):
    """Recommendation priority."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class RecommendationType(StrEnum):
    """Kind of goal change a recommendation proposes."""

    CALORIE_ADJUSTMENT = "calorie_adjustment"
    MACRO_REBALANCE = "macro_rebalance"
    PLATEAU_ADJUSTMENT = "plateau_adjustment"
    PORTION_CONTROL = "portion_control"
    TRACKING_CONSISTENCY = "tracking_consistency"


@dataclass(frozen=True)
class Implementation:
    """How to put a recommendation into practice."""

    timeframe: str
    steps: tuple[str, ...]
    metrics: tuple[str, ...]


@dataclass(frozen=True)
class RecommendationImpact:
    """Goal deltas proposed by a recommendation. The deltas are read-only."""

    deltas: Mapping[str, float] = field(default_factory=dict)
    expected_weight_change: float | None = None

    def __post_init__(self) -> None:
        unknown = set(self.deltas) - set(GOAL_FIELDS)
        if unknown:
            msg = f"Impact references unknown goal fields: {sorted(unknown)}"
            raise ValueError(msg)
        deltas = {name: float(delta) for name, delta in self.deltas.items()}
        object.__setattr__(self, "deltas", MappingProxyType(deltas))


@dataclass(frozen=True)
class Recommendation:
    """An explainable suggestion to change one or more goals."""

    id: str
    type: RecommendationType
    priority: Priority
    title: str
    description: str
    rationale: str
    expected_outcome: str
    implementation: Implementation
    impact: RecommendationImpact


class ReviewStatus(StrEnum):
    """Lifecycle state of a review. Only PENDING is produced here."""

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


@dataclass(frozen=True)
class GoalReview:
    """Terminal review artifact handed to the host application."""

    id: str
    user_id: UUID
    review_date: datetime
    period: Period
    current_goals: NutritionGoals
    suggested_goals: NutritionGoals
    progress_analysis: ProgressAnalysis
    recommendations: tuple[Recommendation, ...]
    adjustment_reason: str
    status: ReviewStatus = ReviewStatus.PENDING
