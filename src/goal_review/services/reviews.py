"""Goal review composition and orchestration."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from goal_review.domain.errors import ProfileNotFoundError
from goal_review.domain.goals import UserProfile
from goal_review.domain.logs import FoodLogEntry, WeightEntry
from goal_review.domain.reviews import (
    GoalReview,
    Period,
    PeriodWindow,
    ProgressAnalysis,
    Recommendation,
    ReviewStatus,
)
from goal_review.services.adherence import score_adherence
from goal_review.services.aggregation import aggregate_daily, average_intake
from goal_review.services.periods import resolve_period
from goal_review.services.recommendations import (
    RuleContext,
    apply_impacts,
    generate_recommendations,
    round_half_up,
)
from goal_review.services.trends import (
    classify_trend,
    consistency_score,
    weight_progress,
    weights_in_window,
)

NEUTRAL_REASON = (
    "Your current goals look well-suited to your progress. "
    "Keep up the consistent work!"
)

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Read access to user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's goals and stated objective, if present."""


class FoodLogRepository(Protocol):
    """Read access to logged food entries."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food entries logged within a time range."""


class WeightLogRepository(Protocol):
    """Read access to logged weights."""

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightEntry]:
        """Return weight entries within a date range, ordered by date."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class GoalReviewService:
    """Fetches a user's history and produces a goal review."""

    profile_repository: ProfileRepository
    food_log_repository: FoodLogRepository
    weight_log_repository: WeightLogRepository
    clock: Callable[[], datetime] = field(default=_utc_now)

    def generate_review(
        self,
        user_id: UUID,
        period: Period | str,
        reference_now: datetime | None = None,
    ) -> GoalReview:
        """Return a pending review of the user's goals for the period."""
        window = resolve_period(period, reference_now or self.clock())
        profile = self.profile_repository.get_profile(user_id)
        if profile is None:
            _logger.warning(
                "Goal review requested without profile: user_id=%s", user_id
            )
            raise ProfileNotFoundError(user_id)

        food_entries = self.food_log_repository.list_entries(
            user_id, window.start, window.end
        )
        weight_entries = self.weight_log_repository.list_entries(
            user_id, window.start, window.end
        )
        review = build_review(
            user_id=user_id,
            profile=profile,
            food_entries=food_entries,
            weight_entries=weight_entries,
            window=window,
        )
        _logger.info(
            "Goal review generated: user_id=%s period=%s days_logged=%s "
            "recommendations=%s",
            user_id,
            window.period,
            review.progress_analysis.days_logged,
            len(review.recommendations),
        )
        return review


def analyze_progress(
    profile: UserProfile,
    food_entries: list[FoodLogEntry],
    weight_entries: list[WeightEntry],
    window: PeriodWindow,
) -> ProgressAnalysis:
    """Aggregate the logs and compute adherence, trend and consistency."""
    daily = aggregate_daily(food_entries, window)
    average = average_intake(daily, window.start.date())
    adherence = score_adherence(average, profile.goals)

    weights = weights_in_window(weight_entries, window)
    progress = weight_progress(weights)
    return ProgressAnalysis(
        calorie_adherence=adherence.calories,
        protein_adherence=adherence.protein,
        carbs_adherence=adherence.carbs,
        fat_adherence=adherence.fat,
        weight_progress=progress,
        consistency_score=consistency_score(len(daily), window.period.days),
        trend_direction=classify_trend(progress, profile.stated_goal),
        days_logged=len(daily),
        period_days=window.period.days,
        weight_entries=len(weights),
        average_intake=average,
    )


def adjustment_reason(
    analysis: ProgressAnalysis, recommendations: list[Recommendation]
) -> str:
    """Summarize why goals should or should not change."""
    if not recommendations:
        return NEUTRAL_REASON
    return (
        f"Based on {round_half_up(analysis.calorie_adherence)}% calorie adherence "
        f"and {round_half_up(analysis.consistency_score)}% logging consistency, "
        f"with a weight change of {analysis.weight_progress:+.1f}, "
        f"we suggest {len(recommendations)} adjustment(s) to your goals."
    )


def build_review(
    user_id: UUID,
    profile: UserProfile,
    food_entries: list[FoodLogEntry],
    weight_entries: list[WeightEntry],
    window: PeriodWindow,
) -> GoalReview:
    """Return a review computed purely from the supplied data."""
    analysis = analyze_progress(profile, food_entries, weight_entries, window)
    context = RuleContext(
        goals=profile.goals, stated_goal=profile.stated_goal, analysis=analysis
    )
    recommendations = generate_recommendations(context, window.end)
    return GoalReview(
        id=f"review-{user_id}-{int(window.end.timestamp() * 1000)}",
        user_id=user_id,
        review_date=window.end,
        period=window.period,
        current_goals=profile.goals,
        suggested_goals=apply_impacts(profile.goals, recommendations),
        progress_analysis=analysis,
        recommendations=tuple(recommendations),
        adjustment_reason=adjustment_reason(analysis, recommendations),
        status=ReviewStatus.PENDING,
    )
