"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta
from uuid import UUID

import pytest

from goal_review.config import Settings
from goal_review.containers import AppContainer
from goal_review.domain.goals import NutritionGoals, UserProfile, WeightGoal
from goal_review.domain.logs import FoodLogEntry, WeightEntry
from goal_review.services.reviews import (
    FoodLogRepository,
    GoalReviewService,
    ProfileRepository,
    WeightLogRepository,
)

REFERENCE_NOW = datetime(2024, 3, 15, 20, 0, tzinfo=UTC)
DEFAULT_GOALS = NutritionGoals(calories=2000, protein=150, carbs=250, fat=70)


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)


@dataclass
class InMemoryFoodLogRepository(FoodLogRepository):
    """In-memory food log repository for tests."""

    entries: list[FoodLogEntry] = field(default_factory=list)

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        return [entry for entry in self.entries if start <= entry.logged_at <= end]


@dataclass
class InMemoryWeightLogRepository(WeightLogRepository):
    """In-memory weight log repository for tests."""

    entries: list[WeightEntry] = field(default_factory=list)

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightEntry]:
        return [
            entry
            for entry in self.entries
            if start.date() <= entry.day <= end.date()
        ]


def profile(
    stated_goal: WeightGoal = WeightGoal.MAINTAIN,
    goals: NutritionGoals = DEFAULT_GOALS,
) -> UserProfile:
    return UserProfile(goals=goals, stated_goal=stated_goal)


def daily_entries(  # noqa: PLR0913
    days: int,
    calories: float = 2000,
    protein: float = 150,
    carbs: float = 250,
    fat: float = 70,
    now: datetime = REFERENCE_NOW,
) -> list[FoodLogEntry]:
    """Return one entry per day for the last ``days`` days, ending today."""
    return [
        FoodLogEntry(
            logged_at=now - timedelta(days=offset, hours=2),
            calories=calories,
            protein=protein,
            carbs=carbs,
            fat=fat,
        )
        for offset in range(days)
    ]


def weights(*values: tuple[date, float]) -> list[WeightEntry]:
    return [WeightEntry(day=day, weight=weight) for day, weight in values]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
        api_token="api-token",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def food_log_repository() -> InMemoryFoodLogRepository:
    return InMemoryFoodLogRepository()


@pytest.fixture
def weight_log_repository() -> InMemoryWeightLogRepository:
    return InMemoryWeightLogRepository()


@pytest.fixture
def review_service(
    profile_repository: InMemoryProfileRepository,
    food_log_repository: InMemoryFoodLogRepository,
    weight_log_repository: InMemoryWeightLogRepository,
) -> GoalReviewService:
    return GoalReviewService(
        profile_repository=profile_repository,
        food_log_repository=food_log_repository,
        weight_log_repository=weight_log_repository,
        clock=lambda: REFERENCE_NOW,
    )


@pytest.fixture
def container(settings: Settings, review_service: GoalReviewService) -> AppContainer:
    return AppContainer(settings=settings, review_service=review_service)
