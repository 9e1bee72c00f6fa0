"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from goal_review.adapters.supabase_food_log_repository import (
    SupabaseFoodLogRepository,
)
from goal_review.adapters.supabase_profile_repository import SupabaseProfileRepository
from goal_review.adapters.supabase_weight_log_repository import (
    SupabaseWeightLogRepository,
)
from goal_review.config import Settings
from goal_review.services.reviews import GoalReviewService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    review_service: GoalReviewService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    review_service = GoalReviewService(
        profile_repository=SupabaseProfileRepository(supabase_client),
        food_log_repository=SupabaseFoodLogRepository(supabase_client),
        weight_log_repository=SupabaseWeightLogRepository(supabase_client),
    )
    return AppContainer(settings=resolved_settings, review_service=review_service)
