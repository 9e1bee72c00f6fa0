"""Tests for container wiring."""

from goal_review.adapters.supabase_profile_repository import SupabaseProfileRepository
from goal_review.containers import build_container


def test_build_container_creates_review_service(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert isinstance(
        container.review_service.profile_repository, SupabaseProfileRepository
    )
