"""Supabase repository for user profiles and goals."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from goal_review.domain.goals import NutritionGoals, UserProfile, WeightGoal
from goal_review.services.reviews import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for profile lookups."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored goals for a user."""
        response = (
            self.client.table("profiles")
            .select("calories_goal, protein_goal, carbs_goal, fat_goal, goal")
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])


def _parse_row(row: dict[str, object]) -> UserProfile:
    goals = NutritionGoals(
        calories=float(row.get("calories_goal") or 0.0),
        protein=float(row.get("protein_goal") or 0.0),
        carbs=float(row.get("carbs_goal") or 0.0),
        fat=float(row.get("fat_goal") or 0.0),
    )
    try:
        stated_goal = WeightGoal(str(row.get("goal") or "").lower())
    except ValueError:
        stated_goal = WeightGoal.MAINTAIN
    return UserProfile(goals=goals, stated_goal=stated_goal)
