"""Supabase repository for logged food entries."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from goal_review.domain.logs import FoodLogEntry
from goal_review.services.reviews import FoodLogRepository


@dataclass
class SupabaseFoodLogRepository(FoodLogRepository):
    """Supabase implementation for food log queries."""

    client: Client

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodLogEntry]:
        """Return food entries logged in the time range."""
        response = (
            self.client.table("food_entries")
            .select("logged_at, calories, protein, carbs, fat, servings")
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lte("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> FoodLogEntry:
    logged_at_raw = row.get("logged_at")
    if not isinstance(logged_at_raw, str) or not logged_at_raw:
        raise RuntimeError("Food entry is missing logged_at")
    servings = row.get("servings")
    return FoodLogEntry(
        logged_at=datetime.fromisoformat(logged_at_raw),
        calories=float(row.get("calories") or 0.0),
        protein=float(row.get("protein") or 0.0),
        carbs=float(row.get("carbs") or 0.0),
        fat=float(row.get("fat") or 0.0),
        servings=1.0 if servings is None else float(servings),
    )
