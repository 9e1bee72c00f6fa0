"""Supabase repository for logged weights."""

from dataclasses import dataclass
from datetime import date, datetime
from uuid import UUID

from supabase import Client

from goal_review.domain.logs import WeightEntry
from goal_review.services.reviews import WeightLogRepository


@dataclass
class SupabaseWeightLogRepository(WeightLogRepository):
    """Supabase implementation for weight history queries."""

    client: Client

    def list_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightEntry]:
        """Return weight entries between the two dates, oldest first."""
        response = (
            self.client.table("weight_entries")
            .select("date, weight")
            .eq("user_id", str(user_id))
            .gte("date", start.date().isoformat())
            .lte("date", end.date().isoformat())
            .order("date", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _parse_row(row: dict[str, object]) -> WeightEntry:
    day_raw = row.get("date")
    if not isinstance(day_raw, str) or not day_raw:
        raise RuntimeError("Weight entry is missing date")
    return WeightEntry(
        day=date.fromisoformat(day_raw[:10]),
        weight=float(row.get("weight") or 0.0),
    )
