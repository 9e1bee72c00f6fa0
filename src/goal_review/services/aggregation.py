"""Collapse food log entries into per-day nutrient totals."""

from datetime import date

from goal_review.domain.logs import DailyTotals, FoodLogEntry
from goal_review.domain.reviews import PeriodWindow
from goal_review.services.periods import as_utc


def aggregate_daily(
    entries: list[FoodLogEntry], window: PeriodWindow
) -> dict[date, DailyTotals]:
    """Return totals keyed by calendar day for entries inside the window.

    Naive timestamps on either side are read as UTC.
    """
    start, end = as_utc(window.start), as_utc(window.end)
    daily: dict[date, DailyTotals] = {}
    for entry in entries:
        logged_at = as_utc(entry.logged_at)
        if not start <= logged_at <= end:
            continue
        day = logged_at.date()
        total = daily.get(day) or DailyTotals(
            day=day, calories=0, protein=0, carbs=0, fat=0
        )
        daily[day] = DailyTotals(
            day=day,
            calories=total.calories + entry.calories * entry.servings,
            protein=total.protein + entry.protein * entry.servings,
            carbs=total.carbs + entry.carbs * entry.servings,
            fat=total.fat + entry.fat * entry.servings,
        )
    return daily


def average_intake(daily: dict[date, DailyTotals], day: date) -> DailyTotals:
    """Return the mean daily intake over logged days, zero when none."""
    days_logged = len(daily)
    if days_logged == 0:
        return DailyTotals(day=day, calories=0, protein=0, carbs=0, fat=0)
    totals = daily.values()
    return DailyTotals(
        day=day,
        calories=sum(total.calories for total in totals) / days_logged,
        protein=sum(total.protein for total in totals) / days_logged,
        carbs=sum(total.carbs for total in totals) / days_logged,
        fat=sum(total.fat for total in totals) / days_logged,
    )
