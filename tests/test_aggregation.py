"""Tests for daily aggregation."""

from datetime import date, timedelta

from goal_review.domain.logs import DailyTotals, FoodLogEntry
from goal_review.services.aggregation import aggregate_daily, average_intake
from goal_review.services.periods import resolve_period
from tests.conftest import REFERENCE_NOW


def test_entries_on_the_same_day_merge_and_scale_by_servings() -> None:
    window = resolve_period("weekly", REFERENCE_NOW)
    entries = [
        FoodLogEntry(
            logged_at=REFERENCE_NOW - timedelta(hours=10),
            calories=300,
            protein=20,
            carbs=30,
            fat=10,
            servings=2,
        ),
        FoodLogEntry(
            logged_at=REFERENCE_NOW - timedelta(hours=1),
            calories=500,
            protein=40,
            carbs=50,
            fat=15,
        ),
    ]

    daily = aggregate_daily(entries, window)

    assert list(daily) == [REFERENCE_NOW.date()]
    totals = daily[REFERENCE_NOW.date()]
    assert totals.calories == 1100
    assert totals.protein == 80
    assert totals.carbs == 110
    assert totals.fat == 35


def test_entries_outside_window_are_ignored() -> None:
    window = resolve_period("weekly", REFERENCE_NOW)
    entries = [
        FoodLogEntry(
            logged_at=REFERENCE_NOW - timedelta(days=8),
            calories=900,
            protein=0,
            carbs=0,
            fat=0,
        ),
        FoodLogEntry(
            logged_at=REFERENCE_NOW + timedelta(minutes=1),
            calories=900,
            protein=0,
            carbs=0,
            fat=0,
        ),
        FoodLogEntry(
            logged_at=window.start, calories=400, protein=0, carbs=0, fat=0
        ),
    ]

    daily = aggregate_daily(entries, window)

    assert len(daily) == 1
    assert daily[window.start.date()].calories == 400


def test_zero_servings_contribute_nothing() -> None:
    window = resolve_period("weekly", REFERENCE_NOW)
    entry = FoodLogEntry(
        logged_at=REFERENCE_NOW, calories=500, protein=1, carbs=1, fat=1, servings=0
    )

    daily = aggregate_daily([entry], window)

    assert daily[REFERENCE_NOW.date()].calories == 0


def test_average_intake_without_days_is_zero() -> None:
    average = average_intake({}, date(2024, 3, 8))

    assert average.calories == 0
    assert average.protein == 0
    assert average.carbs == 0
    assert average.fat == 0


def test_average_intake_divides_by_logged_days() -> None:
    window = resolve_period("weekly", REFERENCE_NOW)
    entries = [
        FoodLogEntry(
            logged_at=REFERENCE_NOW - timedelta(days=1),
            calories=1000,
            protein=50,
            carbs=100,
            fat=20,
        ),
        FoodLogEntry(
            logged_at=REFERENCE_NOW - timedelta(days=3),
            calories=2000,
            protein=150,
            carbs=200,
            fat=60,
        ),
    ]

    average = average_intake(aggregate_daily(entries, window), window.start.date())

    assert average.calories == 1500
    assert average.protein == 100
    assert average.carbs == 150
    assert average.fat == 40


def test_naive_entries_are_read_as_utc() -> None:
    window = resolve_period("weekly", REFERENCE_NOW)
    naive = REFERENCE_NOW.replace(tzinfo=None)
    entries = [
        FoodLogEntry(
            logged_at=naive - timedelta(hours=1),
            calories=500,
            protein=0,
            carbs=0,
            fat=0,
        ),
        FoodLogEntry(
            logged_at=naive + timedelta(hours=1),
            calories=900,
            protein=0,
            carbs=0,
            fat=0,
        ),
    ]

    daily = aggregate_daily(entries, window)

    assert daily == {
        REFERENCE_NOW.date(): DailyTotals(
            day=REFERENCE_NOW.date(), calories=500, protein=0, carbs=0, fat=0
        )
    }
