"""Weight trend classification and logging consistency."""

from goal_review.domain.goals import WeightGoal
from goal_review.domain.logs import WeightEntry
from goal_review.domain.reviews import PeriodWindow, TrendDirection

TREND_THRESHOLD = 0.5


def weights_in_window(
    entries: list[WeightEntry], window: PeriodWindow
) -> list[WeightEntry]:
    """Return entries whose day falls in the window, sorted by day."""
    start, end = window.start.date(), window.end.date()
    return sorted(
        (entry for entry in entries if start <= entry.day <= end),
        key=lambda entry: entry.day,
    )


def weight_progress(entries: list[WeightEntry]) -> float:
    """Return last minus first weight, or 0 with fewer than two entries."""
    if len(entries) < 2:  # noqa: PLR2004
        return 0.0
    return entries[-1].weight - entries[0].weight


def classify_trend(progress: float, goal: WeightGoal) -> TrendDirection:
    """Classify weight progress against the stated goal."""
    if goal == WeightGoal.LOSE:
        if progress < -TREND_THRESHOLD:
            return TrendDirection.IMPROVING
        if progress > TREND_THRESHOLD:
            return TrendDirection.DECLINING
    elif goal == WeightGoal.GAIN:
        if progress > TREND_THRESHOLD:
            return TrendDirection.IMPROVING
        if progress < -TREND_THRESHOLD:
            return TrendDirection.DECLINING
    return TrendDirection.STABLE


def consistency_score(days_logged: int, period_days: int) -> float:
    """Return the share of period days with a log entry, as a percentage."""
    if period_days <= 0:
        return 0.0
    return min(100.0, 100 * days_logged / period_days)
