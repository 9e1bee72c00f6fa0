"""Score average intake against nutrition goals."""

from goal_review.domain.goals import NutritionGoals
from goal_review.domain.logs import DailyTotals
from goal_review.domain.reviews import ADHERENCE_CAP, AdherenceMetrics


def adherence_percent(actual: float, goal: float) -> float:
    """Return actual as a percentage of goal, capped; 0 for a zero goal."""
    if goal <= 0:
        return 0.0
    return max(0.0, min(ADHERENCE_CAP, 100 * actual / goal))


def score_adherence(average: DailyTotals, goals: NutritionGoals) -> AdherenceMetrics:
    """Return adherence percentages for every goal axis."""
    return AdherenceMetrics(
        calories=adherence_percent(average.calories, goals.calories),
        protein=adherence_percent(average.protein, goals.protein),
        carbs=adherence_percent(average.carbs, goals.carbs),
        fat=adherence_percent(average.fat, goals.fat),
    )
