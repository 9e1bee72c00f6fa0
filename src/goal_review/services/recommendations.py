"""Rule-based goal adjustment recommendations.

Each rule is a pure function of a ``RuleContext`` that returns at most one
``Recommendation``. Rules never see each other's output: the suggested goals
are derived afterwards by folding every recommendation's impact over the
current goals in rule order.
"""

import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from goal_review.domain.goals import NutritionGoals, WeightGoal
from goal_review.domain.reviews import (
    Implementation,
    Priority,
    ProgressAnalysis,
    Recommendation,
    RecommendationImpact,
    RecommendationType,
    TrendDirection,
)

CALORIE_REDUCTION_THRESHOLD = 80
CALORIE_REDUCTION_FACTOR = 0.95
PROTEIN_INCREASE_THRESHOLD = 70
PROTEIN_INCREASE_FACTOR = 0.10
PLATEAU_ADHERENCE_THRESHOLD = 95
PLATEAU_STEP = 0.05
MIN_TREND_ENTRIES = 2
CALORIE_EXCESS_THRESHOLD = 120
TRACKING_CONSISTENCY_RATIO = 0.7
MACRO_GAP_THRESHOLD = 40
MACRO_REBALANCE_STEP = 0.05
KCAL_PER_KG = 7700
PROJECTION_DAYS = 30

_PRIORITY_ORDER = {Priority.HIGH: 0, Priority.MEDIUM: 1, Priority.LOW: 2}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves going up."""
    return math.floor(value + 0.5)


@dataclass(frozen=True)
class RuleContext:
    """Inputs every rule reads."""

    goals: NutritionGoals
    stated_goal: WeightGoal
    analysis: ProgressAnalysis

    @property
    def has_data(self) -> bool:
        """Return True when at least one day was logged."""
        return self.analysis.days_logged > 0


Rule = Callable[[RuleContext], Recommendation | None]


def calorie_reduction_rule(context: RuleContext) -> Recommendation | None:
    """Lower the calorie target when a losing user eats well below it."""
    analysis = context.analysis
    if not context.has_data or context.goals.calories <= 0:
        return None
    if context.stated_goal != WeightGoal.LOSE:
        return None
    if analysis.calorie_adherence >= CALORIE_REDUCTION_THRESHOLD:
        return None

    current = context.goals.calories
    delta = round_half_up(current * CALORIE_REDUCTION_FACTOR) - current
    average = round_half_up(analysis.average_intake.calories)
    adherence = round_half_up(analysis.calorie_adherence)
    return Recommendation(
        id="",
        type=RecommendationType.CALORIE_ADJUSTMENT,
        priority=Priority.HIGH,
        title="Adjust your calorie target",
        description=(
            "You are eating well below your calorie goal. A slightly lower "
            "target is easier to meet consistently and still supports weight loss."
        ),
        rationale=(
            f"You averaged {average} calories per day, {adherence}% of your "
            f"{round_half_up(current)} calorie goal."
        ),
        expected_outcome="A target you can hit most days with steady weight loss.",
        implementation=Implementation(
            timeframe="2 weeks",
            steps=(
                f"Set your daily calorie goal to {round_half_up(current + delta)}",
                "Log every meal, including snacks and drinks",
                "Review your weekly average at the end of each week",
            ),
            metrics=("Average daily calories", "Weekly weight change"),
        ),
        impact=RecommendationImpact(
            deltas={"calories": delta},
            expected_weight_change=_projected_weight_change(delta),
        ),
    )


def protein_increase_rule(context: RuleContext) -> Recommendation | None:
    """Raise the protein target when intake lags far behind it."""
    analysis = context.analysis
    if not context.has_data or context.goals.protein <= 0:
        return None
    if analysis.protein_adherence >= PROTEIN_INCREASE_THRESHOLD:
        return None

    current = context.goals.protein
    delta = round_half_up(current * PROTEIN_INCREASE_FACTOR)
    average = round_half_up(analysis.average_intake.protein)
    adherence = round_half_up(analysis.protein_adherence)
    return Recommendation(
        id="",
        type=RecommendationType.MACRO_REBALANCE,
        priority=Priority.MEDIUM,
        title="Prioritize protein",
        description=(
            "Your protein intake is well below target. Building meals around "
            "a protein source helps preserve muscle and keeps you full longer."
        ),
        rationale=(
            f"You averaged {average}g of protein per day, {adherence}% of your "
            f"{round_half_up(current)}g goal."
        ),
        expected_outcome="Better satiety and muscle retention.",
        implementation=Implementation(
            timeframe="1 week",
            steps=(
                "Include a protein source with every meal",
                "Add a high-protein snack such as Greek yogurt or eggs",
                "Consider a protein shake after workouts",
            ),
            metrics=("Average daily protein", "Protein adherence"),
        ),
        impact=RecommendationImpact(deltas={"protein": delta}),
    )


def plateau_rule(context: RuleContext) -> Recommendation | None:
    """Nudge calories when adherence is high but weight is not moving."""
    analysis = context.analysis
    if not context.has_data or context.goals.calories <= 0:
        return None
    if context.stated_goal not in {WeightGoal.LOSE, WeightGoal.GAIN}:
        return None
    adherence = analysis.calorie_adherence
    if not PLATEAU_ADHERENCE_THRESHOLD < adherence <= CALORIE_EXCESS_THRESHOLD:
        return None
    if analysis.weight_entries < MIN_TREND_ENTRIES:
        return None
    if analysis.trend_direction != TrendDirection.STABLE:
        return None

    step = round_half_up(context.goals.calories * PLATEAU_STEP)
    delta = -step if context.stated_goal == WeightGoal.LOSE else step
    direction = "lower" if delta < 0 else "raise"
    return Recommendation(
        id="",
        type=RecommendationType.PLATEAU_ADJUSTMENT,
        priority=Priority.MEDIUM,
        title="Break through your plateau",
        description=(
            f"You are hitting your calorie goal but your weight is holding steady. "
            f"A small change should {direction} your intake enough to restart progress."
        ),
        rationale=(
            f"Calorie adherence was {round_half_up(adherence)}% "
            f"while weight changed by {analysis.weight_progress:+.1f}."
        ),
        expected_outcome=f"Renewed progress toward your goal to {context.stated_goal}.",
        implementation=Implementation(
            timeframe="2-3 weeks",
            steps=(
                f"Set your daily calorie goal to "
                f"{round_half_up(context.goals.calories + delta)}",
                "Weigh yourself at the same time each morning",
            ),
            metrics=("Weekly weight change", "Calorie adherence"),
        ),
        impact=RecommendationImpact(
            deltas={"calories": delta},
            expected_weight_change=_projected_weight_change(delta),
        ),
    )


def calorie_excess_rule(context: RuleContext) -> Recommendation | None:
    """Suggest portion control when intake runs well above the calorie goal."""
    analysis = context.analysis
    if not context.has_data or context.goals.calories <= 0:
        return None
    if analysis.calorie_adherence <= CALORIE_EXCESS_THRESHOLD:
        return None

    excess = round_half_up(analysis.calorie_adherence - 100)
    return Recommendation(
        id="",
        type=RecommendationType.PORTION_CONTROL,
        priority=Priority.MEDIUM,
        title="Watch your portions",
        description=(
            f"You exceeded your calorie goal by {excess}% on average. "
            "Consider portion control or more physical activity."
        ),
        rationale=(
            f"You averaged {round_half_up(analysis.average_intake.calories)} "
            f"calories per day against a goal of "
            f"{round_half_up(context.goals.calories)}."
        ),
        expected_outcome="Daily intake back within reach of your calorie goal.",
        implementation=Implementation(
            timeframe="2 weeks",
            steps=(
                "Serve meals on smaller plates",
                "Check serving sizes before logging",
                "Add a short walk after your largest meal",
            ),
            metrics=("Average daily calories", "Calorie adherence"),
        ),
        impact=RecommendationImpact(),
    )


def macro_rebalance_rule(context: RuleContext) -> Recommendation | None:
    """Shift carbs and fat targets toward the split the user actually eats."""
    analysis = context.analysis
    carbs, fat = analysis.carbs_adherence, analysis.fat_adherence
    if not context.has_data or carbs <= 0 or fat <= 0:
        return None
    if abs(carbs - fat) <= MACRO_GAP_THRESHOLD:
        return None

    over, under = ("carbs", "fat") if carbs > fat else ("fat", "carbs")
    goals = context.goals.as_dict()
    increase = round_half_up(goals[over] * MACRO_REBALANCE_STEP)
    decrease = round_half_up(goals[under] * MACRO_REBALANCE_STEP)
    return Recommendation(
        id="",
        type=RecommendationType.MACRO_REBALANCE,
        priority=Priority.LOW,
        title=f"Rebalance {over} and {under}",
        description=(
            f"Your eating pattern favors {over} over {under}. Moving the targets "
            "closer to your habits makes them easier to follow."
        ),
        rationale=(
            f"Carbs adherence was {round_half_up(carbs)}% and fat adherence was "
            f"{round_half_up(fat)}%."
        ),
        expected_outcome="Macro targets that match your preferred foods.",
        implementation=Implementation(
            timeframe="2 weeks",
            steps=(
                f"Raise your {over} goal by {increase}g",
                f"Lower your {under} goal by {decrease}g",
            ),
            metrics=("Carbs adherence", "Fat adherence"),
        ),
        impact=RecommendationImpact(deltas={over: increase, under: -decrease}),
    )


def tracking_consistency_rule(context: RuleContext) -> Recommendation | None:
    """Ask for steadier logging when too few days of the period were tracked."""
    analysis = context.analysis
    if not context.has_data:
        return None
    if analysis.days_logged >= analysis.period_days * TRACKING_CONSISTENCY_RATIO:
        return None

    return Recommendation(
        id="",
        type=RecommendationType.TRACKING_CONSISTENCY,
        priority=Priority.MEDIUM,
        title="Improve tracking consistency",
        description=(
            "Set daily reminders to log your meals, especially breakfast "
            "and snacks."
        ),
        rationale=(
            f"You logged food on {analysis.days_logged} out of "
            f"{analysis.period_days} days."
        ),
        expected_outcome="Reviews based on a fuller picture of what you eat.",
        implementation=Implementation(
            timeframe="1 week",
            steps=(
                "Set a reminder after each main meal",
                "Log snacks and drinks as soon as you have them",
            ),
            metrics=("Days logged", "Logging consistency"),
        ),
        impact=RecommendationImpact(),
    )


RULES: tuple[Rule, ...] = (
    calorie_reduction_rule,
    protein_increase_rule,
    plateau_rule,
    calorie_excess_rule,
    macro_rebalance_rule,
    tracking_consistency_rule,
)


def generate_recommendations(
    context: RuleContext,
    generated_at: datetime,
    rules: tuple[Rule, ...] = RULES,
) -> list[Recommendation]:
    """Evaluate every rule in order and return what fired."""
    millis = int(generated_at.timestamp() * 1000)
    recommendations: list[Recommendation] = []
    for rule in rules:
        recommendation = rule(context)
        if recommendation is None:
            continue
        position = len(recommendations)
        recommendations.append(
            replace(recommendation, id=f"{recommendation.type}-{millis}-{position}")
        )
    return recommendations


def apply_impacts(
    goals: NutritionGoals, recommendations: list[Recommendation]
) -> NutritionGoals:
    """Return goals with every recommendation's deltas applied in order."""
    values = goals.as_dict()
    for recommendation in recommendations:
        for name, delta in recommendation.impact.deltas.items():
            values[name] += delta
    return NutritionGoals(**values)


def sort_by_priority(recommendations: list[Recommendation]) -> list[Recommendation]:
    """Return recommendations ordered high to low, stable within a priority."""
    return sorted(recommendations, key=lambda item: _PRIORITY_ORDER[item.priority])


def _projected_weight_change(calorie_delta: float) -> float:
    change = calorie_delta * PROJECTION_DAYS / KCAL_PER_KG
    return round_half_up(change * 10) / 10
