"""Diet adherence metrics."""

from collections.abc import Iterable
from dataclasses import dataclass

from daily_diet.domain.meals import MealRecord
from daily_diet.domain.metrics import MealMetrics
from daily_diet.services.meals import MealService


@dataclass
class MetricsService:
    """Computes totals and the best on-diet streak for a session."""

    meal_service: MealService

    def compute_metrics(self, session_id: str) -> MealMetrics:
        """Return meal counts and the longest on-diet run."""
        meals = self.meal_service.list_meals(session_id)
        on_diet = sum(1 for meal in meals if meal.is_on_diet)
        return MealMetrics(
            total_meals=len(meals),
            total_on_diet=on_diet,
            total_off_diet=len(meals) - on_diet,
            best_on_diet_sequence=best_on_diet_sequence(meals),
        )


def best_on_diet_sequence(meals: Iterable[MealRecord]) -> int:
    """Return the longest chronological run of consecutive on-diet meals.

    Meals are ordered by ``date`` then ``created_at``; the sort is stable, so
    fully equal keys keep the order they were given in.
    """
    best = 0
    current = 0
    for meal in sorted(meals, key=lambda m: (m.date, m.created_at)):
        if meal.is_on_diet:
            current += 1
            best = max(best, current)
        else:
            current = 0
    return best
