"""Domain models for diet adherence metrics."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MealMetrics:
    """Aggregate counts for one session's meals."""

    total_meals: int
    total_on_diet: int
    total_off_diet: int
    best_on_diet_sequence: int
