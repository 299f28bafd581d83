"""Tests for diet adherence metrics."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import pytest

from daily_diet.domain.meals import MealFields, MealRecord
from daily_diet.domain.models import UserRecord
from daily_diet.services.meals import MealService
from daily_diet.services.metrics import MetricsService, best_on_diet_sequence
from tests.conftest import InMemoryUserRepository

BASE = datetime(2024, 3, 1, tzinfo=UTC)
USER_ID = uuid4()


def _meals(flags: list[bool]) -> list[MealRecord]:
    return [
        MealRecord(
            id=uuid4(),
            user_id=USER_ID,
            name=f"meal-{index}",
            description="",
            is_on_diet=flag,
            date=BASE + timedelta(hours=index),
            created_at=BASE,
        )
        for index, flag in enumerate(flags)
    ]


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ([True, True, False, True, True, True], 3),
        ([False, False, False], 0),
        ([], 0),
        ([True] * 7, 7),
        ([True, True, False, True], 2),
    ],
)
def test_best_on_diet_sequence(flags: list[bool], expected: int) -> None:
    assert best_on_diet_sequence(_meals(flags)) == expected


def test_best_sequence_uses_chronological_order() -> None:
    meals = _meals([True, True, False, True, True, True])

    assert best_on_diet_sequence(list(reversed(meals))) == 3


def test_equal_dates_fall_back_to_creation_order() -> None:
    same_date = BASE + timedelta(days=1)
    meals = [
        MealRecord(
            id=uuid4(),
            user_id=USER_ID,
            name=f"meal-{index}",
            description="",
            is_on_diet=flag,
            date=same_date,
            created_at=BASE + timedelta(seconds=index),
        )
        for index, flag in enumerate([True, False, True, True])
    ]

    assert best_on_diet_sequence(reversed(meals)) == 2


def test_compute_metrics_scenario(
    meal_service: MealService, user_repository: InMemoryUserRepository
) -> None:
    user_repository.insert_user(
        UserRecord(id=uuid4(), name="A", email="a@x.com", session_id="session-a")
    )
    for hours, flag in enumerate([True, False, True]):
        meal_service.create_meal(
            "session-a",
            MealFields(
                name="meal",
                description="",
                is_on_diet=flag,
                date=BASE + timedelta(hours=hours),
            ),
        )

    metrics = MetricsService(meal_service).compute_metrics("session-a")

    assert metrics.total_meals == 3
    assert metrics.total_on_diet == 2
    assert metrics.total_off_diet == 1
    assert metrics.best_on_diet_sequence == 1


def test_compute_metrics_for_session_without_user(meal_service: MealService) -> None:
    metrics = MetricsService(meal_service).compute_metrics("unregistered")

    assert metrics.total_meals == 0
    assert metrics.best_on_diet_sequence == 0
