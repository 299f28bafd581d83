"""Shared test fixtures."""

from dataclasses import dataclass, field
from uuid import UUID

import pytest

from daily_diet.config import Settings
from daily_diet.containers import AppContainer
from daily_diet.domain.meals import MealFields, MealRecord
from daily_diet.domain.models import UserRecord
from daily_diet.services.meals import MealRepository, MealService
from daily_diet.services.metrics import MetricsService
from daily_diet.services.sessions import SessionService
from daily_diet.services.users import UserRepository, UserService


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: list[UserRecord] = field(default_factory=list)

    def get_by_session(self, session_id: str) -> UserRecord | None:
        for user in self.users:
            if user.session_id == session_id:
                return user
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        for user in self.users:
            if user.email == email:
                return user
        return None

    def insert_user(self, user: UserRecord) -> None:
        self.users.append(user)


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository for tests."""

    meals: dict[UUID, MealRecord] = field(default_factory=dict)

    def insert_meal(self, meal: MealRecord) -> None:
        self.meals[meal.id] = meal

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        owned = [meal for meal in self.meals.values() if meal.user_id == user_id]
        return sorted(
            owned, key=lambda meal: (meal.date, meal.created_at), reverse=True
        )

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        meal = self.meals.get(meal_id)
        if meal is None or meal.user_id != user_id:
            return None
        return meal

    def update_meal(self, meal_id: UUID, user_id: UUID, fields: MealFields) -> bool:
        meal = self.get_meal(meal_id, user_id)
        if meal is None:
            return False
        self.meals[meal_id] = meal.with_fields(fields)
        return True

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> bool:
        if self.get_meal(meal_id, user_id) is None:
            return False
        del self.meals[meal_id]
        return True


@dataclass
class FailingMealRepository(InMemoryMealRepository):
    """Meal repository whose store is unreachable."""

    def insert_meal(self, meal: MealRecord) -> None:
        raise RuntimeError("connection refused: db.internal:5432")

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        raise RuntimeError("connection refused: db.internal:5432")


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key=(
            "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9."
            "eyJyb2xlIjoic2VydmljZV9yb2xlIn0."
            "c2lnbmF0dXJl"
        ),
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def meal_repository() -> InMemoryMealRepository:
    return InMemoryMealRepository()


@pytest.fixture
def meal_service(
    user_repository: InMemoryUserRepository, meal_repository: InMemoryMealRepository
) -> MealService:
    return MealService(users=user_repository, repository=meal_repository)


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    meal_service: MealService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        session_service=SessionService(
            max_age_seconds=settings.session_max_age_seconds
        ),
        user_service=UserService(user_repository),
        meal_service=meal_service,
        metrics_service=MetricsService(meal_service),
        close_resources=close_resources,
    )
