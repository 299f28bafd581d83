"""Session-scoped meal record store."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID, uuid4

from daily_diet import timestamps
from daily_diet.domain.errors import ErrorKind, Failure
from daily_diet.domain.meals import MealFields, MealRecord
from daily_diet.services.users import UserRepository

logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meal records.

    Every id-scoped call filters on the owning user as well as the id.
    """

    def insert_meal(self, meal: MealRecord) -> None:
        """Persist a new meal row."""

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return the user's meals ordered by date, newest first."""

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        """Return the meal if it exists and belongs to the user."""

    def update_meal(self, meal_id: UUID, user_id: UUID, fields: MealFields) -> bool:
        """Overwrite the editable fields; return False when nothing matched."""

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> bool:
        """Delete one meal; return False when nothing matched."""


@dataclass
class MealService:
    """CRUD over meals owned by the user linked to a session."""

    users: UserRepository
    repository: MealRepository

    def create_meal(self, session_id: str, fields: MealFields) -> MealRecord | Failure:
        """Create a meal for the session's user."""
        user = self.users.get_by_session(session_id)
        if user is None:
            return Failure(ErrorKind.NO_LINKED_USER, "No user registered for session")
        checked = _check_fields(fields)
        if isinstance(checked, Failure):
            return checked
        meal = MealRecord(
            id=uuid4(),
            user_id=user.id,
            name=checked.name,
            description=checked.description,
            is_on_diet=checked.is_on_diet,
            date=checked.date,
            created_at=datetime.now(tz=UTC),
        )
        self.repository.insert_meal(meal)
        logger.info(
            "Meal created", extra={"meal_id": str(meal.id), "user_id": str(user.id)}
        )
        return meal

    def list_meals(self, session_id: str) -> list[MealRecord]:
        """Return the session's meals, newest first."""
        user = self.users.get_by_session(session_id)
        if user is None:
            return []
        return self.repository.list_meals(user.id)

    def get_meal(self, meal_id: UUID, session_id: str) -> MealRecord | Failure:
        """Return one of the session's meals."""
        user = self.users.get_by_session(session_id)
        meal = self.repository.get_meal(meal_id, user.id) if user else None
        if meal is None:
            return _not_found(meal_id)
        return meal

    def update_meal(
        self, meal_id: UUID, session_id: str, fields: MealFields
    ) -> MealRecord | Failure:
        """Replace all editable fields of one of the session's meals."""
        current = self.get_meal(meal_id, session_id)
        if isinstance(current, Failure):
            return current
        checked = _check_fields(fields)
        if isinstance(checked, Failure):
            return checked
        if not self.repository.update_meal(meal_id, current.user_id, checked):
            return _not_found(meal_id)
        return current.with_fields(checked)

    def delete_meal(self, meal_id: UUID, session_id: str) -> Failure | None:
        """Delete one of the session's meals."""
        current = self.get_meal(meal_id, session_id)
        if isinstance(current, Failure):
            return current
        if not self.repository.delete_meal(meal_id, current.user_id):
            return _not_found(meal_id)
        logger.info("Meal deleted", extra={"meal_id": str(meal_id)})
        return None


def _check_fields(fields: MealFields) -> MealFields | Failure:
    if not isinstance(fields.name, str) or not isinstance(fields.description, str):
        return Failure(ErrorKind.VALIDATION, "name and description must be strings")
    if not isinstance(fields.is_on_diet, bool):
        return Failure(ErrorKind.VALIDATION, "isOnDiet must be a boolean")
    if not isinstance(fields.date, datetime):
        return Failure(ErrorKind.VALIDATION, "date must be a timestamp")
    return MealFields(
        name=fields.name,
        description=fields.description,
        is_on_diet=fields.is_on_diet,
        date=timestamps.normalize(fields.date),
    )


def _not_found(meal_id: UUID) -> Failure:
    return Failure(ErrorKind.NOT_FOUND, f"Meal {meal_id} not found")
