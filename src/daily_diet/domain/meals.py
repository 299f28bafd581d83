"""Domain models for meal records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class MealFields:
    """Caller-editable meal attributes."""

    name: str
    description: str
    is_on_diet: bool
    date: datetime


@dataclass(frozen=True)
class MealRecord:
    """Meal row owned by a single user."""

    id: UUID
    user_id: UUID
    name: str
    description: str
    is_on_diet: bool
    date: datetime
    created_at: datetime

    def with_fields(self, fields: MealFields) -> "MealRecord":
        """Return a copy with every editable attribute replaced."""
        return MealRecord(
            id=self.id,
            user_id=self.user_id,
            name=fields.name,
            description=fields.description,
            is_on_diet=fields.is_on_diet,
            date=fields.date,
            created_at=self.created_at,
        )
