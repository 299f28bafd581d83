"""Pydantic models for HTTP request bodies."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StrictBool

from daily_diet.domain.meals import MealFields


class CreateUserRequest(BaseModel):
    """Body of a user registration request."""

    name: str
    email: EmailStr


class MealRequest(BaseModel):
    """Body of a meal create or update request."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    description: str
    is_on_diet: StrictBool = Field(alias="isOnDiet")
    date: datetime

    def to_fields(self) -> MealFields:
        """Convert to the domain representation."""
        return MealFields(
            name=self.name,
            description=self.description,
            is_on_diet=self.is_on_diet,
            date=self.date,
        )
