"""Supabase repository for meal records."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from daily_diet import timestamps
from daily_diet.domain.errors import StorageError
from daily_diet.domain.meals import MealFields, MealRecord
from daily_diet.services.meals import MealRepository

_COLUMNS = "id, user_id, name, description, is_on_diet, date, created_at"


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals; `date` is stored as epoch ms."""

    client: Client

    def insert_meal(self, meal: MealRecord) -> None:
        """Insert a meal row."""
        payload = _fields_payload(meal)
        payload.update(
            {
                "id": str(meal.id),
                "user_id": str(meal.user_id),
                "created_at": meal.created_at.isoformat(),
            }
        )
        response = self.client.table("meals").insert(payload).execute()
        if not response.data:
            raise StorageError("Failed to create meal in Supabase")

    def list_meals(self, user_id: UUID) -> list[MealRecord]:
        """Return the user's meals, newest first."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("date", desc=True)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]

    def get_meal(self, meal_id: UUID, user_id: UUID) -> MealRecord | None:
        """Return a meal by id when owned by the user."""
        response = (
            self.client.table("meals")
            .select(_COLUMNS)
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def update_meal(self, meal_id: UUID, user_id: UUID, fields: MealFields) -> bool:
        """Overwrite the editable columns of one owned meal."""
        response = (
            self.client.table("meals")
            .update(_fields_payload(fields))
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)

    def delete_meal(self, meal_id: UUID, user_id: UUID) -> bool:
        """Delete one owned meal."""
        response = (
            self.client.table("meals")
            .delete()
            .eq("id", str(meal_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _fields_payload(fields: MealFields | MealRecord) -> dict[str, object]:
    return {
        "name": fields.name,
        "description": fields.description,
        "is_on_diet": fields.is_on_diet,
        "date": timestamps.to_epoch_ms(fields.date),
    }


def _parse_row(row: dict[str, object]) -> MealRecord:
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else timestamps.EPOCH
    )
    return MealRecord(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description", "")),
        is_on_diet=bool(row.get("is_on_diet")),
        date=timestamps.from_epoch_ms(int(row.get("date") or 0)),
        created_at=created_at,
    )
