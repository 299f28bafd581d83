"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from daily_diet.domain.errors import StorageError
from daily_diet.domain.models import UserRecord
from daily_diet.services.users import UserRepository

_COLUMNS = "id, name, email, session_id"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_session(self, session_id: str) -> UserRecord | None:
        """Return the user bound to a session, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("session_id", session_id)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with the email, if present."""
        response = (
            self.client.table("users")
            .select(_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_row(response.data[0])
        return None

    def insert_user(self, user: UserRecord) -> None:
        """Insert a user row."""
        response = (
            self.client.table("users")
            .insert(
                {
                    "id": str(user.id),
                    "name": user.name,
                    "email": user.email,
                    "session_id": user.session_id,
                }
            )
            .execute()
        )
        if not response.data:
            raise StorageError("Failed to create user in Supabase")


def _parse_row(row: dict[str, object]) -> UserRecord:
    return UserRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        session_id=str(row.get("session_id", "")),
    )
