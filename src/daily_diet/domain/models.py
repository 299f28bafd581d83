"""Domain models for the diet journal."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class UserRecord:
    """Represents a user bound to a browser session."""

    id: UUID
    name: str
    email: str
    session_id: str
