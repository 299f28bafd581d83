"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import uuid4

from daily_diet.domain.errors import ErrorKind, Failure
from daily_diet.domain.models import UserRecord

logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_session(self, session_id: str) -> UserRecord | None:
        """Return the user bound to a session, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user registered with an email, if present."""

    def insert_user(self, user: UserRecord) -> None:
        """Persist a new user row."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def get_user_for_session(self, session_id: str) -> UserRecord | None:
        """Return the user linked to the session, if any."""
        return self.repository.get_by_session(session_id)

    def create_user(
        self, session_id: str, name: str, email: str
    ) -> UserRecord | Failure:
        """Create the single user owned by a session."""
        if self.repository.get_by_email(email) is not None:
            return Failure(ErrorKind.EMAIL_TAKEN, "Email already registered")
        if self.repository.get_by_session(session_id) is not None:
            return Failure(
                ErrorKind.SESSION_HAS_USER, "Session already has a registered user"
            )
        user = UserRecord(id=uuid4(), name=name, email=email, session_id=session_id)
        self.repository.insert_user(user)
        logger.info("User created", extra={"user_id": str(user.id)})
        return user
