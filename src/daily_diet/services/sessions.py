"""Anonymous session identity."""

from collections.abc import Callable
from dataclasses import dataclass, field
from uuid import uuid4

from daily_diet.domain.sessions import SessionToken


def _new_token() -> str:
    return str(uuid4())


@dataclass
class SessionService:
    """Mints session tokens for clients that do not have one yet."""

    max_age_seconds: int
    token_factory: Callable[[], str] = field(default=_new_token)

    def ensure_session(self, existing_token: str | None) -> SessionToken:
        """Return the caller's token, or a freshly issued one when absent.

        Any non-empty token is accepted as-is; there is no server-side lookup.
        """
        if existing_token and existing_token.strip():
            return SessionToken(value=existing_token, issued=False)
        return SessionToken(value=self.token_factory(), issued=True)
