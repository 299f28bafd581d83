"""Session cookie dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import HTTPException, Request, Response, status

from daily_diet.domain.sessions import SessionToken

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer


def _presented_token(request: Request) -> str | None:
    container: AppContainer = request.app.state.container
    return request.cookies.get(container.settings.session_cookie_name)


async def ensure_session(request: Request, response: Response) -> SessionToken:
    """Resolve the caller's session, issuing a cookie when none was sent."""
    container: AppContainer = request.app.state.container
    session = container.session_service.ensure_session(_presented_token(request))
    if session.issued:
        response.set_cookie(
            container.settings.session_cookie_name,
            session.value,
            max_age=container.session_service.max_age_seconds,
            path="/",
            httponly=True,
            samesite="lax",
            secure=container.settings.session_cookie_secure,
        )
    return session


async def require_session(request: Request) -> str:
    """Return the caller's session id; reject requests without a cookie."""
    container: AppContainer = request.app.state.container
    session = container.session_service.ensure_session(_presented_token(request))
    if session.issued:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing session"
        )
    return session.value
