"""User registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from daily_diet.api.errors import raise_for_failure, run_guarded
from daily_diet.api.models import CreateUserRequest
from daily_diet.api.sessions import ensure_session
from daily_diet.domain.errors import Failure
from daily_diet.domain.sessions import SessionToken

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(
    body: CreateUserRequest,
    request: Request,
    session: SessionToken = Depends(ensure_session),
) -> dict[str, object]:
    """Register the user owned by the caller's session."""
    container: AppContainer = request.app.state.container
    result = run_guarded(
        "create user",
        lambda: container.user_service.create_user(
            session.value, body.name, str(body.email)
        ),
    )
    if isinstance(result, Failure):
        raise_for_failure(result)
    return {"user": {"id": str(result.id), "name": result.name, "email": result.email}}
