"""Meal journal endpoints scoped to the caller's session."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from daily_diet import timestamps
from daily_diet.api.errors import raise_for_failure, run_guarded
from daily_diet.api.models import MealRequest
from daily_diet.api.sessions import require_session
from daily_diet.domain.errors import Failure

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer
    from daily_diet.domain.meals import MealRecord

router = APIRouter(prefix="/meals", tags=["meals"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(
    body: MealRequest,
    request: Request,
    session_id: str = Depends(require_session),
) -> dict[str, object]:
    """Create a meal for the session's user."""
    meal_service = _container(request).meal_service
    result = run_guarded(
        "create meal", lambda: meal_service.create_meal(session_id, body.to_fields())
    )
    if isinstance(result, Failure):
        raise_for_failure(result)
    return {"meal": _meal_payload(result)}


@router.get("")
async def list_meals(
    request: Request, session_id: str = Depends(require_session)
) -> dict[str, object]:
    """List the session's meals, newest first."""
    meal_service = _container(request).meal_service
    meals = run_guarded("list meals", lambda: meal_service.list_meals(session_id))
    return {"meals": [_meal_payload(meal) for meal in meals]}


@router.get("/metrics")
async def meal_metrics(
    request: Request, session_id: str = Depends(require_session)
) -> dict[str, int]:
    """Return totals and the best on-diet sequence."""
    metrics_service = _container(request).metrics_service
    metrics = run_guarded(
        "compute metrics", lambda: metrics_service.compute_metrics(session_id)
    )
    return {
        "totalMeals": metrics.total_meals,
        "totalMealsOnDiet": metrics.total_on_diet,
        "totalMealsOffDiet": metrics.total_off_diet,
        "bestOnDietSequence": metrics.best_on_diet_sequence,
    }


@router.get("/{meal_id}")
async def get_meal(
    meal_id: UUID, request: Request, session_id: str = Depends(require_session)
) -> dict[str, object]:
    """Return one of the session's meals."""
    meal_service = _container(request).meal_service
    result = run_guarded("get meal", lambda: meal_service.get_meal(meal_id, session_id))
    if isinstance(result, Failure):
        raise_for_failure(result)
    return {"meal": _meal_payload(result)}


@router.put("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def update_meal(
    meal_id: UUID,
    body: MealRequest,
    request: Request,
    session_id: str = Depends(require_session),
) -> Response:
    """Overwrite one of the session's meals."""
    meal_service = _container(request).meal_service
    result = run_guarded(
        "update meal",
        lambda: meal_service.update_meal(meal_id, session_id, body.to_fields()),
    )
    if isinstance(result, Failure):
        raise_for_failure(result)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(
    meal_id: UUID, request: Request, session_id: str = Depends(require_session)
) -> Response:
    """Delete one of the session's meals."""
    meal_service = _container(request).meal_service
    failure = run_guarded(
        "delete meal", lambda: meal_service.delete_meal(meal_id, session_id)
    )
    if failure is not None:
        raise_for_failure(failure)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


def _meal_payload(meal: MealRecord) -> dict[str, object]:
    return {
        "id": str(meal.id),
        "userId": str(meal.user_id),
        "name": meal.name,
        "description": meal.description,
        "isOnDiet": meal.is_on_diet,
        "date": timestamps.to_iso(meal.date),
    }
