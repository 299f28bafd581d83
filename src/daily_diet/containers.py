"""Dependency container wiring for the application."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from daily_diet.adapters.supabase_meal_repository import SupabaseMealRepository
from daily_diet.adapters.supabase_user_repository import SupabaseUserRepository
from daily_diet.config import Settings
from daily_diet.services.meals import MealService
from daily_diet.services.metrics import MetricsService
from daily_diet.services.sessions import SessionService
from daily_diet.services.users import UserService

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    session_service: SessionService
    user_service: UserService
    meal_service: MealService
    metrics_service: MetricsService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    meal_service = MealService(users=user_repository, repository=meal_repository)

    async def close_resources() -> None:
        logger.info("Closing Supabase client")
        supabase_client.postgrest.session.close()

    return AppContainer(
        settings=resolved_settings,
        session_service=SessionService(
            max_age_seconds=resolved_settings.session_max_age_seconds
        ),
        user_service=UserService(user_repository),
        meal_service=meal_service,
        metrics_service=MetricsService(meal_service),
        close_resources=close_resources,
    )
