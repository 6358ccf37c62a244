"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from school_meals.adapters.neis_client import HttpxNeisClient, NeisClient
from school_meals.config import Settings
from school_meals.services.meals import MealService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    neis_client: NeisClient
    meal_service: MealService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    neis_client = HttpxNeisClient.create(
        base_url=resolved_settings.neis_base_url,
        relay_url=resolved_settings.relay_url,
        office_code=resolved_settings.office_code,
        school_code=resolved_settings.school_code,
    )
    meal_service = MealService(neis_client)

    async def close_resources() -> None:
        await neis_client.close()

    return AppContainer(
        settings=resolved_settings,
        neis_client=neis_client,
        meal_service=meal_service,
        close_resources=close_resources,
    )
