"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from school_meals.api.schemas import MealResponse
from school_meals.app_logging import configure_logging
from school_meals.containers import AppContainer
from school_meals.domain.dates import today_iso
from school_meals.domain.errors import EmptyInputError, NetworkError, NoDataResult
from school_meals.services.rendering import (
    EMPTY_INPUT_MESSAGE,
    NETWORK_ERROR_MESSAGE,
    NO_DATA_MESSAGE,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/meals")
    async def meals(request: Request, date: str | None = None) -> MealResponse:
        """Look up the meal schedule for a date, defaulting to today."""
        state_container: AppContainer = request.app.state.container
        query_date = (
            today_iso(state_container.settings.timezone) if date is None else date
        )
        try:
            record = await state_container.meal_service.lookup(query_date)
        except EmptyInputError as exc:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST, detail=EMPTY_INPUT_MESSAGE
            ) from exc
        except NoDataResult:
            return MealResponse.no_data(query_date.strip(), NO_DATA_MESSAGE)
        except NetworkError as exc:
            logger.exception("Meal lookup failed", extra={"query_date": query_date})
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY, detail=NETWORK_ERROR_MESSAGE
            ) from exc
        except ValueError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
            ) from exc
        return MealResponse.from_record(record)

    return app
