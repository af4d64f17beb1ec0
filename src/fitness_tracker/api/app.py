"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from fitness_tracker.api.foods import router as foods_router
from fitness_tracker.api.nutrition import router as nutrition_router
from fitness_tracker.api.profile import router as profile_router
from fitness_tracker.api.workouts import router as workouts_router
from fitness_tracker.app_logging import configure_logging
from fitness_tracker.containers import AppContainer
from fitness_tracker.domain.errors import (
    ConflictError,
    FitnessTrackerError,
    ImageUnavailableError,
    InvalidInputError,
    NotFoundError,
)

_ERROR_STATUS: dict[type[FitnessTrackerError], int] = {
    InvalidInputError: status.HTTP_400_BAD_REQUEST,
    ImageUnavailableError: 422,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(foods_router)
    app.include_router(nutrition_router)
    app.include_router(workouts_router)
    app.include_router(profile_router)

    @app.exception_handler(FitnessTrackerError)
    async def handle_domain_error(
        request: Request, exc: FitnessTrackerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        logger.info(
            "Request failed: path=%s status=%s error=%s",
            request.url.path,
            status_code,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
