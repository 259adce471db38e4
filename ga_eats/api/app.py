"""
FastAPI application factory.

* Registers routes for restaurants, airports and health.
* Opens the database engine (and Redis cache, when enabled) for the
  lifetime of the app and decides once whether the PostGIS index path is
  available.
* Maps domain errors to HTTP status codes (400 / 404 / 500).
* Applies rate-limiting middleware.
* Swagger / OpenAPI UI available at ``/docs``.
"""

from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from ga_eats.api.middleware import limiter
from ga_eats.api.routes import airports, health, restaurants
from ga_eats.config import settings
from ga_eats.domain.errors import DataAccessFailure, InvalidArgument, NotFound
from ga_eats.infrastructure.cache import QueryCache, create_redis
from ga_eats.infrastructure.database import create_engine, create_session_factory
from ga_eats.infrastructure.spatial import resolve_spatial_backend

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the engine (and cache) on startup; dispose on shutdown."""
    engine = create_engine(settings.database_url)
    app.state.session_factory = create_session_factory(engine)
    async with engine.connect() as conn:
        app.state.spatial_index = await resolve_spatial_backend(
            conn, settings.spatial_backend
        )
    logger.info(
        "Proximity search backend: %s",
        "spatial index" if app.state.spatial_index else "full scan",
    )
    app.state.cache = (
        QueryCache(create_redis(settings.redis_url))
        if settings.cache_enabled
        else None
    )
    yield
    if app.state.cache is not None:
        await app.state.cache.close()
    await engine.dispose()


# ── Error mapping ─────────────────────────────────────────────────────


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": error, "message": message}
    )


async def _validation_error(request: Request, exc: RequestValidationError):
    problems = "; ".join(
        f"{'.'.join(str(p) for p in e['loc'][1:]) or 'request'}: {e['msg']}"
        for e in exc.errors()
    )
    return _error(400, "Invalid parameters", problems)


async def _invalid_argument(request: Request, exc: InvalidArgument):
    return _error(400, "Invalid argument", str(exc))


async def _not_found(request: Request, exc: NotFound):
    return _error(404, "Not found", str(exc))


async def _data_access_failure(request: Request, exc: DataAccessFailure):
    logger.error("Data access failure on %s", request.url.path, exc_info=exc)
    return _error(
        500, "Database error", "Failed to fetch data. Please try again later."
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="GA Eats API",
        description=(
            "Finds highly rated restaurants near airports and airports near "
            "any point, ranked by great-circle distance."
        ),
        version="1.0.0",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    # Domain errors
    app.add_exception_handler(RequestValidationError, _validation_error)
    app.add_exception_handler(InvalidArgument, _invalid_argument)
    app.add_exception_handler(NotFound, _not_found)
    app.add_exception_handler(DataAccessFailure, _data_access_failure)

    # Routers
    app.include_router(restaurants.router, prefix="/api/v1")
    app.include_router(airports.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app
