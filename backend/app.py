"""FastAPI application entry point for the Google rating proxy."""

import logging
import sys

import uvicorn
from fastapi import FastAPI, Request, Response

from config import Settings, settings
from errors import register_error_handlers
from services.cache import RatingCache
from services.places import PlacesClient
from services.rating import RatingService

JSON_LOG_FORMAT = '{"time":"%(asctime)s","level":"%(levelname)s","logger":"%(name)s","message":"%(message)s"}'
TEXT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_format(app_settings: Settings) -> str:
    """JSON lines for production, human-readable for local."""
    return JSON_LOG_FORMAT if app_settings.is_production else TEXT_LOG_FORMAT


# Structured logging: JSON for production, human-readable for local
if settings.is_production:
    logging.basicConfig(level=logging.INFO, format=log_format(settings), stream=sys.stdout)
else:
    logging.basicConfig(level=logging.INFO, format=log_format(settings))

logger = logging.getLogger(__name__)


def build_rating_service(app_settings: Settings) -> RatingService:
    client = PlacesClient(
        place_id=app_settings.place_id,
        api_key=app_settings.api_key,
        base_url=app_settings.places_base_url,
        timeout=app_settings.places_timeout_seconds,
    )
    return RatingService(client, RatingCache(ttl_seconds=app_settings.cache_ttl_seconds))


def create_app(
    app_settings: Settings | None = None,
    rating_service: RatingService | None = None,
) -> FastAPI:
    app_settings = app_settings or settings
    app = FastAPI(title="Google Rating Proxy", version="1.0.0")
    app.state.settings = app_settings
    app.state.rating_service = rating_service or build_rating_service(app_settings)

    # CORS, only when the rating is fetched client-side from another domain.
    # Registered first so the security headers wrap it, 204 preflights included.
    if app_settings.front_origin:
        front_origin = app_settings.front_origin

        @app.middleware("http")
        async def allow_front_origin(request: Request, call_next):
            if request.method == "OPTIONS":
                response = Response(status_code=204)
            else:
                response = await call_next(request)
                response.headers["Vary"] = "Origin"
            response.headers["Access-Control-Allow-Origin"] = front_origin
            return response

    # Security headers
    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        if app_settings.is_production:
            response.headers["Strict-Transport-Security"] = "max-age=31536000; includeSubDomains"
        return response

    # Centralized error handlers
    register_error_handlers(app)

    from routes.health import router as health_router
    from routes.rating import router as rating_router

    app.include_router(health_router)
    app.include_router(rating_router)

    @app.on_event("startup")
    async def _validate_config() -> None:
        missing = app_settings.validate()
        if missing:
            logger.warning("Missing env vars (rating lookups will fail): %s", ", ".join(missing))

    return app


app = create_app()


def main() -> None:
    logger.info("Server listening on :%d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    main()
