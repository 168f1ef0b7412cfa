"""Custom exceptions and centralized FastAPI error handlers."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class RatingProxyError(Exception):
    """Base exception with HTTP status code and client-facing error code."""

    error_code = "server_error"

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.status_code = status_code

    def to_body(self) -> dict:
        return {"error": self.error_code}


class PlacesAPIError(RatingProxyError):
    """The Places API answered with a non-success status."""

    error_code = "places_api_error"

    def __init__(self, upstream_status: int, body: str = ""):
        super().__init__(f"Places API returned HTTP {upstream_status}", status_code=502)
        self.upstream_status = upstream_status
        self.body = body

    def to_body(self) -> dict:
        return {"error": self.error_code, "status": self.upstream_status}


class UpstreamTransportError(RatingProxyError):
    """The outbound call failed before a usable response was obtained."""

    def __init__(self, message: str):
        super().__init__(message, status_code=500)


class PlacesNotConfiguredError(UpstreamTransportError):
    def __init__(self, missing: list[str]):
        super().__init__(f"Places lookup not configured, missing: {', '.join(missing)}")
        self.missing = missing


def register_error_handlers(app: FastAPI) -> None:
    """Register centralized exception handlers on the FastAPI app."""

    @app.exception_handler(RatingProxyError)
    async def handle_rating_proxy_error(_request: Request, exc: RatingProxyError):
        return JSONResponse(exc.to_body(), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception):
        logger.exception("Unhandled error: %s", exc)
        return JSONResponse({"error": "server_error"}, status_code=500)
