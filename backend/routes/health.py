"""Health and readiness check routes."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def health() -> str:
    """Liveness check — always OK, independent of cache or upstream state."""
    return "OK"


@router.get("/ready")
async def ready(request: Request) -> dict:
    """Lightweight readiness check — no external calls."""
    settings = request.app.state.settings
    service = request.app.state.rating_service
    return {
        "status": "ok",
        "service": "rating-proxy",
        "commit": settings.git_sha,
        "cache": "warm" if service.cache.get_stale() is not None else "empty",
        "configured": service.client.is_configured,
    }
