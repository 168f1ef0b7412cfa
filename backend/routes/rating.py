"""Google rating route — cached proxy in front of the Places API."""

from fastapi import APIRouter, Depends, Request, Response

from services.places import RatingPayload
from services.rating import RatingService

router = APIRouter()


def get_rating_service(request: Request) -> RatingService:
    return request.app.state.rating_service


@router.get("/api/google-rating", response_model=RatingPayload)
async def google_rating(
    response: Response,
    service: RatingService = Depends(get_rating_service),
) -> RatingPayload:
    """Rating, review count and Maps link for the configured place."""
    result = await service.get_rating()
    response.headers["Cache-Control"] = result.cache_control
    return result.payload
