"""Rating lookup policy: serve fresh cache, refresh on miss, fall back to stale on failure."""

import enum
import logging
from dataclasses import dataclass

from errors import RatingProxyError
from services.cache import RatingCache
from services.places import PlacesClient, RatingPayload

logger = logging.getLogger(__name__)

# Browsers keep it 5 min, shared caches/CDN 30 min
FRESH_CACHE_CONTROL = "public, max-age=300, s-maxage=1800, stale-while-revalidate=300"
# Emergency stale response: downstream caches must not keep it
STALE_CACHE_CONTROL = "no-store"


class RatingOutcome(str, enum.Enum):
    FRESH = "fresh"
    FETCHED = "fetched"
    STALE = "stale"


@dataclass(frozen=True)
class RatingResult:
    payload: RatingPayload
    cache_control: str
    outcome: RatingOutcome


class RatingService:
    def __init__(self, client: PlacesClient, cache: RatingCache):
        self.client = client
        self.cache = cache

    async def get_rating(self) -> RatingResult:
        """Return the place rating, hitting upstream at most once.

        Raises the upstream error only when there is nothing cached to fall back to.
        """
        cached = self.cache.get_fresh()
        if cached is not None:
            return RatingResult(cached, FRESH_CACHE_CONTROL, RatingOutcome.FRESH)

        try:
            payload = await self.client.fetch_rating()
        except RatingProxyError as e:
            stale = self.cache.get_stale()
            if stale is None:
                raise
            logger.warning("Serving stale rating after upstream failure: %s", e)
            return RatingResult(stale, STALE_CACHE_CONTROL, RatingOutcome.STALE)

        self.cache.set(payload)
        logger.info("Rating cache refreshed (ttl=%ss)", self.cache.ttl_seconds)
        return RatingResult(payload, FRESH_CACHE_CONTROL, RatingOutcome.FETCHED)
