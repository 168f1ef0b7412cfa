"""Google Places API (New) client — rating lookup for a single place.

Only three fields are requested via the field mask. The API key travels in
the X-Goog-Api-Key header, never in the URL.
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from errors import PlacesAPIError, PlacesNotConfiguredError, UpstreamTransportError

logger = logging.getLogger(__name__)

FIELD_MASK = "rating,userRatingCount,googleMapsUri"


class RatingPayload(BaseModel):
    """Normalized, client-facing rating data."""

    model_config = ConfigDict(frozen=True, strict=True)

    rating: float | None = None
    count: int | None = None
    url: str | None = None


def normalize_place(data: object) -> RatingPayload:
    """Map a Places API place object onto the client-facing payload.

    Missing or null fields become None. Anything that is not a JSON object
    is treated as an empty place.
    """
    if not isinstance(data, dict):
        data = {}
    return RatingPayload(
        rating=data.get("rating"),
        count=data.get("userRatingCount"),
        url=data.get("googleMapsUri"),
    )


class PlacesClient:
    """Fetches rating details for the configured place.

    Args:
        place_id: Google place identifier.
        api_key: Places API key.
        base_url: API root, e.g. https://places.googleapis.com/v1.
        timeout: Per-request timeout in seconds.
        transport: Optional httpx transport (tests pass httpx.MockTransport).
    """

    def __init__(
        self,
        place_id: str | None,
        api_key: str | None,
        base_url: str,
        timeout: float = 10,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.place_id = place_id
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.place_id and self.api_key)

    def place_url(self) -> str:
        return f"{self.base_url}/places/{quote(self.place_id or '', safe='')}"

    async def fetch_rating(self) -> RatingPayload:
        """Perform one GET against the Places API and normalize the result.

        Raises:
            PlacesNotConfiguredError: place id or API key is missing; no call is made.
            PlacesAPIError: upstream answered with a non-2xx status.
            UpstreamTransportError: connection, timeout or malformed response body.
        """
        if not self.is_configured:
            missing = [
                name
                for name, value in (("GOOGLE_PLACE_ID", self.place_id), ("GOOGLE_MAPS_API_KEY", self.api_key))
                if not value
            ]
            raise PlacesNotConfiguredError(missing)

        headers = {"X-Goog-Api-Key": self.api_key, "X-Goog-FieldMask": FIELD_MASK}

        logger.info("Fetching place rating from Places API")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.place_url(), headers=headers)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            # InvalidURL: bad base URL; UnicodeEncodeError: non-ASCII key in a header
            logger.exception("Places API request failed")
            raise UpstreamTransportError(f"Places API request failed: {e}") from e

        if not resp.is_success:
            body = _read_error_body(resp)
            logger.error("Places API error %s: %s", resp.status_code, body)
            raise PlacesAPIError(resp.status_code, body)

        try:
            return normalize_place(resp.json())
        except (ValueError, ValidationError) as e:
            logger.exception("Places API returned an unusable body")
            raise UpstreamTransportError(f"Malformed Places API response: {e}") from e


def _read_error_body(resp: httpx.Response) -> str:
    """Best-effort read of an error body for diagnostics."""
    try:
        return resp.text
    except (httpx.HTTPError, UnicodeDecodeError, LookupError):
        return ""
