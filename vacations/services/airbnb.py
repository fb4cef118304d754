import logging
from urllib.parse import quote, urlencode

import httpx

from vacations.exceptions.custom import AirbnbError
from vacations.mappers.listing_extractor import BASE_URL, extract_listings
from vacations.schemas.search import Listing, SearchRequest

logger = logging.getLogger(__name__)

ITEMS_PER_PAGE = 20
REQUEST_TIMEOUT = 30.0

HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
}

# Characters encodeURIComponent leaves alone, beyond quote()'s defaults
_PATH_SAFE = "!~*'()"


def _format_number(value: int | float) -> str:
    """Render integral floats without a fractional part (50.0 -> "50")."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def build_search_url(request: SearchRequest, base_url: str = BASE_URL) -> str:
    params: list[tuple[str, str]] = [("query", request.location)]

    if request.check_in:
        params.append(("checkin", request.check_in))
    if request.check_out:
        params.append(("checkout", request.check_out))

    # Airbnb has no separate child count in the search URL
    total_guests = request.adults + request.children
    if total_guests > 0:
        params.append(("adults", str(total_guests)))
    if request.infants > 0:
        params.append(("infants", str(request.infants)))
    if request.pets > 0:
        params.append(("pets", str(request.pets)))

    if request.min_price is not None:
        params.append(("price_min", _format_number(request.min_price)))
    if request.max_price is not None:
        params.append(("price_max", _format_number(request.max_price)))

    offset = (request.page - 1) * ITEMS_PER_PAGE
    if offset > 0:
        params.append(("items_offset", str(offset)))

    location = quote(request.location, safe=_PATH_SAFE)
    return f"{base_url.rstrip('/')}/s/{location}/homes?{urlencode(params)}"


class AirbnbSearchService:
    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str = BASE_URL,
        timeout: float = REQUEST_TIMEOUT,
    ):
        self._client = client
        self._base_url = base_url
        self._timeout = timeout

    async def search(self, request: SearchRequest) -> list[Listing]:
        """Fetch one page of search results and extract its listings."""
        html = await self.fetch_search_page(request)
        listings = extract_listings(html, base_url=self._base_url)
        logger.info("Extracted %d listings for %s", len(listings), request.location)
        return listings

    async def fetch_search_page(self, request: SearchRequest) -> str:
        url = build_search_url(request, base_url=self._base_url)
        logger.info("Fetching Airbnb search page: %s", url)

        try:
            resp = await self._client.get(
                url,
                headers=HEADERS,
                timeout=self._timeout,
                follow_redirects=False,
            )
        except httpx.TimeoutException as exc:
            raise AirbnbError("Request timeout") from exc
        except httpx.HTTPError as exc:
            raise AirbnbError(str(exc) or type(exc).__name__) from exc

        if resp.status_code != 200:
            raise AirbnbError(
                f"HTTP {resp.status_code}: {resp.reason_phrase}",
                status_code=resp.status_code,
            )

        return resp.text
