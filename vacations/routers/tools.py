import logging
from typing import Any

from pydantic import ValidationError

from vacations.exceptions.custom import AirbnbError, UnknownToolError
from vacations.exceptions.handlers import tool_error_result
from vacations.mappers.result_formatter import format_listings
from vacations.schemas.search import SearchRequest
from vacations.schemas.tools import ToolDefinition, ToolResult
from vacations.services.airbnb import AirbnbSearchService

logger = logging.getLogger(__name__)

SEARCH_AIRBNB = "search_airbnb"

SEARCH_AIRBNB_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "location": {
            "type": "string",
            "description": "Location to search (city, region, or address)",
        },
        "checkIn": {
            "type": "string",
            "description": "Check-in date (YYYY-MM-DD format)",
        },
        "checkOut": {
            "type": "string",
            "description": "Check-out date (YYYY-MM-DD format)",
        },
        "adults": {
            "type": "number",
            "description": "Number of adults (default: 1)",
            "default": 1,
        },
        "children": {
            "type": "number",
            "description": "Number of children (default: 0)",
            "default": 0,
        },
        "infants": {
            "type": "number",
            "description": "Number of infants (default: 0)",
            "default": 0,
        },
        "pets": {
            "type": "number",
            "description": "Number of pets (default: 0)",
            "default": 0,
        },
        "minPrice": {
            "type": "number",
            "description": "Minimum price per night in USD",
        },
        "maxPrice": {
            "type": "number",
            "description": "Maximum price per night in USD",
        },
        "page": {
            "type": "number",
            "description": "Page number for pagination (default: 1)",
            "default": 1,
        },
    },
    "required": ["location"],
}

TOOLS = [
    ToolDefinition(
        name=SEARCH_AIRBNB,
        description=(
            "Search for Airbnb vacation rentals with specific location, dates, "
            "and constraints. Returns listing URLs and details."
        ),
        input_schema=SEARCH_AIRBNB_SCHEMA,
    ),
]


async def call_tool(
    name: str,
    arguments: dict[str, Any] | None,
    service: AirbnbSearchService,
) -> ToolResult:
    """Dispatch a tool call. Unknown tool names raise UnknownToolError."""
    if name != SEARCH_AIRBNB:
        raise UnknownToolError(name)

    try:
        request = SearchRequest.model_validate(arguments or {})
        listings = await service.search(request)
    except (AirbnbError, ValidationError) as exc:
        return tool_error_result(exc)

    if not listings:
        logger.info("No listings found for %s", request.location)
    return ToolResult(text=format_listings(listings))
