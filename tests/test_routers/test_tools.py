import httpx
import pytest
import respx
from httpx import Response

from vacations.exceptions.custom import UnknownToolError
from vacations.mappers.result_formatter import NO_RESULTS_MESSAGE
from vacations.routers.tools import SEARCH_AIRBNB, TOOLS, call_tool
from vacations.services.airbnb import AirbnbSearchService

LISTINGS_HTML = """
<html><body>
  <a href="/rooms/1?s=1"><div data-testid="listing-card-title">Beach House</div>
    <div data-testid="price-availability-row">$200 night</div>
    <span aria-label="4.8 average rating">4.8</span></a>
  <a href="/rooms/1?s=2">Beach House duplicate</a>
  <a href="/rooms/2">Cozy Cabin
More info</a>
</body></html>
"""


@pytest.fixture
def client():
    return httpx.AsyncClient()


@pytest.fixture
def service(client):
    return AirbnbSearchService(client)


def test_single_tool_declared():
    assert [tool.name for tool in TOOLS] == [SEARCH_AIRBNB]
    schema = TOOLS[0].input_schema
    assert schema["required"] == ["location"]
    assert set(schema["properties"]) == {
        "location", "checkIn", "checkOut", "adults", "children",
        "infants", "pets", "minPrice", "maxPrice", "page",
    }


@respx.mock
async def test_call_tool_formats_listings(service):
    respx.get(host="www.airbnb.com").mock(return_value=Response(200, html=LISTINGS_HTML))

    result = await call_tool(SEARCH_AIRBNB, {"location": "Malibu", "adults": 2}, service)

    assert result.is_error is False
    assert result.text == (
        "Found 2 listings:\n\n"
        "1. Beach House\n"
        "   URL: https://www.airbnb.com/rooms/1\n"
        "   Price: $200 night\n"
        "   Rating: 4.8 average rating\n"
        "\n"
        "2. Cozy Cabin\n"
        "   URL: https://www.airbnb.com/rooms/2\n"
        "   Price: N/A\n"
        "   Rating: N/A\n"
    )


@respx.mock
async def test_call_tool_camel_case_arguments(service):
    route = respx.get(host="www.airbnb.com").mock(return_value=Response(200, html=LISTINGS_HTML))

    await call_tool(
        SEARCH_AIRBNB,
        {"location": "Malibu", "checkIn": "2025-08-01", "minPrice": 50, "page": 3},
        service,
    )

    params = route.calls.last.request.url.params
    assert params["checkin"] == "2025-08-01"
    assert params["price_min"] == "50"
    assert params["items_offset"] == "40"
    assert "price_max" not in params


@respx.mock
async def test_call_tool_no_listings(service):
    respx.get(host="www.airbnb.com").mock(
        return_value=Response(200, html="<html><body><p>Nothing here</p></body></html>")
    )

    result = await call_tool(SEARCH_AIRBNB, {"location": "Nowhere"}, service)

    assert result.is_error is False
    assert result.text == NO_RESULTS_MESSAGE


@respx.mock
async def test_call_tool_http_error(service):
    respx.get(host="www.airbnb.com").mock(return_value=Response(503, text="down"))

    result = await call_tool(SEARCH_AIRBNB, {"location": "Malibu"}, service)

    assert result.is_error is True
    assert result.text == "Error searching Airbnb: HTTP 503: Service Unavailable"
    assert "URL:" not in result.text


@respx.mock
async def test_call_tool_timeout(service):
    respx.get(host="www.airbnb.com").mock(side_effect=httpx.ConnectTimeout("slow"))

    result = await call_tool(SEARCH_AIRBNB, {"location": "Malibu"}, service)

    assert result.is_error is True
    assert result.text == "Error searching Airbnb: Request timeout"


@respx.mock
async def test_call_tool_missing_location(service):
    route = respx.get(host="www.airbnb.com")

    result = await call_tool(SEARCH_AIRBNB, {}, service)

    assert result.is_error is True
    assert result.text.startswith("Error searching Airbnb: location")
    assert not route.called


async def test_call_tool_unknown_name_raises(service):
    with pytest.raises(UnknownToolError, match="Unknown tool: book_airbnb"):
        await call_tool("book_airbnb", {"location": "Malibu"}, service)
