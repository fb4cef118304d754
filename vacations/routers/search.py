from fastapi import APIRouter

from vacations.dependencies import SearchServiceDep
from vacations.routers.tools import TOOLS
from vacations.schemas.search import SearchRequest, SearchResponse
from vacations.schemas.tools import ToolDefinition

router = APIRouter()


@router.post("/search", response_model=SearchResponse, response_model_exclude_none=True)
async def search_listings(
    request: SearchRequest,
    service: SearchServiceDep,
) -> SearchResponse:
    listings = await service.search(request)
    return SearchResponse(total=len(listings), listings=listings)


@router.get("/tools", response_model=list[ToolDefinition])
async def list_tools() -> list[ToolDefinition]:
    return TOOLS
