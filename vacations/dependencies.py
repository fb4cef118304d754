from typing import Annotated

from fastapi import Depends, Request

from vacations.services.airbnb import AirbnbSearchService


def get_search_service(request: Request) -> AirbnbSearchService:
    return request.app.state.search_service


SearchServiceDep = Annotated[AirbnbSearchService, Depends(get_search_service)]
