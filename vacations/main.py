from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from vacations.config import Settings, configure_logging
from vacations.exceptions.custom import AirbnbError
from vacations.exceptions.handlers import airbnb_error_handler
from vacations.routers.search import router as search_router
from vacations.services.airbnb import AirbnbSearchService


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()
    configure_logging(settings)

    async with httpx.AsyncClient(timeout=settings.request_timeout) as client:
        app.state.search_service = AirbnbSearchService(
            client,
            base_url=settings.airbnb_base_url,
            timeout=settings.request_timeout,
        )
        yield


app = FastAPI(title="MCP Vacations", lifespan=lifespan)

app.add_exception_handler(AirbnbError, airbnb_error_handler)

app.include_router(search_router)
