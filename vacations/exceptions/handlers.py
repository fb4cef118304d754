import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from vacations.mappers.result_formatter import format_error
from vacations.schemas.tools import ToolResult

from .custom import AirbnbError

logger = logging.getLogger(__name__)


async def airbnb_error_handler(_request: Request, exc: AirbnbError) -> JSONResponse:
    logger.error("Airbnb error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": format_error(exc.message)},
    )


def tool_error_result(exc: AirbnbError | ValidationError) -> ToolResult:
    if isinstance(exc, AirbnbError):
        logger.error("Airbnb error: %s (status=%s)", exc.message, exc.status_code)
        message = exc.message
    else:
        message = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        logger.warning("Invalid search_airbnb arguments: %s", message)
    return ToolResult(text=format_error(message), is_error=True)
