import logging
import sys
from typing import TextIO

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    log_level: str = "INFO"
    airbnb_base_url: str = "https://www.airbnb.com"
    request_timeout: float = 30.0


def configure_logging(settings: Settings, stream: TextIO = sys.stdout) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=stream,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
