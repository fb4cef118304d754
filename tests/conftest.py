import httpx
import pytest
from httpx import ASGITransport


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("AIRBNB_BASE_URL", "https://www.airbnb.com")
    monkeypatch.setenv("REQUEST_TIMEOUT", "30")


@pytest.fixture
async def client(mock_env):
    from vacations.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
