"""Shared test fixtures."""
import pytest
from httpx import ASGITransport, AsyncClient

from bookstore.config import Settings
from bookstore.main import create_app
from bookstore.store import BookStore


@pytest.fixture
def store() -> BookStore:
    """Fresh, empty store."""
    return BookStore()


@pytest.fixture
def settings() -> Settings:
    return Settings(app_name="Book Store Test", debug=True, log_level="WARNING")


@pytest.fixture
def app(store: BookStore, settings: Settings):
    return create_app(store=store, settings=settings)


@pytest.fixture
async def client(app):
    """Create test client."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
