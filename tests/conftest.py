from typing import AsyncGenerator, Iterable

import pytest
import pytest_asyncio
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from querypage.core.config import get_settings
from querypage.core.pagination import paginate_with_prefix
from querypage.deps import PageRequest, page_request
from querypage.main import create_app
from querypage.sources.memory import MemorySource


class RecordingSource(MemorySource):
    """MemorySource that remembers every call made against it."""

    def __init__(self, items: Iterable) -> None:
        super().__init__(items)
        self.calls: list[tuple] = []

    async def count(self) -> int:
        self.calls.append(("count",))
        return await super().count()

    async def fetch(self, skip: int, take: int) -> list:
        self.calls.append(("fetch", skip, take))
        return await super().fetch(skip, take)


@pytest.fixture
def recording_source():
    return RecordingSource


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def build_app() -> FastAPI:
    app = create_app()

    @app.get("/letters")
    async def letters(req: PageRequest = Depends(page_request)):
        result = await paginate_with_prefix(MemorySource("DEFGH"), ["A", "B", "C"], req.page, req.page_size)
        return result.model_dump()

    return app


@pytest_asyncio.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=build_app()),
        base_url="http://test",
    ) as ac:
        yield ac
