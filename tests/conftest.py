"""Root conftest: shared fixtures for all tests.

Provides:
- A scripted Yuque accessor with a small account (one personal and one
  group repository, each with an outline)
- A document service bound to that accessor
- An API client with the document service dependency overridden
"""

from __future__ import annotations

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from clipper.services.yuque import YuqueDocumentService
from tests.helpers.yuque_fakes import (
    TOKEN,
    FakeAccessor,
    repo_json,
    toc_json,
    toc_url,
    user_json,
)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def yuque_accessor() -> FakeAccessor:
    """Scripted accessor for a user with one personal and one group repository."""
    return (
        FakeAccessor()
        .on("GET", "user", user_json())
        .on("GET", "users/1001/repos", [repo_json(42, "Handbook", "octo/handbook")])
        .on("GET", "users/octo/groups", [{"id": 9, "name": "Team", "login": "team"}])
        .on("GET", "groups/9/repos", [repo_json(7, "Wiki", "team/wiki")])
        .on(
            "GET",
            toc_url(42),
            {"toc": [toc_json("a", "Intro"), toc_json("b", "Setup", "a")]},
        )
        .on("GET", toc_url(7), {"toc": []})
        .on("POST", "repos/42/docs", {"id": 555, "slug": "hello"})
        .on("PUT", "repos/42/toc", [])
    )


@pytest.fixture
def document_service(yuque_accessor: FakeAccessor) -> YuqueDocumentService:
    return YuqueDocumentService(TOKEN, request=yuque_accessor)


@pytest.fixture
async def api_client(
    document_service: YuqueDocumentService,
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the document service overridden."""
    from clipper.api.deps import get_document_service
    from clipper.main import app

    app.dependency_overrides[get_document_service] = lambda: document_service
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers={"X-Auth-Token": TOKEN},
    ) as client:
        yield client
    app.dependency_overrides.clear()
