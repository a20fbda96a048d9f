"""Test harness for service, use case and API tests.

Everything runs against in-memory persistence unless a component is
unmocked. Settings are loaded from environment variables.
"""

import os
from pathlib import Path

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from askboard.interface.api.app import create_app
from askboard.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a fresh test container and yields
    a request-scoped container for service access. All resolutions inside
    one test share the same request scope, so they see each other's writes.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        unit_env = create_env_fixture()

        @pytest.mark.asyncio
        async def test_create_question(unit_env):
            service = await unit_env.get(QuestionService)
            question = await service.create_question(...)
            assert question.id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture():
    """Factory for a TestClient fixture backed by a fresh test container.

    Each request gets its own request scope; the in-memory store is shared
    for the lifetime of the fixture.
    """

    @pytest.fixture
    def _client():
        app = create_app(container=build_test_container())
        with TestClient(app) as client:
            yield client

    return _client


def skip_without_database(items, root: Path) -> None:
    """Skip collected tests under ``root`` unless ``DATABASE__URL`` is set.

    Collection hooks see every test of the session, so only items whose
    file lives below ``root`` are marked.
    """
    if os.environ.get("DATABASE__URL"):
        return
    skip = pytest.mark.skip(reason="DATABASE__URL not set")
    for item in items:
        if Path(item.path).is_relative_to(root):
            item.add_marker(skip)
