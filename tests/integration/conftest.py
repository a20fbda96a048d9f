"""Fixtures for tests against a real PostgreSQL database.

Run ``scripts/run_migrations.py`` first and export ``DATABASE__URL``.
"""

from pathlib import Path

import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tests.harness import create_env_fixture, skip_without_database

integration_env = create_env_fixture(unmock={"persistence"})


def pytest_collection_modifyitems(config, items):
    skip_without_database(items, Path(__file__).parent)


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Truncate all tables before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text(
            "TRUNCATE TABLE notifications, votes, comments, answers, questions, "
            "tags, users CASCADE"
        )
    )
    await session.commit()
    yield
