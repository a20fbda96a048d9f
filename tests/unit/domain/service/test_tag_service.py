"""Unit tests for TagService."""

from datetime import datetime
from uuid import uuid4

import pytest

from askboard.domain.model import Tag
from askboard.domain.repository import QuestionRepository, TagRepository
from askboard.domain.service import TagService
from askboard.domain.value import TagId, TagName
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


def _tag(name: str, description: str | None = None) -> Tag:
    return Tag(
        id=TagId(uuid4()),
        name=TagName(name),
        description=description,
        created_at=datetime.now(),
    )


class TestListTags:
    """Tests for list_tags method."""

    @pytest.mark.asyncio
    async def test_catalog_first_then_derived_by_usage(self, unit_env):
        """Catalog entries come first; tags only seen on questions follow."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        question_repo = await unit_env.get(QuestionRepository)
        author = make_user()
        await tag_repo.save(_tag("react", "Questions about React library"))
        await tag_repo.save(_tag("css"))
        await question_repo.save(make_question(author, tags=["react", "nextjs"]))
        await question_repo.save(
            make_question(author, tags=["react", "nextjs", "newtag"], minutes=1)
        )

        # Act
        tags = await tag_service.list_tags()

        # Assert
        assert [(t.name, t.usage_count) for t in tags] == [
            ("css", 0),
            ("react", 2),
            ("nextjs", 2),
            ("newtag", 1),
        ]
        assert tags[0].description is None
        assert tags[1].description == "Questions about React library"
        assert tags[2].description == "Used 2 times"

    @pytest.mark.asyncio
    async def test_search_filters_both_sources(self, unit_env):
        """Search applies to catalog and derived tags alike."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        question_repo = await unit_env.get(QuestionRepository)
        await tag_repo.save(_tag("react"))
        await tag_repo.save(_tag("css"))
        await question_repo.save(make_question(make_user(), tags=["preact", "css"]))

        # Act
        tags = await tag_service.list_tags(search="REACT")

        # Assert
        assert [t.name for t in tags] == ["react", "preact"]

    @pytest.mark.asyncio
    async def test_limit_applies_to_each_source(self, unit_env):
        """The limit caps catalog and derived entries separately."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        question_repo = await unit_env.get(QuestionRepository)
        for name in ("alpha", "beta", "gamma"):
            await tag_repo.save(_tag(name))
        await question_repo.save(make_question(make_user(), tags=["delta", "omega"]))

        # Act
        tags = await tag_service.list_tags(limit=1)

        # Assert
        assert [t.name for t in tags] == ["alpha", "delta"]


class TestEnsureTags:
    """Tests for ensure_tags method."""

    @pytest.mark.asyncio
    async def test_only_missing_names_are_added(self, unit_env):
        """Known tags keep their entry and description."""
        # Arrange
        tag_service = await unit_env.get(TagService)
        tag_repo = await unit_env.get(TagRepository)
        await tag_repo.save(_tag("react", "Questions about React library"))

        # Act
        created = await tag_service.ensure_tags([TagName("react"), TagName("vite")])

        # Assert
        assert [t.name.root for t in created] == ["vite"]
        stored = await tag_repo.find_by_names([TagName("react"), TagName("vite")])
        descriptions = {t.name.root: t.description for t in stored}
        assert descriptions == {
            "react": "Questions about React library",
            "vite": None,
        }
