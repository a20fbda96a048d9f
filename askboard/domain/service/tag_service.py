"""Tag domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel

from askboard.domain.model import Tag
from askboard.domain.repository import QuestionRepository, TagRepository
from askboard.domain.value import TagId, TagName

from .base import Service


class TagUsage(BaseModel):
    """Tag as shown in the tag listing."""

    name: str
    description: str | None
    usage_count: int


class TagService(Service):
    """Merges the tag catalog with tag names actually used on questions."""

    def __init__(
        self,
        tag_repository: TagRepository,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize tag service.

        Args:
            tag_repository: Tag catalog repository
            question_repository: Question repository (source of derived tags)
        """
        self.tag_repository = tag_repository
        self.question_repository = question_repository

    async def ensure_tags(self, names: list[TagName]) -> list[Tag]:
        """Register tag names that are not in the catalog yet.

        Args:
            names: Tag names used by a question

        Returns:
            Newly created catalog entries
        """
        with logfire.span("tag_service.ensure_tags", count=len(names)):
            existing = await self.tag_repository.find_by_names(names)
            known = {tag.name.root for tag in existing}

            created = []
            for name in names:
                if name.root in known:
                    continue
                tag = await self.tag_repository.save(
                    Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())
                )
                known.add(name.root)
                created.append(tag)

            if created:
                logfire.info(
                    "Tags added to catalog", names=[tag.name.root for tag in created]
                )
            return created

    async def list_tags(
        self, search: str | None = None, limit: int = 20
    ) -> list[TagUsage]:
        """List tags, catalog entries first, then tags only seen on questions.

        Args:
            search: Case-insensitive substring filter on the name
            limit: Cap applied to each source separately

        Returns:
            Catalog tags (ordered by name) followed by derived tags
            (most used first) whose name is not in the catalog result
        """
        with logfire.span("tag_service.list_tags", search=search, limit=limit):
            catalog = await self.tag_repository.search(search=search, limit=limit)
            usage = await self.question_repository.count_tag_usage(search=search)

            result = [
                TagUsage(
                    name=tag.name.root,
                    description=tag.description,
                    usage_count=usage.get(tag.name.root, 0),
                )
                for tag in catalog
            ]

            derived = sorted(usage.items(), key=lambda item: (-item[1], item[0]))[
                :limit
            ]
            catalog_names = {entry.name for entry in result}
            for name, count in derived:
                if name in catalog_names:
                    continue
                result.append(
                    TagUsage(
                        name=name,
                        description=f"Used {count} times",
                        usage_count=count,
                    )
                )

            logfire.info("Tags listed", catalog=len(catalog), total=len(result))
            return result
