"""List tags use case."""

import logfire
from pydantic import BaseModel, Field

from askboard.application.usecase.base import CamelModel
from askboard.domain.service import TagService


class TagItem(CamelModel):
    """Tag item in response."""

    name: str
    description: str | None
    usage_count: int


class ListTagsRequest(BaseModel):
    """List tags request."""

    search: str | None = None
    limit: int = Field(default=20, ge=1, le=100)


class ListTagsResponse(CamelModel):
    """List tags response."""

    tags: list[TagItem]


class ListTagsUseCase:
    """Use case for listing catalog and in-use tags."""

    def __init__(self, tag_service: TagService) -> None:
        """Initialize list tags use case.

        Args:
            tag_service: Tag domain service
        """
        self.tag_service = tag_service

    async def execute(self, request: ListTagsRequest) -> ListTagsResponse:
        """Execute list tags flow.

        Args:
            request: List tags request

        Returns:
            Catalog tags first, then tags only seen on questions
        """
        with logfire.span(
            "list_tags.execute", search=request.search, limit=request.limit
        ):
            tags = await self.tag_service.list_tags(
                search=request.search or None, limit=request.limit
            )
            return ListTagsResponse(
                tags=[
                    TagItem(
                        name=tag.name,
                        description=tag.description,
                        usage_count=tag.usage_count,
                    )
                    for tag in tags
                ]
            )
