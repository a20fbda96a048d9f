"""Tag routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from askboard.application.usecase.tag import (
    ListTagsRequest,
    ListTagsResponse,
    ListTagsUseCase,
)

router = APIRouter(
    prefix="/tags",
    tags=["tags"],
    route_class=DishkaRoute,
)


@router.get(
    "",
    response_model=ListTagsResponse,
    summary="List tags",
    description="Catalog tags first, then tags only used on questions.",
)
async def list_tags(
    use_case: FromDishka[ListTagsUseCase],
    search: str | None = None,
    limit: int = Query(default=20, ge=1, le=100),
) -> ListTagsResponse:
    """List tags.

    Args:
        use_case: List tags use case (injected)
        search: Case-insensitive substring of the tag name
        limit: Maximum number of tags from each source (1-100)

    Returns:
        List of tags

    Example:
        GET /tags?search=re&limit=10
    """
    with logfire.span("api.list_tags", search=search, limit=limit):
        request = ListTagsRequest(search=search, limit=limit)
        return await use_case.execute(request)
