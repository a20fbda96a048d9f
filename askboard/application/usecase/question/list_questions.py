"""List questions use case."""

import math
from datetime import datetime
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from askboard.application.usecase.base import AuthorInfo, CamelModel
from askboard.domain.service import AnswerService, QuestionService, VoteService
from askboard.domain.value import QuestionSortOrder, VoteTargetType, parse_tag_list


class QuestionListItem(CamelModel):
    """Question list item in response."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorInfo
    created_at: datetime
    updated_at: datetime
    answer_count: int
    vote_score: int
    has_accepted_answer: bool


class Pagination(CamelModel):
    """Page metadata."""

    total: int
    page: int
    limit: int
    total_pages: int


class ListQuestionsRequest(BaseModel):
    """List questions request."""

    search: str | None = None
    tags: str | None = None  # Comma-separated tag names
    sort: QuestionSortOrder = QuestionSortOrder.NEWEST
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1, le=100)


class ListQuestionsResponse(CamelModel):
    """List questions response."""

    questions: list[QuestionListItem]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        vote_service: VoteService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service (counts, accepted flag)
            vote_service: Vote domain service (scores)
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.vote_service = vote_service

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        Args:
            request: Filters, sort order and page

        Returns:
            Questions on the page with pagination metadata
        """
        with logfire.span(
            "list_questions.execute",
            search=request.search,
            tags=request.tags,
            sort=request.sort.value,
            page=request.page,
            limit=request.limit,
        ):
            questions, total = await self.question_service.list_questions(
                search=request.search or None,
                tags=parse_tag_list(request.tags),
                sort=request.sort,
                limit=request.limit,
                offset=(request.page - 1) * request.limit,
            )

            # Batch queries to avoid N+1
            question_ids = [question.id for question in questions]
            stats = await self.answer_service.stats_for_questions(question_ids)
            scores = await self.vote_service.scores(
                VoteTargetType.QUESTION, [UUID(str(qid)) for qid in question_ids]
            )

            items = [
                QuestionListItem(
                    id=str(question.id),
                    title=question.title,
                    description=question.description,
                    tags=[tag.root for tag in question.tag_names],
                    author=AuthorInfo(
                        id=str(question.author_id), name=question.author_name
                    ),
                    created_at=question.created_at,
                    updated_at=question.updated_at,
                    answer_count=stats[question.id].answer_count,
                    vote_score=scores[question.id],
                    has_accepted_answer=stats[question.id].has_accepted_answer,
                )
                for question in questions
            ]

            return ListQuestionsResponse(
                questions=items,
                pagination=Pagination(
                    total=total,
                    page=request.page,
                    limit=request.limit,
                    total_pages=math.ceil(total / request.limit),
                ),
            )
