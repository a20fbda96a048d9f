"""Get question use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from askboard.application.usecase.base import AuthorInfo, CamelModel
from askboard.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    VoteService,
)
from askboard.domain.value import QuestionId, UserId, VoteTargetType, VoteType


class CommentItem(CamelModel):
    """Comment under an answer."""

    id: str
    content: str
    author: AuthorInfo
    created_at: datetime


class AnswerItem(CamelModel):
    """Answer with its score, comments and the viewer's vote."""

    id: str
    content: str
    author: AuthorInfo
    is_accepted: bool
    created_at: datetime
    updated_at: datetime
    vote_score: int
    user_vote: VoteType | None
    comments: list[CommentItem]


class QuestionDetail(CamelModel):
    """Full question view."""

    id: str
    title: str
    description: str
    tags: list[str]
    author: AuthorInfo
    created_at: datetime
    updated_at: datetime
    vote_score: int
    user_vote: VoteType | None
    answer_count: int
    answers: list[AnswerItem]


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    viewer_id: str | None = None  # Current user ID (if authenticated)


class GetQuestionResponse(CamelModel):
    """Get question response."""

    question: QuestionDetail


class GetQuestionUseCase:
    """Use case for loading a question with answers, comments and votes."""

    def __init__(
        self,
        question_service: QuestionService,
        answer_service: AnswerService,
        comment_service: CommentService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            answer_service: Answer domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
        """
        self.question_service = question_service
        self.answer_service = answer_service
        self.comment_service = comment_service
        self.vote_service = vote_service

    async def execute(self, request: GetQuestionRequest) -> GetQuestionResponse:
        """Execute get question flow.

        Args:
            request: Question ID and optional viewer

        Returns:
            Question with answers (accepted first, then oldest first)

        Raises:
            NotFoundError: If question not found
        """
        question = await self.question_service.get_by_id(
            QuestionId(UUID(request.question_id))
        )
        viewer_id = UserId(UUID(request.viewer_id)) if request.viewer_id else None

        answers = await self.answer_service.list_for_question(question.id)
        answer_ids = [answer.id for answer in answers]
        answer_uuids = [UUID(str(aid)) for aid in answer_ids]

        comments = await self.comment_service.comments_by_answer(answer_ids)
        answer_scores = await self.vote_service.scores(
            VoteTargetType.ANSWER, answer_uuids
        )
        answer_votes = await self.vote_service.user_votes(
            viewer_id, VoteTargetType.ANSWER, answer_uuids
        )
        question_score = await self.vote_service.score(
            VoteTargetType.QUESTION, question.id
        )
        question_votes = await self.vote_service.user_votes(
            viewer_id, VoteTargetType.QUESTION, [question.id]
        )

        return GetQuestionResponse(
            question=QuestionDetail(
                id=str(question.id),
                title=question.title,
                description=question.description,
                tags=[tag.root for tag in question.tag_names],
                author=AuthorInfo(
                    id=str(question.author_id), name=question.author_name
                ),
                created_at=question.created_at,
                updated_at=question.updated_at,
                vote_score=question_score,
                user_vote=question_votes.get(question.id),
                answer_count=len(answers),
                answers=[
                    AnswerItem(
                        id=str(answer.id),
                        content=answer.content,
                        author=AuthorInfo(
                            id=str(answer.author_id), name=answer.author_name
                        ),
                        is_accepted=answer.is_accepted,
                        created_at=answer.created_at,
                        updated_at=answer.updated_at,
                        vote_score=answer_scores[answer.id],
                        user_vote=answer_votes.get(answer.id),
                        comments=[
                            CommentItem(
                                id=str(comment.id),
                                content=comment.content,
                                author=AuthorInfo(
                                    id=str(comment.author_id), name=comment.author_name
                                ),
                                created_at=comment.created_at,
                            )
                            for comment in comments[answer.id]
                        ],
                    )
                    for answer in answers
                ],
            )
        )
