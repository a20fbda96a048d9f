"""Domain layer DI providers."""

from dishka import Scope, provide

from askboard.config import AuthSettings
from askboard.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from askboard.domain.service import (
    AnswerService,
    CommentService,
    JWTService,
    NotificationService,
    QuestionService,
    TagService,
    UserService,
    VoteService,
)
from askboard.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> UserService:
        """Provide user domain service."""
        return UserService(
            user_repository=user_repository, auth_settings=auth_settings
        )

    @provide
    def get_tag_service(
        self, tag_repository: TagRepository, question_repository: QuestionRepository
    ) -> TagService:
        """Provide tag domain service."""
        return TagService(
            tag_repository=tag_repository, question_repository=question_repository
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)

    @provide
    def get_question_service(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> QuestionService:
        """Provide question domain service."""
        return QuestionService(
            question_repository=question_repository, tag_service=tag_service
        )

    @provide
    def get_answer_service(
        self,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> AnswerService:
        """Provide answer domain service."""
        return AnswerService(
            answer_repository=answer_repository,
            question_repository=question_repository,
            notification_service=notification_service,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        answer_repository: AnswerRepository,
        question_repository: QuestionRepository,
        notification_service: NotificationService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            answer_repository=answer_repository,
            question_repository=question_repository,
            notification_service=notification_service,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            question_repository=question_repository,
            answer_repository=answer_repository,
        )
