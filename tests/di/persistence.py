"""Mock persistence providers for testing."""

from dishka import Scope, provide

from askboard.domain.repository import (
    AnswerRepository,
    CommentRepository,
    NotificationRepository,
    QuestionRepository,
    TagRepository,
    UserRepository,
    VoteRepository,
)
from askboard.persistence.repository.inmemory import (
    InMemoryAnswerRepository,
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryQuestionRepository,
    InMemoryStore,
    InMemoryTagRepository,
    InMemoryUserRepository,
    InMemoryVoteRepository,
)
from askboard.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives in APP scope, so data written in one request is visible
    to the next request served by the same container. Each container (and
    so each test) starts from an empty store.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_question_repository(self, store: InMemoryStore) -> QuestionRepository:
        """Provide in-memory question repository."""
        return InMemoryQuestionRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_answer_repository(self, store: InMemoryStore) -> AnswerRepository:
        """Provide in-memory answer repository."""
        return InMemoryAnswerRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, store: InMemoryStore) -> VoteRepository:
        """Provide in-memory vote repository."""
        return InMemoryVoteRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, store: InMemoryStore) -> TagRepository:
        """Provide in-memory tag repository."""
        return InMemoryTagRepository(store)
