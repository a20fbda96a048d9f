"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from askboard.domain.model import Comment
from askboard.domain.repository import CommentRepository
from askboard.domain.value import AnswerId, CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self.store.comments.get(comment_id)

    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Comments on several answers, oldest first."""
        wanted = set(answer_ids)
        comments = [c for c in self.store.comments.values() if c.answer_id in wanted]
        return sorted(comments, key=lambda c: c.created_at)

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self.store.comments[comment.id] = comment
        return comment
