"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from askboard.domain.model.comment import Comment
from askboard.domain.value import AnswerId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity."""

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        pass

    @abstractmethod
    async def find_by_answers(self, answer_ids: Sequence[AnswerId]) -> list[Comment]:
        """Find comments on several answers in one query, oldest first.

        Args:
            answer_ids: Answers whose comments to load

        Returns:
            Comments across all given answers
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass
