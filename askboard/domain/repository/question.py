"""Question repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from askboard.domain.model.question import Question
from askboard.domain.value import QuestionId, QuestionSortOrder, TagName


class QuestionRepository(ABC):
    """Repository for Question aggregate."""

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Batch lookup of questions.

        Args:
            question_ids: IDs to load

        Returns:
            Mapping of found IDs to questions
        """
        pass

    @abstractmethod
    async def lock(self, question_id: QuestionId) -> Optional[Question]:
        """Load a question and hold a row lock until the transaction ends.

        Serializes concurrent writers that must see a consistent set of
        answers for the question (acceptance toggling).

        Args:
            question_id: The question to lock

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Sequence[TagName] = (),
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination.

        Args:
            search: Case-insensitive substring of title or description
            tags: Keep questions whose tag list intersects these names
            sort: Sort order (popular = most answers first)
            limit: Page size
            offset: Number of questions to skip

        Returns:
            Questions for the requested page
        """
        pass

    @abstractmethod
    async def count(
        self, search: Optional[str] = None, tags: Sequence[TagName] = ()
    ) -> int:
        """Count questions matching the same filters as find_all."""
        pass

    @abstractmethod
    async def count_tag_usage(self, search: Optional[str] = None) -> dict[str, int]:
        """Count how many questions use each tag name.

        Args:
            search: Only count tag names containing this (case-insensitive)

        Returns:
            Mapping of tag name to number of questions using it
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        Args:
            question: The question to save

        Returns:
            The saved question
        """
        pass

    @abstractmethod
    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question with its answers, comments and votes.

        Args:
            question_id: The question to delete

        Returns:
            True if a question was deleted, False if none existed
        """
        pass
