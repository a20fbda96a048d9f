"""Answer repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pydantic import BaseModel

from askboard.domain.model.answer import Answer
from askboard.domain.value import AnswerId, QuestionId


class AnswerStats(BaseModel):
    """Per-question answer aggregate used by listings."""

    answer_count: int = 0
    has_accepted_answer: bool = False


class AnswerRepository(ABC):
    """Repository for Answer entity."""

    @abstractmethod
    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID.

        Args:
            answer_id: The answer's unique identifier

        Returns:
            The answer if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Find all answers to a question.

        Accepted answer first, then oldest first.

        Args:
            question_id: The question's ID

        Returns:
            Answers in display order
        """
        pass

    @abstractmethod
    async def stats_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, AnswerStats]:
        """Answer count and accepted flag for several questions at once.

        Args:
            question_ids: Questions to aggregate

        Returns:
            Mapping of question ID to stats (questions without answers may be absent)
        """
        pass

    @abstractmethod
    async def save(self, answer: Answer) -> Answer:
        """Save an answer (create or update).

        Args:
            answer: The answer to save

        Returns:
            The saved answer
        """
        pass

    @abstractmethod
    async def clear_accepted(
        self, question_id: QuestionId, exclude: Optional[AnswerId] = None
    ) -> int:
        """Unaccept every accepted answer of a question.

        Args:
            question_id: The question whose answers to clear
            exclude: Answer to leave untouched

        Returns:
            Number of answers changed
        """
        pass

    @abstractmethod
    async def set_accepted(
        self, answer_id: AnswerId, is_accepted: bool
    ) -> Optional[Answer]:
        """Set the accepted flag on one answer.

        Args:
            answer_id: The answer to update
            is_accepted: New flag value

        Returns:
            The updated answer, None if it does not exist
        """
        pass
