"""In-memory answer repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from askboard.domain.model import Answer
from askboard.domain.repository import AnswerRepository, AnswerStats
from askboard.domain.value import AnswerId, QuestionId

from .store import InMemoryStore


class InMemoryAnswerRepository(AnswerRepository):
    """In-memory implementation of AnswerRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    async def find_by_id(self, answer_id: AnswerId) -> Optional[Answer]:
        """Find an answer by ID."""
        return self.store.answers.get(answer_id)

    async def find_by_question(self, question_id: QuestionId) -> list[Answer]:
        """Answers to a question, accepted first then oldest first."""
        answers = [
            a for a in self.store.answers.values() if a.question_id == question_id
        ]
        return sorted(answers, key=lambda a: (not a.is_accepted, a.created_at))

    async def stats_for_questions(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, AnswerStats]:
        """Answer count and accepted flag per question."""
        wanted = set(question_ids)
        stats: dict[QuestionId, AnswerStats] = {}
        for answer in self.store.answers.values():
            if answer.question_id not in wanted:
                continue
            current = stats.get(answer.question_id, AnswerStats())
            stats[answer.question_id] = AnswerStats(
                answer_count=current.answer_count + 1,
                has_accepted_answer=current.has_accepted_answer or answer.is_accepted,
            )
        return stats

    async def save(self, answer: Answer) -> Answer:
        """Save an answer."""
        self.store.answers[answer.id] = answer
        return answer

    async def clear_accepted(
        self, question_id: QuestionId, exclude: Optional[AnswerId] = None
    ) -> int:
        """Unaccept a question's accepted answers."""
        cleared = 0
        for answer in list(self.store.answers.values()):
            if (
                answer.question_id == question_id
                and answer.is_accepted
                and answer.id != exclude
            ):
                self.store.answers[answer.id] = answer.model_copy(
                    update={"is_accepted": False, "updated_at": datetime.now()}
                )
                cleared += 1
        return cleared

    async def set_accepted(
        self, answer_id: AnswerId, is_accepted: bool
    ) -> Optional[Answer]:
        """Set the accepted flag on one answer."""
        answer = self.store.answers.get(answer_id)
        if answer is None:
            return None
        updated = answer.model_copy(
            update={"is_accepted": is_accepted, "updated_at": datetime.now()}
        )
        self.store.answers[answer_id] = updated
        return updated
