"""In-memory question repository for testing."""

from collections import Counter
from typing import Optional, Sequence

from askboard.domain.model import Question
from askboard.domain.repository import QuestionRepository
from askboard.domain.value import QuestionId, QuestionSortOrder, TagName

from .store import InMemoryStore


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing."""

    def __init__(self, store: InMemoryStore) -> None:
        self.store = store

    def _filter(
        self, search: Optional[str], tags: Sequence[TagName]
    ) -> list[Question]:
        questions = list(self.store.questions.values())
        if search:
            needle = search.lower()
            questions = [
                q
                for q in questions
                if needle in q.title.lower() or needle in q.description.lower()
            ]
        if tags:
            wanted = {tag.root for tag in tags}
            questions = [
                q for q in questions if wanted & {tag.root for tag in q.tag_names}
            ]
        return questions

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self.store.questions.get(question_id)

    async def find_by_ids(
        self, question_ids: Sequence[QuestionId]
    ) -> dict[QuestionId, Question]:
        """Batch lookup of questions."""
        return {
            qid: self.store.questions[qid]
            for qid in question_ids
            if qid in self.store.questions
        }

    async def lock(self, question_id: QuestionId) -> Optional[Question]:
        """No locking needed in a single-threaded store."""
        return self.store.questions.get(question_id)

    async def find_all(
        self,
        search: Optional[str] = None,
        tags: Sequence[TagName] = (),
        sort: QuestionSortOrder = QuestionSortOrder.NEWEST,
        limit: int = 10,
        offset: int = 0,
    ) -> list[Question]:
        """Find questions with filtering and pagination."""
        questions = self._filter(search, tags)

        if sort == QuestionSortOrder.OLDEST:
            questions.sort(key=lambda q: q.created_at)
        elif sort == QuestionSortOrder.POPULAR:
            answer_counts = Counter(a.question_id for a in self.store.answers.values())
            questions.sort(
                key=lambda q: (answer_counts[q.id], q.created_at), reverse=True
            )
        else:
            questions.sort(key=lambda q: q.created_at, reverse=True)

        return questions[offset : offset + limit]

    async def count(
        self, search: Optional[str] = None, tags: Sequence[TagName] = ()
    ) -> int:
        """Count questions matching the filters."""
        return len(self._filter(search, tags))

    async def count_tag_usage(self, search: Optional[str] = None) -> dict[str, int]:
        """Count tag usage across all questions."""
        usage: Counter[str] = Counter()
        for question in self.store.questions.values():
            for tag in question.tag_names:
                if search and search.lower() not in tag.root.lower():
                    continue
                usage[tag.root] += 1
        return dict(usage)

    async def save(self, question: Question) -> Question:
        """Save a question."""
        self.store.questions[question.id] = question
        return question

    async def delete(self, question_id: QuestionId) -> bool:
        """Delete a question with cascades."""
        return self.store.delete_question(question_id)
