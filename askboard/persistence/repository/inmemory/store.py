"""Shared in-memory tables for the in-memory repositories.

Every in-memory repository of one container reads and writes the same
store, so deletes can cascade across entities the way foreign keys do
in PostgreSQL.
"""

from askboard.domain.model import (
    Answer,
    Comment,
    Notification,
    Question,
    Tag,
    User,
    Vote,
)
from askboard.domain.value import (
    AnswerId,
    CommentId,
    NotificationId,
    QuestionId,
    TagId,
    UserId,
    VoteId,
    VoteTargetType,
)


class InMemoryStore:
    """Dict-backed tables keyed by entity ID."""

    def __init__(self) -> None:
        self.users: dict[UserId, User] = {}
        self.questions: dict[QuestionId, Question] = {}
        self.answers: dict[AnswerId, Answer] = {}
        self.comments: dict[CommentId, Comment] = {}
        self.votes: dict[VoteId, Vote] = {}
        self.notifications: dict[NotificationId, Notification] = {}
        self.tags: dict[TagId, Tag] = {}

    def delete_question(self, question_id: QuestionId) -> bool:
        """Remove a question with its answers, comments, votes and notifications."""
        if self.questions.pop(question_id, None) is None:
            return False

        answer_ids = {
            aid for aid, a in self.answers.items() if a.question_id == question_id
        }
        for answer_id in answer_ids:
            self.delete_answer(answer_id)

        self._delete_votes(VoteTargetType.QUESTION, {question_id})
        self.notifications = {
            nid: n
            for nid, n in self.notifications.items()
            if n.related_question_id != question_id
        }
        return True

    def delete_answer(self, answer_id: AnswerId) -> None:
        """Remove an answer with its comments and votes."""
        self.answers.pop(answer_id, None)
        self.comments = {
            cid: c for cid, c in self.comments.items() if c.answer_id != answer_id
        }
        self._delete_votes(VoteTargetType.ANSWER, {answer_id})

    def delete_user(self, user_id: UserId) -> bool:
        """Remove a user and everything that references them."""
        if self.users.pop(user_id, None) is None:
            return False

        for question_id in [
            qid for qid, q in self.questions.items() if q.author_id == user_id
        ]:
            self.delete_question(question_id)
        for answer_id in [
            aid for aid, a in self.answers.items() if a.author_id == user_id
        ]:
            self.delete_answer(answer_id)

        self.comments = {
            cid: c for cid, c in self.comments.items() if c.author_id != user_id
        }
        self.votes = {vid: v for vid, v in self.votes.items() if v.user_id != user_id}
        self.notifications = {
            nid: n
            for nid, n in self.notifications.items()
            if n.user_id != user_id and n.related_user_id != user_id
        }
        return True

    def _delete_votes(self, target_type: VoteTargetType, target_ids: set) -> None:
        self.votes = {
            vid: v
            for vid, v in self.votes.items()
            if not (v.target_type == target_type and v.target_id in target_ids)
        }
