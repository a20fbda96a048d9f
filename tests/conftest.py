"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta
from uuid import uuid4

from askboard.domain.model import Answer, Question, User
from askboard.domain.value import (
    AnswerId,
    Email,
    QuestionId,
    TagName,
    UserId,
    UserRole,
)

# Cheapest bcrypt cost keeps registration fast in tests
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_user(
    name: str = "Test User",
    email: str | None = None,
    role: UserRole = UserRole.USER,
) -> User:
    """Build a user without going through registration."""
    user_id = UserId(uuid4())
    return User(
        id=user_id,
        name=name,
        email=Email(email or f"user-{str(user_id)[:8]}@example.com"),
        password_hash="not-a-real-hash",
        role=role,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_question(
    author: User,
    title: str = "How do I test async code in Python?",
    tags: list[str] | None = None,
    minutes: int = 0,
) -> Question:
    """Build a question created ``minutes`` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="<p>Some longer description of the problem.</p>",
        author_id=author.id,
        author_name=author.name,
        tag_names=[TagName(t) for t in (tags or ["python"])],
        created_at=created,
        updated_at=created,
    )


def make_answer(
    question: Question,
    author: User,
    is_accepted: bool = False,
    minutes: int = 0,
) -> Answer:
    """Build an answer created ``minutes`` after BASE_TIME."""
    created = BASE_TIME + timedelta(minutes=minutes)
    return Answer(
        id=AnswerId(uuid4()),
        question_id=question.id,
        author_id=author.id,
        author_name=author.name,
        content="<p>Use pytest-asyncio and mark the test.</p>",
        is_accepted=is_accepted,
        created_at=created,
        updated_at=created,
    )
