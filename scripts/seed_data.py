#!/usr/bin/env python3
"""Load demo data into a migrated database.

Creates three accounts (password ``password123``), a few questions with
answers, a comment and some votes. Everything goes through the domain
services, so notifications and tag catalog entries are created the same
way the API creates them. Accounts that already exist are reused; running
the script twice adds the questions twice.
"""

import asyncio
import logging
import sys

import logfire

from askboard.config import Settings
from askboard.domain.model.user import User
from askboard.domain.repository import UserRepository
from askboard.domain.service import (
    AnswerService,
    CommentService,
    QuestionService,
    UserService,
    VoteService,
)
from askboard.domain.value import (
    Email,
    TagName,
    UserRole,
    VoteTargetType,
    VoteType,
)
from askboard.util.di.container import create_container
from askboard.util.logging import setup_logging
from askboard.util.observability import configure_logfire

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"

USERS = [
    ("John Doe", "john@example.com", UserRole.USER),
    ("Jane Smith", "jane@example.com", UserRole.USER),
    ("Admin User", "admin@example.com", UserRole.ADMIN),
]


async def _ensure_user(
    user_service: UserService,
    user_repository: UserRepository,
    name: str,
    email: str,
    role: UserRole,
) -> User:
    existing = await user_repository.find_by_email(Email(email))
    if existing:
        logger.info("Reusing %s", email)
        return existing
    return await user_service.register(name, Email(email), DEMO_PASSWORD, role)


async def seed() -> None:
    """Create the demo content in one transaction."""
    container = create_container()
    try:
        async with container() as request_container:
            user_service = await request_container.get(UserService)
            user_repository = await request_container.get(UserRepository)
            question_service = await request_container.get(QuestionService)
            answer_service = await request_container.get(AnswerService)
            comment_service = await request_container.get(CommentService)
            vote_service = await request_container.get(VoteService)

            john, jane, admin = [
                await _ensure_user(user_service, user_repository, *user)
                for user in USERS
            ]

            jwt_question = await question_service.create_question(
                author=john,
                title="How to implement JWT authentication in Next.js?",
                description=(
                    "<p>I'm trying to implement JWT authentication in my Next.js "
                    "application but facing some issues with token storage and "
                    "validation.</p>\n<ol>\n"
                    "  <li>Where should I store the JWT token?</li>\n"
                    "  <li>How do I validate the token on each request?</li>\n"
                    "  <li>What's the best way to handle token refresh?</li>\n"
                    "</ol>"
                ),
                tag_names=[TagName("nextjs"), TagName("javascript"), TagName("api")],
            )
            hooks_question = await question_service.create_question(
                author=jane,
                title="React useState vs useReducer - When to use which?",
                description=(
                    "<p>I'm confused about when to use <code>useState</code> and "
                    "when to use <code>useReducer</code> in React.</p>"
                ),
                tag_names=[TagName("react"), TagName("javascript")],
            )
            await question_service.create_question(
                author=john,
                title="Best practices for MongoDB schema design",
                description=(
                    "<p>I'm designing a MongoDB schema for a social media "
                    "application. When should I embed documents and when should "
                    "I use references?</p>"
                ),
                tag_names=[TagName("mongodb"), TagName("database")],
            )

            cookie_answer = await answer_service.create_answer(
                author=jane,
                question_id=jwt_question.id,
                content=(
                    "<p>Store the token in an <strong>HTTP-only cookie</strong> "
                    "and validate it in middleware on every request.</p>"
                ),
            )
            await answer_service.create_answer(
                author=john,
                question_id=hooks_question.id,
                content=(
                    "<p>Use <code>useReducer</code> when the next state depends "
                    "on the previous one or several values change together.</p>"
                ),
            )
            await answer_service.set_accepted(
                cookie_answer.id, is_accepted=True, acting_user=john
            )
            await comment_service.create_comment(
                author=admin,
                answer_id=cookie_answer.id,
                content="SameSite=Lax is a sensible default for that cookie.",
            )

            votes = [
                (jane, VoteTargetType.QUESTION, jwt_question.id),
                (admin, VoteTargetType.QUESTION, jwt_question.id),
                (john, VoteTargetType.QUESTION, hooks_question.id),
                (admin, VoteTargetType.ANSWER, cookie_answer.id),
                (john, VoteTargetType.ANSWER, cookie_answer.id),
            ]
            for voter, target_type, target_id in votes:
                await vote_service.cast_vote(
                    voter.id, target_type, target_id, VoteType.UP
                )
    finally:
        await container.close()


def main() -> int:
    """Seed the database and report the demo logins."""
    settings = Settings()

    configure_logfire(settings)
    setup_logging(settings)

    with logfire.span("seed_data"):
        asyncio.run(seed())

    for _, email, _ in USERS:
        logger.info("Demo login: %s / %s", email, DEMO_PASSWORD)
    return 0


if __name__ == "__main__":
    sys.exit(main())
