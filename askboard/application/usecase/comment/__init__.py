"""Comment use cases."""

from .create_comment import (
    CommentView,
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)

__all__ = [
    "CommentView",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
]
