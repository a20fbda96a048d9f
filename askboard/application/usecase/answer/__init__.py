"""Answer use cases."""

from .create_answer import (
    AnswerView,
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)
from .set_accepted import SetAcceptedRequest, SetAcceptedResponse, SetAcceptedUseCase

__all__ = [
    "AnswerView",
    "CreateAnswerRequest",
    "CreateAnswerResponse",
    "CreateAnswerUseCase",
    "SetAcceptedRequest",
    "SetAcceptedResponse",
    "SetAcceptedUseCase",
]
