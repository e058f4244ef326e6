"""Answer use cases."""

from .create_answer import (
    CreateAnswerRequest,
    CreateAnswerResponse,
    CreateAnswerUseCase,
)

__all__ = ["CreateAnswerRequest", "CreateAnswerResponse", "CreateAnswerUseCase"]
