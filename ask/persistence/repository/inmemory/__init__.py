"""In-memory repository implementations."""

from .answer import InMemoryAnswerRepository
from .comment import InMemoryCommentRepository
from .question import InMemoryQuestionRepository
from .tag import InMemoryTagRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryAnswerRepository",
    "InMemoryCommentRepository",
    "InMemoryQuestionRepository",
    "InMemoryTagRepository",
    "InMemoryVoteRepository",
]
