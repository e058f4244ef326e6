"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence and adapter layers.
"""

from ask.domain.repository.answer import AnswerRepository
from ask.domain.repository.comment import CommentRepository
from ask.domain.repository.question import QuestionRepository
from ask.domain.repository.tag import TagRepository
from ask.domain.repository.vote import VoteRepository

__all__ = [
    "AnswerRepository",
    "CommentRepository",
    "QuestionRepository",
    "TagRepository",
    "VoteRepository",
]
