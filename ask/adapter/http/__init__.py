"""Forum REST backend adapter."""

from .client import ForumHttpClient, create_http_client
from .repository import (
    HttpAnswerRepository,
    HttpCommentRepository,
    HttpQuestionRepository,
    HttpTagRepository,
    HttpVoteRepository,
)

__all__ = [
    "ForumHttpClient",
    "HttpAnswerRepository",
    "HttpCommentRepository",
    "HttpQuestionRepository",
    "HttpTagRepository",
    "HttpVoteRepository",
    "create_http_client",
]
