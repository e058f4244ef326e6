"""Domain value objects for the forum."""

from ask.domain.value.identifiers import (
    AnswerId,
    CommentId,
    QuestionId,
    TagId,
    TargetId,
    UserId,
    VoteId,
)
from ask.domain.value.types import (
    ELLIPSIS,
    FilterMode,
    PageToken,
    TagName,
    TargetType,
    VoteType,
)

__all__ = [
    # Identifiers
    "UserId",
    "QuestionId",
    "AnswerId",
    "CommentId",
    "VoteId",
    "TagId",
    "TargetId",
    # Types
    "ELLIPSIS",
    "FilterMode",
    "PageToken",
    "TagName",
    "TargetType",
    "VoteType",
]
