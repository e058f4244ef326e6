"""Domain model entities for the forum."""

from ask.domain.model.answer import Answer
from ask.domain.model.comment import Comment
from ask.domain.model.profile import AuthorProfile, UserStats
from ask.domain.model.question import Question
from ask.domain.model.session import Session
from ask.domain.model.tag import Tag
from ask.domain.model.vote import (
    AggregateCounts,
    Vote,
    VoteAction,
    VoteKey,
    VoteState,
    VoteTransition,
)

__all__ = [
    "AggregateCounts",
    "Answer",
    "AuthorProfile",
    "Comment",
    "Question",
    "Session",
    "Tag",
    "UserStats",
    "Vote",
    "VoteAction",
    "VoteKey",
    "VoteState",
    "VoteTransition",
]
