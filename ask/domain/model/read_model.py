"""Display-ready read models.

Read models are what the rendering layer consumes. Optional relations on
the raw records are resolved to concrete defaults here, once, so no
consumer has to guard against missing authors, tags or counts.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from ask.domain.value import AnswerId, CommentId, QuestionId, VoteType


class AuthorDisplay(BaseModel):
    """Author fields as rendered next to content."""

    username: str
    display_name: str
    reputation: int


class CommentReadModel(BaseModel):
    """Comment ready for display."""

    id: CommentId
    content: str
    author: AuthorDisplay
    creation_timestamp: Optional[datetime]
    age: str


class AnswerReadModel(BaseModel):
    """Answer with its votes and comments resolved."""

    id: AnswerId
    question_id: QuestionId
    content: str
    author: AuthorDisplay
    likes: int
    dislikes: int
    score: int
    user_vote: Optional[VoteType]
    comments: list[CommentReadModel]
    creation_timestamp: Optional[datetime]
    age: str


class QuestionReadModel(BaseModel):
    """Question with tags, votes and answer count resolved."""

    id: QuestionId
    title: str
    description: str
    snippet: str
    tag_names: list[str]
    likes: int
    dislikes: int
    score: int
    user_vote: Optional[VoteType]
    answer_count: int
    views: int
    author: AuthorDisplay
    creation_timestamp: Optional[datetime]
    age: str
