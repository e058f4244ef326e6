"""Read-model aggregation.

Merges raw questions, answers and comments with their relations (tags,
author profile) and derived stats (vote counts, answer counts). Missing
relations never raise: they resolve to empty lists, zero counts or
placeholder author fields.
"""

from datetime import datetime
from typing import Optional, Sequence

from ask.domain.model.answer import Answer
from ask.domain.model.comment import Comment
from ask.domain.model.common import as_utc, utc_now
from ask.domain.model.profile import AuthorProfile
from ask.domain.model.question import Question
from ask.domain.model.read_model import (
    AnswerReadModel,
    AuthorDisplay,
    CommentReadModel,
    QuestionReadModel,
)
from ask.domain.model.tag import Tag
from ask.domain.model.vote import AggregateCounts

ANONYMOUS = "anonymous"

# Largest unit first; months and years are approximate
_AGE_UNITS = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("week", 7 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
)


def format_age(timestamp: Optional[datetime], now: Optional[datetime] = None) -> str:
    """Render a timestamp relative to now, e.g. '3 days ago'.

    Args:
        timestamp: Moment to describe (None renders as 'invalid date')
        now: Reference time (defaults to the current time)

    Returns:
        Human readable relative age
    """
    if timestamp is None:
        return "invalid date"

    now = as_utc(now) if now else utc_now()
    seconds = int((now - as_utc(timestamp)).total_seconds())
    suffix = "from now" if seconds < 0 else "ago"
    seconds = abs(seconds)

    if seconds < 60:
        return "just now"

    for unit, unit_seconds in _AGE_UNITS:
        count = seconds // unit_seconds
        if count >= 1:
            plural = "s" if count > 1 else ""
            return f"{count} {unit}{plural} {suffix}"

    return "just now"


def make_snippet(text: str, length: int = 200) -> str:
    """Cut a description down for list views."""
    if len(text) <= length:
        return text
    return text[:length].rstrip() + "..."


def resolve_author(profile: Optional[AuthorProfile]) -> AuthorDisplay:
    """Author display fields with placeholders for anything missing."""
    if profile is None:
        return AuthorDisplay(username="", display_name=ANONYMOUS, reputation=0)

    username = profile.username or ""
    return AuthorDisplay(
        username=username,
        display_name=profile.display_name or username or ANONYMOUS,
        reputation=profile.reputation or 0,
    )


def aggregate_question(
    question: Question,
    related_tags: Optional[Sequence[Tag]] = None,
    vote_summary: Optional[AggregateCounts] = None,
    answer_count: Optional[int] = None,
    now: Optional[datetime] = None,
    snippet_length: int = 200,
) -> QuestionReadModel:
    """Build the read model for one question.

    Args:
        question: Raw question record
        related_tags: Tags attached to the question, in question order
        vote_summary: Vote counts for the question
        answer_count: Number of answers
        now: Reference time for the age text
        snippet_length: Characters kept in the snippet

    Returns:
        Display-ready question
    """
    counts = vote_summary or AggregateCounts()

    return QuestionReadModel(
        id=question.id,
        title=question.title,
        description=question.description,
        snippet=make_snippet(question.description, snippet_length),
        tag_names=[tag.name.root for tag in related_tags or ()],
        likes=counts.likes,
        dislikes=counts.dislikes,
        score=counts.score,
        user_vote=counts.user_vote,
        answer_count=answer_count or 0,
        views=question.views,
        author=resolve_author(question.author),
        creation_timestamp=question.creation_timestamp,
        age=format_age(question.creation_timestamp, now),
    )


def aggregate_comment(
    comment: Comment, now: Optional[datetime] = None
) -> CommentReadModel:
    """Build the read model for one comment."""
    return CommentReadModel(
        id=comment.id,
        content=comment.content,
        author=resolve_author(comment.author),
        creation_timestamp=comment.creation_timestamp,
        age=format_age(comment.creation_timestamp, now),
    )


def aggregate_answer(
    answer: Answer,
    vote_summary: Optional[AggregateCounts] = None,
    comments: Optional[Sequence[Comment]] = None,
    now: Optional[datetime] = None,
) -> AnswerReadModel:
    """Build the read model for one answer.

    Args:
        answer: Raw answer record
        vote_summary: Vote counts for the answer
        comments: Comments on the answer
        now: Reference time for the age text

    Returns:
        Display-ready answer
    """
    counts = vote_summary or AggregateCounts()

    return AnswerReadModel(
        id=answer.id,
        question_id=answer.question_id,
        content=answer.content,
        author=resolve_author(answer.author),
        likes=counts.likes,
        dislikes=counts.dislikes,
        score=counts.score,
        user_vote=counts.user_vote,
        comments=[aggregate_comment(c, now) for c in comments or ()],
        creation_timestamp=answer.creation_timestamp,
        age=format_age(answer.creation_timestamp, now),
    )
