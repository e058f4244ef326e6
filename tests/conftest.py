"""Test configuration and fixtures."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import logfire
import pytest

from ask.domain.model import Answer, Question, Session, Tag
from ask.domain.value import AnswerId, QuestionId, TagId, TagName, UserId

NOW = datetime(2024, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(scope="session", autouse=True)
def configure_test_logfire():
    """Keep telemetry local and quiet during tests."""
    logfire.configure(send_to_logfire=False, console=False)


def make_session(username: str = "alice") -> Session:
    """Helper to build a signed-in session."""
    return Session(
        user_id=UserId(str(uuid4())),
        username=username,
        display_name=username.title(),
    )


def make_tag(name: str) -> Tag:
    """Helper to build a tag with a fresh id."""
    return Tag(id=TagId(str(uuid4())), name=TagName(name))


def make_question(
    title: str = "How do I center a div?",
    description: str = "I have tried everything.",
    tags: list[Tag] | None = None,
    age: timedelta = timedelta(hours=1),
    views: int = 0,
) -> Question:
    """Helper to build a question created ``age`` before NOW."""
    return Question(
        id=QuestionId(str(uuid4())),
        title=title,
        description=description,
        author_id=UserId(str(uuid4())),
        creation_timestamp=NOW - age,
        views=views,
        tag_ids=[tag.id for tag in tags or []],
    )


def make_answer(question: Question, content: str = "Use flexbox.") -> Answer:
    """Helper to build an answer to ``question``."""
    return Answer(
        id=AnswerId(str(uuid4())),
        question_id=question.id,
        author_id=UserId(str(uuid4())),
        content=content,
        creation_timestamp=NOW,
    )
