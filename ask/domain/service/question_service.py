"""Question domain service."""

from typing import Optional, Sequence
from uuid import uuid4

import logfire

from ask.domain.error import AuthRequiredError, NotFoundError, ValidationError
from ask.domain.model.common import utc_now
from ask.domain.model.profile import AuthorProfile
from ask.domain.model.question import Question
from ask.domain.model.session import Session
from ask.domain.repository import QuestionRepository
from ask.domain.value import QuestionId

from .base import Service
from .tag_service import TagService

MAX_TITLE_LENGTH = 300
MAX_TAGS = 5
MAX_TAG_LENGTH = 30


def author_of(session: Session) -> AuthorProfile:
    """Profile snapshot stored alongside new content."""
    return AuthorProfile(
        id=session.user_id,
        username=session.username,
        display_name=session.display_name,
        reputation=session.reputation,
    )


def normalize_tag_names(tag_names: Sequence[str]) -> list[str]:
    """Trim, lowercase and de-duplicate tag names, keeping first-seen order."""
    seen: list[str] = []
    for name in tag_names:
        cleaned = name.strip().lower()
        if cleaned and cleaned not in seen:
            seen.append(cleaned)
    return seen


class QuestionService(Service):
    """Domain service for question operations."""

    def __init__(
        self, question_repository: QuestionRepository, tag_service: TagService
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            tag_service: Tag domain service
        """
        self.question_repository = question_repository
        self.tag_service = tag_service

    def validate_draft(
        self, title: str, description: str, tag_names: Sequence[str]
    ) -> list[str]:
        """Check a new question before anything is sent to the store.

        Args:
            title: Question title
            description: Question body
            tag_names: Requested tags

        Returns:
            Normalized tag names

        Raises:
            ValidationError: If any field is unacceptable
        """
        if not title.strip():
            raise ValidationError("Please enter a title")
        if len(title.strip()) > MAX_TITLE_LENGTH:
            raise ValidationError(
                f"Title must be at most {MAX_TITLE_LENGTH} characters"
            )
        if not description.strip():
            raise ValidationError("Please enter a description")

        names = normalize_tag_names(tag_names)
        if not names:
            raise ValidationError("Please add at least one tag")
        if len(names) > MAX_TAGS:
            raise ValidationError(f"A question can have at most {MAX_TAGS} tags")
        too_long = [name for name in names if len(name) > MAX_TAG_LENGTH]
        if too_long:
            raise ValidationError(f"Tag too long: {too_long[0]}")
        return names

    async def ask_question(
        self,
        session: Optional[Session],
        title: str,
        description: str,
        tag_names: Sequence[str],
    ) -> Question:
        """Create a question, creating any tags that do not exist yet.

        Args:
            session: Current session (None when anonymous)
            title: Question title
            description: Question body
            tag_names: Requested tags (1-5)

        Returns:
            The stored question

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the draft is invalid
        """
        if session is None:
            raise AuthRequiredError("ask a question")

        names = self.validate_draft(title, description, tag_names)

        with logfire.span("question_service.ask_question", user_id=session.user_id):
            tags = await self.tag_service.ensure_tags(names)

            question = Question(
                id=QuestionId(str(uuid4())),
                title=title.strip(),
                description=description.strip(),
                author_id=session.user_id,
                author=author_of(session),
                tag_ids=[tag.id for tag in tags],
                creation_timestamp=utc_now(),
            )
            saved = await self.question_repository.save(question)

            logfire.info("Question created", question_id=saved.id, tags=names)
            return saved

    async def open_question(self, question_id: QuestionId) -> Question:
        """Load a question for its detail page, counting the view.

        Args:
            question_id: Question ID

        Returns:
            The question with its view count incremented

        Raises:
            NotFoundError: If the question does not exist
        """
        question = await self.question_repository.record_view(question_id)
        if question is None:
            logfire.warn("Question not found", question_id=question_id)
            raise NotFoundError("Question", question_id)
        return question
