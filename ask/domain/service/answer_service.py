"""Answer domain service."""

from typing import Optional
from uuid import uuid4

import logfire

from ask.domain.error import AuthRequiredError, ValidationError
from ask.domain.model.common import utc_now
from ask.domain.model.answer import Answer
from ask.domain.model.session import Session
from ask.domain.repository import AnswerRepository
from ask.domain.value import AnswerId, QuestionId

from .base import Service
from .question_service import author_of


class AnswerService(Service):
    """Domain service for answer operations."""

    def __init__(self, answer_repository: AnswerRepository) -> None:
        """Initialize answer service.

        Args:
            answer_repository: Answer repository
        """
        self.answer_repository = answer_repository

    def check_answer(self, session: Optional[Session], content: str) -> Session:
        """Reject an answer that must not reach the store.

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the content is blank
        """
        if session is None:
            raise AuthRequiredError("answer")
        if not content.strip():
            raise ValidationError("Answer cannot be empty")
        return session

    async def post_answer(
        self, session: Optional[Session], question_id: QuestionId, content: str
    ) -> Answer:
        """Post an answer to a question.

        Args:
            session: Current session (None when anonymous)
            question_id: Question being answered
            content: Answer text

        Returns:
            The stored answer

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the content is blank
        """
        session = self.check_answer(session, content)

        with logfire.span(
            "answer_service.post_answer",
            question_id=question_id,
            user_id=session.user_id,
        ):
            answer = Answer(
                id=AnswerId(str(uuid4())),
                question_id=question_id,
                author_id=session.user_id,
                author=author_of(session),
                content=content.strip(),
                creation_timestamp=utc_now(),
            )
            saved = await self.answer_repository.save(answer)
            logfire.info("Answer posted", answer_id=saved.id)
            return saved
