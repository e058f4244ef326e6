"""Create answer use case."""

from datetime import datetime
from typing import Optional

import logfire
from pydantic import BaseModel

from ask.domain.error import NotFoundError
from ask.domain.model import Session
from ask.domain.repository import QuestionRepository
from ask.domain.service import AnswerService
from ask.domain.value import QuestionId


class CreateAnswerRequest(BaseModel):
    """Create answer request."""

    question_id: str
    content: str
    session: Optional[Session] = None


class CreateAnswerResponse(BaseModel):
    """Create answer response."""

    answer_id: str
    question_id: str
    content: str
    creation_timestamp: Optional[datetime]


class CreateAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        answer_service: AnswerService,
        question_repository: QuestionRepository,
    ) -> None:
        """Initialize create answer use case.

        Args:
            answer_service: Answer domain service
            question_repository: Question repository
        """
        self.answer_service = answer_service
        self.question_repository = question_repository

    async def execute(self, request: CreateAnswerRequest) -> CreateAnswerResponse:
        """Execute create answer flow.

        Args:
            request: Create answer request

        Returns:
            The stored answer

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the content is blank
            NotFoundError: If the question does not exist
        """
        question_id = QuestionId(request.question_id)

        with logfire.span("create_answer.execute", question_id=question_id):
            # Auth and content checks come before any store access
            self.answer_service.check_answer(request.session, request.content)

            question = await self.question_repository.find_by_id(question_id)
            if question is None:
                raise NotFoundError("Question", question_id)

            answer = await self.answer_service.post_answer(
                request.session, question_id, request.content
            )

            return CreateAnswerResponse(
                answer_id=str(answer.id),
                question_id=str(answer.question_id),
                content=answer.content,
                creation_timestamp=answer.creation_timestamp,
            )
