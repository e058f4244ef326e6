"""Ask question use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ask.domain.model import Session
from ask.domain.service import QuestionService
from ask.domain.service.question_service import normalize_tag_names


class AskQuestionRequest(BaseModel):
    """Ask question request."""

    title: str
    description: str
    tag_names: list[str] = Field(default_factory=list)
    session: Optional[Session] = None


class AskQuestionResponse(BaseModel):
    """Ask question response."""

    question_id: str
    title: str
    tag_names: list[str]
    creation_timestamp: Optional[datetime]


class AskQuestionUseCase:
    """Use case for submitting a new question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize ask question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: AskQuestionRequest) -> AskQuestionResponse:
        """Execute ask question flow.

        Args:
            request: Title, description, tags and session

        Returns:
            The created question

        Raises:
            AuthRequiredError: If there is no session
            ValidationError: If the draft is invalid (nothing is sent)
        """
        question = await self.question_service.ask_question(
            session=request.session,
            title=request.title,
            description=request.description,
            tag_names=request.tag_names,
        )

        return AskQuestionResponse(
            question_id=str(question.id),
            title=question.title,
            tag_names=normalize_tag_names(request.tag_names),
            creation_timestamp=question.creation_timestamp,
        )
