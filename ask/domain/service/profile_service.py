"""Profile domain service."""

from typing import Optional

import logfire

from ask.domain.error import AuthRequiredError
from ask.domain.model.common import sort_newest_first
from ask.domain.model.profile import UserStats
from ask.domain.model.question import Question
from ask.domain.model.session import Session
from ask.domain.repository import (
    AnswerRepository,
    CommentRepository,
    QuestionRepository,
)
from .base import Service


class ProfileService(Service):
    """Domain service for the signed-in user's own activity."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        answer_repository: AnswerRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize profile service.

        Args:
            question_repository: Question repository
            answer_repository: Answer repository
            comment_repository: Comment repository
        """
        self.question_repository = question_repository
        self.answer_repository = answer_repository
        self.comment_repository = comment_repository

    async def get_activity(
        self, session: Optional[Session]
    ) -> tuple[UserStats, list[Question]]:
        """Collect the session user's questions and activity totals.

        Args:
            session: Current session (None when anonymous)

        Returns:
            Activity totals and the user's questions, newest first

        Raises:
            AuthRequiredError: If there is no session
        """
        if session is None:
            raise AuthRequiredError("view your profile")

        with logfire.span("profile_service.get_activity", user_id=session.user_id):
            questions = await self.question_repository.find_by_author(
                session.user_id
            )
            stats = UserStats(
                questions_asked=len(questions),
                answers_posted=await self.answer_repository.count_by_author(
                    session.user_id
                ),
                comments_posted=await self.comment_repository.count_by_author(
                    session.user_id
                ),
            )
            logfire.info(
                "Profile activity loaded",
                questions_asked=stats.questions_asked,
                answers_posted=stats.answers_posted,
                comments_posted=stats.comments_posted,
            )
            return stats, sort_newest_first(questions)
